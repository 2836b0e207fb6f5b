"""Tests for the profile extraction entry points."""

import os
import time
import tempfile

import pytest

from cv_extractor import CandidateProfile, Seniority, extract_candidate_profile, parse_resume

SAMPLE_RESUME = """Curriculum Vitae
João da Silva Santos
joao.silva@email.com | (11) 99999-9999
linkedin.com/in/joao-silva-santos

Objetivo
Atuar como Desenvolvedor Backend Pleno

Experiência
Estagiário de TI na Empresa X (2018 - 2019)
Referências: maria@empresa.com.br
"""


@pytest.fixture
def sample_resume_txt():
    """Create a sample text resume file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(SAMPLE_RESUME)
        path = f.name

    yield path
    os.unlink(path)


class TestExtractCandidateProfile:
    def test_full_resume(self):
        profile = extract_candidate_profile(SAMPLE_RESUME)
        assert profile.name == "João da Silva Santos"
        assert profile.email == "joao.silva@email.com"
        assert profile.phone == "11999999999"
        assert profile.seniority == Seniority.PLENO
        assert profile.desired_role == "Desenvolvedor"
        assert profile.linkedin == "https://www.linkedin.com/in/joao-silva-santos"
        assert profile.summary == SAMPLE_RESUME

    def test_seniority_precedence(self):
        profile = extract_candidate_profile("estagiário de TI\nespecialista em backend")
        assert profile.seniority == Seniority.SENIOR

    @pytest.mark.parametrize("text", ["", "   \n\t\n", "\x00\x01@@@###", "12345"])
    def test_never_raises_on_sparse_input(self, text):
        profile = extract_candidate_profile(text)
        assert profile.seniority in set(Seniority)
        assert profile.name == ""
        assert profile.email == ""
        assert profile.summary == text[:500]

    def test_none_input(self):
        assert extract_candidate_profile(None) == CandidateProfile()

    def test_summary_capped_prefix(self):
        text = "Linha de texto do currículo. " * 100
        profile = extract_candidate_profile(text)
        assert len(profile.summary) == 500
        assert text.startswith(profile.summary)

    def test_summary_is_not_filtered(self):
        text = "Maria Souza\nmaria@mail.com\n(21) 3333-4444"
        assert extract_candidate_profile(text).summary == text

    def test_name_capped(self):
        profile = extract_candidate_profile("a" * 300)
        assert len(profile.name) == 100

    def test_idempotent(self):
        assert extract_candidate_profile(SAMPLE_RESUME) == extract_candidate_profile(SAMPLE_RESUME)

    def test_optional_fields_are_empty_strings(self):
        profile = extract_candidate_profile("Sem dados relevantes aqui: 42")
        for value in profile.to_dict().values():
            assert value is not None


class TestParseResume:
    def test_parse_text_resume(self, sample_resume_txt):
        profile = parse_resume(sample_resume_txt)
        assert profile.name == "João da Silva Santos"
        assert profile.email == "joao.silva@email.com"
        assert profile.phone == "11999999999"

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_resume("/nonexistent/curriculo.pdf")

    def test_empty_file_is_not_an_error(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False) as f:
            path = f.name
        try:
            profile = parse_resume(path)
            assert profile == CandidateProfile()
        finally:
            os.unlink(path)


class TestLargeInput:
    def test_long_unbroken_run_is_fast(self):
        start = time.perf_counter()
        profile = extract_candidate_profile("A" * 100_000)
        assert time.perf_counter() - start < 2.0
        assert profile.email == ""
        assert len(profile.summary) == 500
