"""Locale tables (Brazilian Portuguese / English) used by the field extractors."""

import re

from cv_extractor.profile.models import Seniority

# Lines containing any of these are section labels, not a candidate name
NAME_EXCLUDED_TERMS = (
    "curriculum", "vitae", "cv", "resumo", "objetivo", "dados", "pessoais", "contato",
)

# Latin letters (accented included, minus the × and ÷ signs) and whitespace only
NAME_LINE_PATTERN = re.compile(r"^[A-Za-zÀ-ÖØ-öø-ÿ\s]+$")

# Matches begin only where a run of local-part characters begins
EMAIL_PATTERN = re.compile(r"(?<![A-Za-z0-9._-])[A-Za-z0-9._-]+@[A-Za-z0-9._-]+\.[A-Za-z0-9_-]+")

# +55 (11) 99999-9999, 11 999999999, 3333-4444 ...
BR_PHONE_PATTERN = re.compile(
    r"(?P<country>\+55\s?)?"
    r"(?P<area>\(?[0-9]{2}\)?\s?)?"
    r"(?P<local>9[0-9]{4}[-\s]?[0-9]{4}|[0-9]{4}[-\s]?[0-9]{4})"
)

PHONE_MAX_DIGITS = 11

LINKEDIN_PATTERN = re.compile(r"linkedin\.com/in/(?P<slug>[A-Za-z0-9-]+)", re.IGNORECASE)
LINKEDIN_PROFILE_URL = "https://www.linkedin.com/in/{slug}"

# Evaluated top to bottom, first group with any keyword present wins
SENIORITY_RULES: tuple[tuple[tuple[str, ...], Seniority], ...] = (
    (("senior", "sênior", "lead", "especialista"), Seniority.SENIOR),
    (("pleno", "mid-level"), Seniority.PLENO),
    (("estagiario", "estagiário", "intern"), Seniority.INTERN),
)
DEFAULT_SENIORITY = Seniority.JUNIOR

# List order is priority order among overlapping roles
ROLE_KEYWORDS = (
    "desenvolvedor",
    "developer",
    "engenheiro de software",
    "software engineer",
    "analista de sistemas",
    "frontend",
    "backend",
    "fullstack",
    "qa",
    "tester",
    "product owner",
    "scrum master",
    "designer",
)
