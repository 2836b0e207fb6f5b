"""Résumé field extraction: raw text in, CandidateProfile out."""

import logging

from cv_extractor.config import DocumentsConfig
from cv_extractor.extraction import (
    classify_role,
    classify_seniority,
    extract_email,
    extract_linkedin,
    extract_name,
    extract_phone,
)
from cv_extractor.profile.documents import extract_document_text
from cv_extractor.profile.models import CandidateProfile
from cv_extractor.utils.text_processing import normalize_text

logger = logging.getLogger("cv_extractor.profile")

SUMMARY_MAX_LENGTH = 500


def extract_candidate_profile(raw_text: str) -> CandidateProfile:
    """Infer structured candidate fields from decoded résumé text.

    Pure and stateless: never raises for empty or malformed text, missing
    fields come back as empty strings and seniority defaults to Junior.
    """
    text = normalize_text(raw_text)

    profile = CandidateProfile(
        name=extract_name(text.lines),
        email=extract_email(text.source),
        phone=extract_phone(text.source),
        seniority=classify_seniority(text.lowered),
        desired_role=classify_role(text.lowered),
        linkedin=extract_linkedin(text.source),
        summary=text.source[:SUMMARY_MAX_LENGTH],
    )

    found = profile.found_fields
    logger.info(
        "Extracted profile: %d/5 fields found (%s), seniority %s",
        len(found),
        ", ".join(found) or "none",
        profile.seniority.value,
    )

    return profile


def parse_resume(file_path: str, config: DocumentsConfig | None = None) -> CandidateProfile:
    """Decode a résumé file (PDF, DOCX, TXT or MD) and extract its profile.

    Raises FileNotFoundError, ValueError or DocumentDecodeError when the
    file cannot be turned into text. A document that decodes to nothing is
    not an error; it yields a mostly empty profile.
    """
    text = extract_document_text(file_path, config)
    if not text.strip():
        logger.warning("Resume decoded to empty text: %s", file_path)

    return extract_candidate_profile(text)
