"""Heuristic résumé field extraction for Brazilian Portuguese CVs."""

from cv_extractor.profile.documents import DocumentDecodeError
from cv_extractor.profile.models import CandidateProfile, Seniority
from cv_extractor.profile.resume_parser import extract_candidate_profile, parse_resume

__all__ = [
    "CandidateProfile",
    "DocumentDecodeError",
    "Seniority",
    "extract_candidate_profile",
    "parse_resume",
]
