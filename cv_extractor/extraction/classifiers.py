"""Keyword classifiers for seniority and desired role."""

from cv_extractor.extraction.vocabulary import DEFAULT_SENIORITY, ROLE_KEYWORDS, SENIORITY_RULES
from cv_extractor.profile.models import Seniority
from cv_extractor.utils.text_processing import contains_keyword


def classify_seniority(lowered_text: str) -> Seniority:
    """Map keyword presence to a seniority level.

    Groups are checked in fixed order (Senior, Pleno, Intern); the first
    group with any keyword anywhere in the text wins, else Junior.
    """
    for keywords, level in SENIORITY_RULES:
        if any(contains_keyword(lowered_text, kw) for kw in keywords):
            return level
    return DEFAULT_SENIORITY


def classify_role(lowered_text: str) -> str:
    """Return the earliest ROLE_KEYWORDS entry found in the text, capitalized."""
    for role in ROLE_KEYWORDS:
        if contains_keyword(lowered_text, role):
            return role[0].upper() + role[1:]
    return ""
