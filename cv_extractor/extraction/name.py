"""Candidate name heuristic."""

from collections.abc import Iterable

from cv_extractor.extraction.vocabulary import NAME_EXCLUDED_TERMS, NAME_LINE_PATTERN

NAME_MAX_LENGTH = 100


def looks_like_name(line: str) -> bool:
    """True for a label-free, alphabetic-only line."""
    lower = line.lower()
    if "@" in lower:
        return False
    if any(term in lower for term in NAME_EXCLUDED_TERMS):
        return False
    return bool(NAME_LINE_PATTERN.match(line))


def extract_name(lines: Iterable[str]) -> str:
    """Return the first line that looks like a person's name, or ''.

    Résumé headers usually open with the candidate's name on its own line,
    so the first qualifying line is taken.
    """
    for line in lines:
        if looks_like_name(line):
            return line[:NAME_MAX_LENGTH]
    return ""
