"""Text normalization shared by the field extractors."""

import unicodedata
from dataclasses import dataclass

MIN_LINE_LENGTH = 3


@dataclass(frozen=True)
class NormalizedText:
    """One document's text in the forms the extractors consume."""

    source: str
    lowered: str
    lines: tuple[str, ...]


def strip_diacritics(text: str) -> str:
    """Remove combining accents, e.g. 'estagiário' -> 'estagiario'."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def fold(text: str) -> str:
    """Lower-case and strip diacritics for keyword comparison."""
    return strip_diacritics(text.lower())


def split_lines(text: str) -> tuple[str, ...]:
    """Trimmed lines longer than MIN_LINE_LENGTH, in document order.

    Only "\\n" separates lines (a trailing "\\r" is trimmed). Lines are
    NFC-composed so accented letters extracted from PDFs as base letter +
    combining mark still read as one letter.
    """
    lines = (unicodedata.normalize("NFC", line).strip() for line in text.split("\n"))
    return tuple(line for line in lines if len(line) > MIN_LINE_LENGTH)


def normalize_text(text: str | None) -> NormalizedText:
    """Build the normalized views of a decoded document. Never raises."""
    source = text or ""
    return NormalizedText(
        source=source,
        lowered=fold(source) if source.strip() else "",
        lines=split_lines(source),
    )


def contains_keyword(lowered_text: str, keyword: str) -> bool:
    """Substring test of a keyword against folded text."""
    return fold(keyword) in lowered_text
