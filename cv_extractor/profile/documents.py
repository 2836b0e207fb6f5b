"""Document-to-text decoding for résumé files."""

import logging
from pathlib import Path

from cv_extractor.config import DocumentsConfig

logger = logging.getLogger("cv_extractor.documents")


class DocumentDecodeError(Exception):
    """A supported document could not be converted to text."""


def extract_document_text(file_path: str, config: DocumentsConfig | None = None) -> str:
    """Decode a résumé file into plain text."""
    config = config or DocumentsConfig()
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {file_path}")

    suffix = path.suffix.lower()
    decoder = DECODERS.get(suffix)
    if decoder is None or suffix not in config.allowed_extensions:
        supported = ", ".join(e for e in config.allowed_extensions if e in DECODERS)
        raise ValueError(f"Unsupported resume format: {suffix or '(none)'} (supported: {supported})")

    size = path.stat().st_size
    if size > config.max_file_size_bytes:
        raise ValueError(
            f"Resume file too large: {size} bytes (limit {config.max_file_size_mb} MB)"
        )

    try:
        return decoder(path)
    except Exception as e:
        logger.error("Failed to decode %s: %s", path.name, e)
        raise DocumentDecodeError(f"Failed to read document: {path.name}") from e


def _extract_pdf_text(path: Path) -> str:
    """Extract text from a PDF file using PyPDF2."""
    from PyPDF2 import PdfReader

    reader = PdfReader(str(path))
    pages = []
    for page in reader.pages:
        text = page.extract_text()
        if text:
            pages.append(text)
    return "\n".join(pages)


def _extract_docx_text(path: Path) -> str:
    """Extract paragraph text from a DOCX file using python-docx."""
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())


def _read_plain_text(path: Path) -> str:
    return path.read_text(encoding="utf-8")


DECODERS = {
    ".pdf": _extract_pdf_text,
    ".docx": _extract_docx_text,
    ".txt": _read_plain_text,
    ".md": _read_plain_text,
    ".markdown": _read_plain_text,
}

SUPPORTED_EXTENSIONS = tuple(DECODERS)
