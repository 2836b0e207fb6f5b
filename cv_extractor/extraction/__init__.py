from cv_extractor.extraction.classifiers import classify_role, classify_seniority
from cv_extractor.extraction.contact import extract_email, extract_linkedin
from cv_extractor.extraction.name import extract_name
from cv_extractor.extraction.phone import extract_phone

__all__ = [
    "classify_role",
    "classify_seniority",
    "extract_email",
    "extract_linkedin",
    "extract_name",
    "extract_phone",
]
