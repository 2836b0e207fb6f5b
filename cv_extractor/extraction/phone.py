"""Brazilian phone number extraction."""

import re

from cv_extractor.extraction.vocabulary import BR_PHONE_PATTERN, PHONE_MAX_DIGITS


def extract_phone(text: str) -> str:
    """Return area code + local number of the first phone match as digits only.

    The +55 country code is accepted but dropped, so the result never
    exceeds 11 digits (2-digit area code + 9-digit mobile number).
    """
    match = BR_PHONE_PATTERN.search(text)
    if not match:
        return ""

    raw = (match.group("area") or "") + match.group("local")
    return re.sub(r"\D", "", raw)[:PHONE_MAX_DIGITS]
