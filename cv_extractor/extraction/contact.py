"""Email and LinkedIn extraction."""

from cv_extractor.extraction.vocabulary import EMAIL_PATTERN, LINKEDIN_PATTERN, LINKEDIN_PROFILE_URL


def extract_email(text: str) -> str:
    """Return the first email-shaped substring, case preserved, or ''.

    Later addresses (e.g. in a references section) are ignored.
    """
    match = EMAIL_PATTERN.search(text)
    return match.group(0) if match else ""


def extract_linkedin(text: str) -> str:
    """Return the first linkedin.com/in/ profile as a full https URL, or ''."""
    match = LINKEDIN_PATTERN.search(text)
    if not match:
        return ""
    return LINKEDIN_PROFILE_URL.format(slug=match.group("slug"))
