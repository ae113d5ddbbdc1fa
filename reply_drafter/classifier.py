# reply_drafter/classifier.py

from typing import Iterable

from .locales import DEFAULT_LOCALE, get_locale
from .models import Category, IntentFlags
from .utils.logging import get_logger

logger = get_logger(__name__)


def _contains_any(text: str, phrases: Iterable[str]) -> bool:
    # Plain substring test: "important" matches inside "unimportant".
    return any(p in text for p in phrases)


def classify(body: str, subject: str = "", locale: str = DEFAULT_LOCALE) -> Category:
    """
    Pick the category of an email by keyword matching.

    - Urgent keywords are checked first, in the body and in the subject
    - then professional keywords
    - anything else is personal
    Matching is case-insensitive and never rejects input.
    """
    pack = get_locale(locale)
    lower_body = (body or "").lower()
    lower_subject = (subject or "").lower()

    def matches(keywords: Iterable[str]) -> bool:
        return _contains_any(lower_body, keywords) or _contains_any(lower_subject, keywords)

    if matches(pack.urgent_keywords):
        category = Category.URGENT
    elif matches(pack.professional_keywords):
        category = Category.PROFESSIONAL
    else:
        category = Category.PERSONAL

    logger.debug("Classified email as %s (locale=%s)", category.value, pack.code)
    return category


def detect_intent(body: str, locale: str = DEFAULT_LOCALE) -> IntentFlags:
    """Read question / request / complaint signals from the body only."""
    pack = get_locale(locale)
    text = body or ""
    lower = text.lower()

    return IntentFlags(
        is_question="?" in text,
        is_request=_contains_any(lower, pack.request_phrases),
        is_complaint=_contains_any(lower, pack.complaint_phrases),
    )
