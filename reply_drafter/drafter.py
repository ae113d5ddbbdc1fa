# reply_drafter/drafter.py

from typing import Optional

from .classifier import classify, detect_intent
from .composer import compose
from .locales import DEFAULT_LOCALE
from .models import Category, EmailDraftRequest, GeneratedReply
from .utils.logging import get_logger

logger = get_logger(__name__)


def generate_reply(
    request: EmailDraftRequest,
    locale: Optional[str] = None,
) -> GeneratedReply:
    """
    - Classify the email (body + subject)
    - Detect question / request / complaint in the body
    - Fill the matching reply template
    The sender is never analyzed. Blank bodies are not rejected here; they
    come out as a standard personal reply.
    """
    locale = locale or DEFAULT_LOCALE

    category = classify(request.body, request.subject, locale=locale)
    intent = detect_intent(request.body, locale=locale)
    reply = compose(category, intent, request.subject, locale=locale)

    logger.debug(
        "Drafted %s reply (question=%s, request=%s, complaint=%s)",
        category.value,
        intent.is_question,
        intent.is_request,
        intent.is_complaint,
    )
    return reply


_CATEGORY_LABELS = {
    Category.URGENT: "⚡ URGENT",
    Category.PROFESSIONAL: "💼 PROFESSIONAL",
    Category.PERSONAL: "👤 PERSONAL",
}


def print_draft(reply: GeneratedReply) -> None:
    print("=" * 60)
    print("REPLY DRAFT (review before sending)")
    print("=" * 60)
    print(f"Category : {_CATEGORY_LABELS[reply.category]}")
    print(f"Subject  : {reply.subject}")
    print(f"Tone     : {reply.tone}")
    print("\nDraft:")
    print(reply.body)
    print("\nRemarks:")
    print(reply.remarks)
    print("-" * 60)
