# reply_drafter/composer.py

from .locales import DEFAULT_LOCALE, LocalePack, get_locale
from .models import Branch, Category, GeneratedReply, IntentFlags


def select_branch(category: Category, intent: IntentFlags) -> Branch:
    """
    Map a category and its intent flags to exactly one template slot.

    Urgent ignores complaints. Within professional mail a complaint wins
    over a request.
    """
    if category is Category.URGENT:
        return Branch.URGENT
    if category is Category.PROFESSIONAL:
        if intent.is_complaint:
            return Branch.PROFESSIONAL_COMPLAINT
        if intent.is_request:
            return Branch.PROFESSIONAL_REQUEST
        return Branch.PROFESSIONAL_STANDARD
    if intent.is_question:
        return Branch.PERSONAL_QUESTION
    return Branch.PERSONAL_STANDARD


def reply_subject(subject: str, pack: LocalePack) -> str:
    if not (subject or "").strip():
        return f"{pack.reply_prefix}{pack.subject_placeholder}"
    return f"{pack.reply_prefix}{subject}"


def compose(
    category: Category,
    intent: IntentFlags,
    subject: str = "",
    locale: str = DEFAULT_LOCALE,
) -> GeneratedReply:
    """Fill the template for (category, intent) and build the reply."""
    pack = get_locale(locale)
    template = pack.templates[select_branch(category, intent)]

    values = {clause.name: clause.render(intent) for clause in template.clauses}
    values["subject_ref"] = (subject or "").strip() or pack.subject_reference_placeholder

    return GeneratedReply(
        subject=reply_subject(subject, pack),
        body=template.body.substitute(values),
        tone=template.tone,
        remarks=template.remarks,
        category=category,
    )
