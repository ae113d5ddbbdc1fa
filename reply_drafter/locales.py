# reply_drafter/locales.py

"""
Static keyword and template tables, one LocalePack per language.

Adding a language means adding a LocalePack to LOCALES; the classifier and
composer only read these tables.
"""

from dataclasses import dataclass
from string import Template
from types import MappingProxyType
from typing import Mapping, Tuple

from .models import Branch, IntentFlags

DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class Clause:
    """A placeholder filled with one of two texts depending on an intent flag."""

    name: str
    flag: str
    when_true: str
    when_false: str = ""

    def render(self, intent: IntentFlags) -> str:
        return self.when_true if getattr(intent, self.flag) else self.when_false


@dataclass(frozen=True)
class ReplyTemplate:
    tone: str
    body: Template
    remarks: str
    clauses: Tuple[Clause, ...] = ()


@dataclass(frozen=True)
class LocalePack:
    code: str
    label: str
    urgent_keywords: Tuple[str, ...]
    professional_keywords: Tuple[str, ...]
    request_phrases: Tuple[str, ...]
    complaint_phrases: Tuple[str, ...]
    templates: Mapping[Branch, ReplyTemplate]
    subject_placeholder: str
    subject_reference_placeholder: str
    sender_placeholder: str
    reply_prefix: str = "Re: "


# ============================================================
# English
# ============================================================

_EN_TEMPLATES = {
    Branch.URGENT: ReplyTemplate(
        tone="responsive and efficient",
        body=Template("""Hello,

Thank you for your message. I have noted the urgent nature of your request.

${question_clause}${request_clause}I will get back to you as soon as possible with a detailed answer.

In the meantime, feel free to contact me if you need any further information.

Best regards,
[Your name]"""),
        remarks=(
            "⚠️ Email flagged as urgent - prioritized reply. "
            "Check whether any immediate action is required."
        ),
        clauses=(
            Clause("question_clause", "is_question", "Regarding your question, "),
            Clause("request_clause", "is_request", "I will handle your request as a priority and "),
        ),
    ),
    Branch.PROFESSIONAL_COMPLAINT: ReplyTemplate(
        tone="empathetic and professional",
        body=Template("""Hello,

Thank you for taking the time to contact me.

I understand your concern and I am sorry for the inconvenience you have experienced. Your feedback is valuable and helps me improve my services.

I will look into the situation in detail and propose a suitable solution as soon as possible.

I remain at your disposal for any further information.

Best regards,
[Your name]"""),
        remarks=(
            "💼 Professional email with a complaint - an empathetic tone is recommended. "
            "Propose a concrete solution if possible."
        ),
    ),
    Branch.PROFESSIONAL_REQUEST: ReplyTemplate(
        tone="professional",
        body=Template("""Hello,

Thank you for your message.

I have noted your request regarding ${subject_ref}. I will review it carefully and get back to you with the necessary information.

${question_clause}I commit to providing you with a complete answer by [specify deadline].

I remain at your disposal,

Best regards,
[Your name]"""),
        remarks=(
            "💼 Professional email with a request. Personalize the response deadline "
            "and add specific details if needed."
        ),
        clauses=(
            Clause(
                "question_clause",
                "is_question",
                "To answer your question, I need to gather a few details. ",
            ),
        ),
    ),
    Branch.PROFESSIONAL_STANDARD: ReplyTemplate(
        tone="professional",
        body=Template("""Hello,

Thank you for your message.

I have read your email and the information you sent me.

${followup_clause}

Do not hesitate to contact me again if you have any further questions.

Best regards,
[Your name]"""),
        remarks=(
            "💼 Standard professional email. Adapt the content to the specific "
            "context of the exchange."
        ),
        clauses=(
            Clause(
                "followup_clause",
                "is_question",
                "Regarding your question, I will send you a detailed answer shortly.",
                "I will get back to you soon with a complete reply.",
            ),
        ),
    ),
    Branch.PERSONAL_QUESTION: ReplyTemplate(
        tone="warm and friendly",
        body=Template("""Hi,

Thanks so much for your message!

${opening_clause}I'll get back to you in more detail very soon.

Let me know if you have any other questions!

Cheers,
[Your first name]"""),
        remarks=(
            "👤 Personal email with a question. You can adopt a more relaxed "
            "and personal tone."
        ),
        clauses=(
            Clause(
                "opening_clause",
                "is_request",
                "Of course, I'd be happy to look into it. ",
                "About your question, ",
            ),
        ),
    ),
    Branch.PERSONAL_STANDARD: ReplyTemplate(
        tone="warm and friendly",
        body=Template("""Hi,

Thanks for your message, it's great to hear from you!

Thank you for the news. I've taken note and will get back to you very soon.

Talk soon!

Cheers,
[Your first name]"""),
        remarks=(
            "👤 Personal email. Feel free to adapt the tone to your relationship "
            "with the sender."
        ),
    ),
}

ENGLISH = LocalePack(
    code="en",
    label="English",
    urgent_keywords=("urgent", "asap", "immediate", "quickly", "important"),
    professional_keywords=(
        "meeting", "project", "contract", "invoice", "quote", "company", "business",
    ),
    request_phrases=("could you", "would you", "please", "kindly"),
    complaint_phrases=("problem", "error", "disappointed", "unsatisfied"),
    templates=MappingProxyType(_EN_TEMPLATES),
    subject_placeholder="No subject",
    subject_reference_placeholder="this matter",
    sender_placeholder="Unknown sender",
)


# ============================================================
# French
# ============================================================

_FR_TEMPLATES = {
    Branch.URGENT: ReplyTemplate(
        tone="réactif et efficace",
        body=Template("""Bonjour,

Je vous remercie pour votre message. J'ai bien pris note du caractère urgent de votre demande.

${question_clause}${request_clause}Je reviendrai vers vous dans les plus brefs délais avec une réponse détaillée.

Dans l'intervalle, n'hésitez pas à me contacter si vous avez besoin d'informations complémentaires.

Cordialement,
[Votre nom]"""),
        remarks=(
            "⚠️ Email marqué comme urgent - réponse priorisée. "
            "Vérifiez si des actions immédiates sont nécessaires."
        ),
        clauses=(
            Clause("question_clause", "is_question", "Concernant votre question, "),
            Clause("request_clause", "is_request", "Je vais traiter votre demande en priorité et "),
        ),
    ),
    Branch.PROFESSIONAL_COMPLAINT: ReplyTemplate(
        tone="empathique et professionnel",
        body=Template("""Bonjour,

Je vous remercie d'avoir pris le temps de me contacter.

Je comprends votre préoccupation et je suis désolé(e) pour les désagréments que vous avez rencontrés. Votre retour est précieux et me permet d'améliorer mes services.

Je vais examiner la situation en détail et vous proposer une solution adaptée dans les meilleurs délais.

Je reste à votre disposition pour toute information complémentaire.

Cordialement,
[Votre nom]"""),
        remarks=(
            "💼 Email professionnel avec réclamation - ton empathique recommandé. "
            "Proposez une solution concrète si possible."
        ),
    ),
    Branch.PROFESSIONAL_REQUEST: ReplyTemplate(
        tone="professionnel et bienveillant",
        body=Template("""Bonjour,

Je vous remercie pour votre message.

J'ai bien pris note de votre demande concernant ${subject_ref}. Je vais l'étudier attentivement et reviendrai vers vous avec les informations nécessaires.

${question_clause}Je m'engage à vous fournir une réponse complète d'ici [préciser délai].

Restant à votre disposition,

Cordialement,
[Votre nom]"""),
        remarks=(
            "💼 Email professionnel avec demande. Personnalisez le délai de réponse "
            "et ajoutez des détails spécifiques si nécessaire."
        ),
        clauses=(
            Clause(
                "question_clause",
                "is_question",
                "Pour répondre à votre question, je dois rassembler quelques éléments. ",
            ),
        ),
    ),
    Branch.PROFESSIONAL_STANDARD: ReplyTemplate(
        tone="professionnel et bienveillant",
        body=Template("""Bonjour,

Je vous remercie pour votre message.

J'ai bien pris connaissance de votre email et des informations que vous m'avez transmises.

${followup_clause}

N'hésitez pas à me recontacter si vous avez des questions complémentaires.

Cordialement,
[Votre nom]"""),
        remarks=(
            "💼 Email professionnel standard. Adaptez le contenu selon le contexte "
            "spécifique de l'échange."
        ),
        clauses=(
            Clause(
                "followup_clause",
                "is_question",
                "Concernant votre question, je vais vous apporter une réponse détaillée sous peu.",
                "Je reviendrai vers vous prochainement avec un retour complet.",
            ),
        ),
    ),
    Branch.PERSONAL_QUESTION: ReplyTemplate(
        tone="chaleureux et bienveillant",
        body=Template("""Bonjour,

Merci beaucoup pour ton message !

${opening_clause}Je vais te répondre plus en détail très bientôt.

N'hésite pas si tu as d'autres questions !

Amicalement,
[Votre prénom]"""),
        remarks=(
            "👤 Email personnel avec question. Vous pouvez adopter un ton plus "
            "détendu et personnalisé."
        ),
        clauses=(
            Clause(
                "opening_clause",
                "is_request",
                "Bien sûr, je vais regarder ça avec plaisir. ",
                "Concernant ta question, ",
            ),
        ),
    ),
    Branch.PERSONAL_STANDARD: ReplyTemplate(
        tone="chaleureux et bienveillant",
        body=Template("""Bonjour,

Merci pour ton message, ça me fait plaisir d'avoir de tes nouvelles !

Je te remercie pour ces informations. Je prends note et je reviens vers toi très vite.

À bientôt !

Amicalement,
[Votre prénom]"""),
        remarks=(
            "👤 Email personnel. N'hésitez pas à adapter le ton selon votre "
            "relation avec l'expéditeur."
        ),
    ),
}

FRENCH = LocalePack(
    code="fr",
    label="Français",
    urgent_keywords=("urgent", "asap", "immédiat", "rapidement", "important"),
    professional_keywords=(
        "réunion", "meeting", "projet", "contrat", "facture", "devis", "société", "entreprise",
    ),
    request_phrases=("pouvez-vous", "pourriez-vous", "merci de", "please"),
    complaint_phrases=("problème", "erreur", "déçu", "insatisfait"),
    templates=MappingProxyType(_FR_TEMPLATES),
    subject_placeholder="Sans objet",
    subject_reference_placeholder="ce sujet",
    sender_placeholder="Expéditeur inconnu",
)


LOCALES: Mapping[str, LocalePack] = MappingProxyType({
    ENGLISH.code: ENGLISH,
    FRENCH.code: FRENCH,
})


def get_locale(code: str = DEFAULT_LOCALE) -> LocalePack:
    """Look up a locale pack by its code (case-insensitive)."""
    key = (code or DEFAULT_LOCALE).strip().lower()
    try:
        return LOCALES[key]
    except KeyError:
        raise ValueError(
            f"Unknown locale {code!r}. Available: {', '.join(sorted(LOCALES))}"
        ) from None
