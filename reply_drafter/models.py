# reply_drafter/models.py

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
import uuid


class Category(str, Enum):
    URGENT = "urgent"
    PROFESSIONAL = "professional"
    PERSONAL = "personal"


@dataclass(frozen=True)
class IntentFlags:
    """Independent signals read from the email body (not mutually exclusive)."""

    is_question: bool = False
    is_request: bool = False
    is_complaint: bool = False


@dataclass
class EmailDraftRequest:
    body: str
    subject: str = ""
    sender: str = ""   # display / history only, never analyzed

    def is_blank(self) -> bool:
        return not (self.body or "").strip()


@dataclass
class GeneratedReply:
    subject: str
    body: str
    tone: str
    remarks: str
    category: Category


@dataclass(frozen=True)
class HistoryEntry:
    sender: str
    subject: str
    body: str
    category: Category
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Branch(str, Enum):
    """Template slot chosen from the category and the intent flags."""

    URGENT = "urgent"
    PROFESSIONAL_COMPLAINT = "professional_complaint"
    PROFESSIONAL_REQUEST = "professional_request"
    PROFESSIONAL_STANDARD = "professional_standard"
    PERSONAL_QUESTION = "personal_question"
    PERSONAL_STANDARD = "personal_standard"
