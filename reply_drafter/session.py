# reply_drafter/session.py

import time
from dataclasses import replace
from typing import Callable, List, Optional

from .config import DrafterConfig, load_config
from .drafter import generate_reply
from .locales import get_locale
from .models import EmailDraftRequest, GeneratedReply, HistoryEntry
from .utils.logging import get_logger

logger = get_logger(__name__)


class DraftSession:
    """
    In-memory state behind one drafting session:
    - the current draft and its editable body
    - the history of processed emails, newest first

    Nothing outlives the session object. Approving a draft only simulates a
    send; no email is transmitted.
    """

    def __init__(
        self,
        config: Optional[DrafterConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if config is None:
            config = load_config()

        self.config = config
        self._sleep = sleep
        self._history: List[HistoryEntry] = []
        self.current: Optional[GeneratedReply] = None
        self.edited_body: str = ""

    # ---------------------------
    # Drafting
    # ---------------------------

    def generate(self, request: EmailDraftRequest) -> GeneratedReply:
        """
        Draft a reply for the request and record it in the history.
        Raises ValueError for a blank body.
        """
        if request.is_blank():
            raise ValueError("Email body is empty. Paste the email you received first.")

        if self.config.delay_seconds:
            self._sleep(self.config.delay_seconds)

        reply = generate_reply(request, locale=self.config.locale)
        self.current = reply
        self.edited_body = reply.body

        pack = get_locale(self.config.locale)
        entry = HistoryEntry(
            sender=(request.sender or "").strip() or pack.sender_placeholder,
            subject=(request.subject or "").strip() or pack.subject_placeholder,
            body=request.body,
            category=reply.category,
        )
        self._history.insert(0, entry)

        logger.info("Generated %s draft %s", reply.category.value, entry.id)
        return reply

    def edit(self, body: str) -> None:
        """Replace the editable body of the current draft."""
        self._require_draft()
        self.edited_body = body

    def approve(self) -> GeneratedReply:
        """
        Return the current draft with the edited body and reset the form.
        This is where a real client would send the reply.
        """
        reply = replace(self._require_draft(), body=self.edited_body)
        logger.info("Approved draft %r (simulated, not sent)", reply.subject)
        self.reset()
        return reply

    def reset(self) -> None:
        """Drop the current draft; history is kept."""
        self.current = None
        self.edited_body = ""

    def _require_draft(self) -> GeneratedReply:
        if self.current is None:
            raise RuntimeError("No draft to work on. Generate a reply first.")
        return self.current

    # ---------------------------
    # History
    # ---------------------------

    @property
    def history(self) -> List[HistoryEntry]:
        """History entries, newest first."""
        return list(self._history)

    def clear_history(self) -> None:
        self._history.clear()
