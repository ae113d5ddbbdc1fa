"""
End-to-end tests for generate_reply.
"""
from reply_drafter.drafter import generate_reply, print_draft
from reply_drafter.models import Category, EmailDraftRequest


class TestGenerateReply:
    """Classification, intent and templates wired together"""

    def test_urgent_contract(self):
        reply = generate_reply(EmailDraftRequest(body="This is an urgent contract issue"))
        assert reply.category is Category.URGENT
        assert reply.tone == "responsive and efficient"

    def test_meeting_question(self):
        reply = generate_reply(
            EmailDraftRequest(body="Can we schedule a meeting next week?", subject="Sync")
        )
        assert reply.category is Category.PROFESSIONAL
        assert reply.tone == "professional"
        assert reply.subject == "Re: Sync"
        assert "Regarding your question" in reply.body

    def test_complaint_with_request(self):
        """A complaint wins over a request"""
        reply = generate_reply(
            EmailDraftRequest(body="There is a problem with the invoice, please fix it")
        )
        assert reply.category is Category.PROFESSIONAL
        assert reply.tone == "empathetic and professional"

    def test_personal(self):
        reply = generate_reply(EmailDraftRequest(body="Thanks for dinner last night!"))
        assert reply.category is Category.PERSONAL
        assert reply.tone == "warm and friendly"
        assert reply.remarks

    def test_sender_is_not_analyzed(self):
        """Keywords in the sender do not change the category"""
        reply = generate_reply(
            EmailDraftRequest(body="Hi there", sender="urgent-meeting@company.com")
        )
        assert reply.category is Category.PERSONAL

    def test_blank_body_is_tolerated(self):
        reply = generate_reply(EmailDraftRequest(body="   "))
        assert reply.category is Category.PERSONAL
        assert reply.subject == "Re: No subject"

    def test_french_locale(self):
        reply = generate_reply(
            EmailDraftRequest(body="Pouvez-vous m'envoyer le devis ?", subject="Devis"),
            locale="fr",
        )
        assert reply.category is Category.PROFESSIONAL
        assert reply.subject == "Re: Devis"
        assert "votre demande concernant Devis." in reply.body


class TestPrintDraft:
    def test_prints_all_fields(self, capsys):
        reply = generate_reply(EmailDraftRequest(body="urgent", subject="Server down"))
        print_draft(reply)
        out = capsys.readouterr().out
        assert "URGENT" in out
        assert "Re: Server down" in out
        assert reply.remarks in out
