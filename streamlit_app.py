# streamlit_app.py

import html

import streamlit as st

from reply_drafter.config import DrafterConfig, load_config
from reply_drafter.locales import LOCALES
from reply_drafter.models import Category, EmailDraftRequest, HistoryEntry
from reply_drafter.session import DraftSession
from reply_drafter.utils.logging import configure_logging

# ---------------------------
# Session (survives reruns, not page reloads)
# ---------------------------
if "drafts" not in st.session_state:
    config = load_config()
    configure_logging(config.log_level)
    st.session_state.drafts = DraftSession(config=config)
    st.session_state.edit_mode = False
    st.session_state.flash = ""
    st.session_state.locale = config.locale

session: DraftSession = st.session_state.drafts

# ---------------------------
# Global styles
# ---------------------------
st.set_page_config(
    page_title="Reply Drafter",
    page_icon="✉️",
    layout="wide",
)

st.markdown(
    """
    <style>
    .stApp {
        background: linear-gradient(135deg, #eff6ff 0%, #e0e7ff 100%);
        color: #1f2937;
        font-family: "Segoe UI", system-ui, -apple-system, BlinkMacSystemFont, sans-serif;
    }

    .history-card {
        border-radius: 10px;
        padding: 10px 12px;
        margin-bottom: 10px;
        background: #ffffff;
        border: 1px solid #e5e7eb;
    }

    .history-subject {
        font-weight: 600;
        font-size: 0.9rem;
        white-space: nowrap;
        overflow: hidden;
        text-overflow: ellipsis;
    }

    .history-meta {
        font-size: 0.75rem;
        color: #6b7280;
    }

    .remarks-box {
        border-radius: 8px;
        padding: 10px 12px;
        background: #fefce8;
        border: 1px solid #fde68a;
        font-size: 0.9rem;
    }

    .app-title {
        font-size: 2.2rem;
        font-weight: 800;
        color: #4f46e5;
        text-align: center;
    }

    .app-subtitle {
        font-size: 0.95rem;
        color: #4b5563;
        text-align: center;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# ---------------------------
# Helper functions
# ---------------------------

CATEGORY_ICONS = {
    Category.URGENT: "🔴",
    Category.PROFESSIONAL: "🔵",
    Category.PERSONAL: "🟢",
}


def category_badge(category: Category) -> str:
    labels = {
        Category.URGENT: ("⚡ Urgent", "#ef4444"),
        Category.PROFESSIONAL: ("💼 Professional", "#3b82f6"),
        Category.PERSONAL: ("👤 Personal", "#22c55e"),
    }
    label, color = labels.get(category, ("✉️ Unknown", "#6b7280"))

    return f"""
    <span style="
        background-color:{color};
        color:#ffffff;
        padding:3px 10px;
        border-radius:999px;
        font-size:0.75rem;
        font-weight:600;
        ">
        {label}
    </span>
    """


def render_history_entry(entry: HistoryEntry) -> None:
    icon = CATEGORY_ICONS.get(entry.category, "✉️")
    when = entry.created_at.astimezone().strftime("%H:%M")
    st.markdown(
        f"""
        <div class="history-card">
            <div class="history-meta">{icon} {when}</div>
            <div class="history-subject">{html.escape(entry.subject)}</div>
            <div class="history-meta">From: {html.escape(entry.sender)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def clear_form() -> None:
    st.session_state.email_from = ""
    st.session_state.email_subject = ""
    st.session_state.email_body = ""
    st.session_state.edit_mode = False


def on_generate() -> None:
    request = EmailDraftRequest(
        body=st.session_state.email_body,
        subject=st.session_state.email_subject,
        sender=st.session_state.email_from,
    )
    try:
        reply = session.generate(request)
    except ValueError as ex:
        st.session_state.flash = f"⚠️ {ex}"
        return
    st.session_state.edited_body = reply.body
    st.session_state.edit_mode = False


def on_edit_body() -> None:
    session.edit(st.session_state.edited_body)


def on_approve() -> None:
    reply = session.approve()
    st.session_state.flash = (
        f"✅ Reply approved: {reply.subject}. In a full version this reply would be "
        "sent through your email client."
    )
    clear_form()


def on_cancel() -> None:
    session.reset()
    clear_form()


def on_locale_change() -> None:
    session.config = DrafterConfig(
        locale=st.session_state.locale,
        delay_seconds=session.config.delay_seconds,
        log_level=session.config.log_level,
    )


# ---------------------------
# Header
# ---------------------------

st.markdown('<div class="app-title">✉️ Reply Drafter</div>', unsafe_allow_html=True)
st.markdown(
    '<div class="app-subtitle">Keyword triage • templated reply drafts • human approval</div>',
    unsafe_allow_html=True,
)
st.write("")

# ---------------------------
# Sidebar controls
# ---------------------------

st.sidebar.header("⚙️ Settings")

st.sidebar.selectbox(
    "Language",
    options=sorted(LOCALES),
    format_func=lambda code: LOCALES[code].label,
    key="locale",
    on_change=on_locale_change,
    help="Keyword lists and reply templates used for new drafts.",
)

st.sidebar.markdown("---")
st.sidebar.subheader("🗑 History")
if st.sidebar.button("Clear history", use_container_width=True):
    session.clear_history()
    st.sidebar.success("History cleared.")

st.sidebar.markdown("---")
st.sidebar.caption("Nothing leaves this page • history lasts for this session only.")

if st.session_state.flash.startswith("✅"):
    st.success(st.session_state.flash)
elif st.session_state.flash:
    st.warning(st.session_state.flash)
st.session_state.flash = ""

# ---------------------------
# Main layout
# ---------------------------

col_main, col_history = st.columns([2, 1])

with col_main:
    st.subheader("📄 Received email")
    st.text_input("From (optional)", placeholder="name@example.com", key="email_from")
    st.text_input("Subject", placeholder="Subject of the email...", key="email_subject")
    st.text_area(
        "Email content",
        placeholder="Paste the email you received here...",
        height=200,
        key="email_body",
    )

    has_body = bool((st.session_state.get("email_body") or "").strip())
    if st.button(
        "✉️ Generate a reply",
        disabled=not has_body,
        use_container_width=True,
        type="primary",
    ):
        with st.spinner("Analyzing..."):
            on_generate()

    if session.current is not None:
        reply = session.current
        st.write("---")
        st.markdown(
            f"### Proposed reply &nbsp; {category_badge(reply.category)}",
            unsafe_allow_html=True,
        )
        st.text_input("Reply subject", value=reply.subject, disabled=True)
        st.markdown(f"**Tone:** {reply.tone}")

        if st.session_state.edit_mode:
            st.text_area("Reply", height=300, key="edited_body", on_change=on_edit_body)
        else:
            st.text_area("Reply", value=session.edited_body, height=300, disabled=True)
            if st.button("✏️ Edit"):
                st.session_state.edit_mode = True
                st.session_state.edited_body = session.edited_body
                st.rerun()

        st.markdown(
            f'<div class="remarks-box"><b>Remarks</b><br>{html.escape(reply.remarks)}</div>',
            unsafe_allow_html=True,
        )
        st.write("")

        col_ok, col_cancel = st.columns(2)
        with col_ok:
            st.button("✅ Approve and send", on_click=on_approve, use_container_width=True)
        with col_cancel:
            st.button("🗑 Cancel", on_click=on_cancel, use_container_width=True)

with col_history:
    st.subheader("🕘 History")
    entries = session.history
    if not entries:
        st.info("No email processed yet.")
    else:
        for entry in entries:
            render_history_entry(entry)

# ---------------------------
# How it works
# ---------------------------

st.write("---")
st.subheader("ℹ️ How does it work?")
col_a, col_b, col_c = st.columns(3)
with col_a:
    st.markdown("**1. Analysis**")
    st.write("The email is sorted by keywords into urgent, professional or personal, "
             "and checked for questions, requests and complaints.")
with col_b:
    st.markdown("**2. Suitable reply**")
    st.write("A reply template with the matching tone is filled in for you.")
with col_c:
    st.markdown("**3. Human approval**")
    st.write("You can edit and approve every reply before it goes anywhere. "
             "You stay in control.")
