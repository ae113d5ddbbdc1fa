# run_drafter.py

import argparse
import json
import sys
from dataclasses import asdict
from typing import List, Optional

from reply_drafter.config import load_config
from reply_drafter.drafter import print_draft
from reply_drafter.locales import LOCALES
from reply_drafter.models import EmailDraftRequest
from reply_drafter.session import DraftSession
from reply_drafter.utils.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Draft a reply to an email (nothing is sent).",
    )
    parser.add_argument("body", nargs="?", help="Email body; read from stdin when omitted")
    parser.add_argument("--subject", default="", help="Subject of the received email")
    parser.add_argument("--sender", default="", help="Sender of the received email")
    parser.add_argument("--locale", choices=sorted(LOCALES), help="Keyword and template language")
    parser.add_argument("--json", action="store_true", help="Print the draft as JSON")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(locale=args.locale)
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    configure_logging(config.log_level)

    body = args.body if args.body is not None else sys.stdin.read()
    request = EmailDraftRequest(body=body, subject=args.subject, sender=args.sender)

    session = DraftSession(config=config)
    try:
        reply = session.generate(request)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        return 2

    if args.json:
        payload = asdict(reply)
        payload["category"] = reply.category.value
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        print_draft(reply)
    return 0


if __name__ == "__main__":
    sys.exit(main())
