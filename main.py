from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from simplemail import config
from simplemail.composer import render
from simplemail.mailer import build_transport, send
from simplemail.models import Email
from simplemail.readers import HttpReader, reader_for
from simplemail.transport import MailError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Compose a MIME email and send it.")
    parser.add_argument("--to", action="append", default=[])
    parser.add_argument("--cc", action="append", default=[])
    parser.add_argument("--bcc", action="append", default=[])
    parser.add_argument("--reply-to", action="append", default=[])
    parser.add_argument("--subject", default="")
    parser.add_argument("--text", default="", help="plain text body")
    parser.add_argument("--html-file", default=None, help="path to an HTML body")
    parser.add_argument("--attach", action="append", default=[], help="file path or http(s) URL")
    parser.add_argument("--content-type", default="", help="override the derived content type")
    parser.add_argument("--high-priority", action="store_true")
    parser.add_argument("--trace-id", default="")
    parser.add_argument("--dry-run", action="store_true", help="print the rendered message instead of sending")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    try:
        settings = config.Settings.from_env()
    except ValueError as exc:
        logging.error("Missing configuration: %s", exc)
        return 1

    email = Email(
        from_email=settings.from_email,
        from_name=settings.from_name or "",
        reply_to=args.reply_to,
        to=args.to,
        cc=args.cc,
        bcc=args.bcc,
        subject=args.subject,
        text_body=args.text,
        content_type=args.content_type,
        trace_id=args.trace_id,
        host_name=settings.host_name,
    )
    if args.high_priority:
        email.set_high_priority()

    try:
        if args.html_file:
            email.html_body = Path(args.html_file).read_text(encoding="utf-8")
        with HttpReader() as http_reader:
            for source in args.attach:
                email.attach_file(source, reader=reader_for(source, http_reader))
    except (OSError, UnicodeDecodeError, MailError) as exc:
        logging.error("Failed to read input: %s", exc)
        return 1

    if args.dry_run:
        sys.stdout.write(render(email))
        return 0

    try:
        transport = build_transport(settings)
        send(email, transport)
    except MailError as exc:
        logging.exception("Mail sending failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
