from __future__ import annotations

import base64
import random
from datetime import datetime
from email.utils import format_datetime
from typing import Callable, List, Optional

from .attachment import CRLF, render_attachment
from .config import CONTENT_TYPE_ALTERNATIVE, DEFAULT_HOST_NAME
from .models import Email, derive_content_type, is_multipart
from .tokens import gen_boundary, gen_id


def local_now() -> datetime:
    return datetime.now().astimezone()


def render(
    email: Email,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> str:
    """
    Render the email as it goes over the wire.

    The email is never modified: the content type is derived on each call, and a
    fresh boundary (plus a second one for a nested alternative part) and
    Message-ID are drawn every time.
    """
    content_type = derive_content_type(email)
    multipart = is_multipart(content_type)
    boundary = gen_boundary(rng) if multipart else ""

    parts: List[str] = [f"Content-Type: {content_type}"]
    if multipart:
        parts.append(f'; boundary="{boundary}"')
    parts.append(CRLF)
    parts.extend(_render_headers(email, rng=rng, now=now or local_now))

    if multipart:
        parts.append(f"{CRLF}--{boundary}{CRLF}")

    if email.text_body and email.html_body and content_type != CONTENT_TYPE_ALTERNATIVE:
        inner = gen_boundary(rng)
        parts.append(f'Content-Type: {CONTENT_TYPE_ALTERNATIVE}; boundary="{inner}"{CRLF}')
        parts.append(f"--{inner}{CRLF}")
        parts.append(_render_text(email, inner))
        parts.append(_render_html(email, inner))
        parts = [_terminate(parts) + CRLF]
        parts.append(f"--{boundary}{CRLF}")
    else:
        parts.append(_render_text(email, boundary))
        parts.append(_render_html(email, boundary))

    for attachment in email.attachments:
        parts.append(render_attachment(attachment))
        parts.append(f"--{boundary}{CRLF}")

    if multipart:
        return _terminate(parts)
    return "".join(parts)


def _render_headers(email: Email, *, rng: Optional[random.Random], now: Callable[[], datetime]) -> List[str]:
    if email.from_name:
        from_line = f'"{email.from_name}" <{email.from_email}>'
    else:
        from_line = email.from_email

    headers = [
        "MIME-Version: 1.0",
        f"From: {from_line}",
    ]
    if email.sender:
        headers.append(f"Sender: {email.sender}")
    if email.reply_to:
        headers.append(f"Reply-To: {', '.join(email.reply_to)}")
    headers.append(f"To: {', '.join(email.to)}")
    if email.cc:
        headers.append(f"CC: {', '.join(email.cc)}")
    headers.append(f"Subject: {email.subject}")
    headers.append(f"Date: {format_datetime(now())}")

    if email.x_priority:
        headers.append(f"X-Priority: {email.x_priority}")
    if email.x_msmail_priority:
        headers.append(f"X-MSMail-Priority: {email.x_msmail_priority}")
    if email.importance:
        headers.append(f"Importance: {email.importance}")
    if email.trace_id:
        headers.append(f"X-NSTraceID: {email.trace_id}")

    headers.append(f"Message-ID: <{gen_id(rng)}@{email.host_name or DEFAULT_HOST_NAME}>")
    # BCC is envelope-only and never rendered.
    return [header + CRLF for header in headers]


def _render_text(email: Email, boundary: str) -> str:
    if not email.text_body:
        return ""
    part = (
        f'Content-Type: text/plain; charset="{email.charset}"{CRLF}'
        f"MIME-Version: 1.0{CRLF}"
        f"{CRLF}"
        f"{email.text_body}{CRLF}{CRLF}"
    )
    if boundary:
        part += f"--{boundary}{CRLF}"
    return part


def _render_html(email: Email, boundary: str) -> str:
    if not email.html_body:
        return ""
    encoded = base64.b64encode(email.html_body.encode("utf-8")).decode("ascii")
    part = (
        f'Content-Type: text/html; charset="{email.charset}"{CRLF}'
        f"MIME-Version: 1.0{CRLF}"
        f"Content-Transfer-Encoding: base64{CRLF}"
        f"{CRLF}"
        f"{encoded}{CRLF}{CRLF}"
    )
    if boundary:
        part += f"--{boundary}{CRLF}"
    return part


def _terminate(parts: List[str]) -> str:
    """Turn the trailing ``--boundary`` delimiter into the closing ``--boundary--``."""
    return "".join(parts).rstrip(CRLF) + "--" + CRLF
