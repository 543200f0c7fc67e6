from __future__ import annotations

import base64

from .config import DEFAULT_ATTACHMENT_TYPE, DEFAULT_DISPOSITION
from .models import Attachment

CRLF = "\r\n"


def render_attachment(attachment: Attachment) -> str:
    """Render one attachment as a MIME part with a base64 body."""
    content_type = attachment.content_type or DEFAULT_ATTACHMENT_TYPE
    disposition = attachment.content_disposition or DEFAULT_DISPOSITION

    parts = [f"Content-Type: {content_type}"]
    if attachment.file_name:
        parts.append(f'; name="{attachment.file_name}"')
    parts.append(CRLF)
    if attachment.content_id:
        parts.append(f"Content-ID: <{attachment.content_id}>{CRLF}")
    parts.append(f"Content-Disposition: {disposition}; size={len(attachment.contents)}")
    if attachment.file_name:
        parts.append(f'; filename="{attachment.file_name}"')
        parts.append(f"{CRLF}Content-Description: {attachment.file_name}")
    parts.append(f"{CRLF}Content-Transfer-Encoding: base64{CRLF}{CRLF}")
    parts.append(base64.b64encode(attachment.contents).decode("ascii") + CRLF + CRLF)
    return "".join(parts)
