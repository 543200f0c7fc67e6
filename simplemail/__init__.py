"""Build MIME email messages from structured fields and send them."""

from .attachment import render_attachment
from .composer import render
from .mailer import build_transport, send, transport_for
from .models import Attachment, Email
from .readers import AttachmentReadError, FileReader, HttpReader
from .tokens import gen_boundary, gen_id
from .transport import (
    MailError,
    MailTransport,
    SESRawTransport,
    SmtpTransport,
    TransportAuthError,
    TransportConnectionError,
    TransportError,
    TransportRejectedError,
)

__all__ = [
    "Attachment",
    "AttachmentReadError",
    "Email",
    "FileReader",
    "HttpReader",
    "MailError",
    "MailTransport",
    "SESRawTransport",
    "SmtpTransport",
    "TransportAuthError",
    "TransportConnectionError",
    "TransportError",
    "TransportRejectedError",
    "build_transport",
    "gen_boundary",
    "gen_id",
    "render",
    "render_attachment",
    "send",
    "transport_for",
]
