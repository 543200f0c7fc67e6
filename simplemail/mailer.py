from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Callable, Optional

from .config import TRANSPORT_SES, Settings
from .composer import render
from .models import Email
from .transport import MailError, MailTransport, SESRawTransport, SmtpTransport

logger = logging.getLogger(__name__)


def transport_for(email: Email) -> SmtpTransport:
    """SMTP transport built from the server, port and credentials carried by the email."""
    return SmtpTransport(
        email.server,
        email.port,
        username=email.username or None,
        password=email.password or None,
    )


def build_transport(settings: Settings) -> MailTransport:
    """
    Transport selection:
    - SMTP is default.
    - ``ses`` requires an AWS region.
    """
    if settings.transport == TRANSPORT_SES:
        if not settings.aws_region or not settings.aws_region.strip():
            raise MailError("No AWS region configured: set AWS_REGION or AWS_DEFAULT_REGION.")
        return SESRawTransport(
            aws_region=settings.aws_region.strip(),
            aws_access_key_id=settings.aws_access_key_id,
            aws_secret_access_key=settings.aws_secret_access_key,
            aws_session_token=settings.aws_session_token,
        )
    return SmtpTransport(
        settings.smtp_server,
        settings.smtp_port,
        username=settings.smtp_username,
        password=settings.smtp_password,
    )


def send(
    email: Email,
    transport: Optional[MailTransport] = None,
    *,
    rng: Optional[random.Random] = None,
    now: Optional[Callable[[], datetime]] = None,
) -> str:
    """
    Render the email in full, then hand it to the transport.

    Delivery goes to to, cc and bcc. Transport errors reach the caller as raised.
    Returns the rendered message.
    """
    message = render(email, rng=rng, now=now)
    transport = transport or transport_for(email)
    recipients = email.recipients()
    logger.info("Sending %r via %s to %s recipients", email.subject, transport.provider, len(recipients))
    transport.deliver(email.from_email, recipients, message.encode("utf-8"))
    return message
