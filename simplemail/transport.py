from __future__ import annotations

import logging
import smtplib
from typing import Protocol, Sequence

import boto3
from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    EndpointConnectionError,
    ReadTimeoutError,
)

logger = logging.getLogger(__name__)


class MailError(Exception):
    """Raised when mail sending fails."""


class TransportError(MailError):
    """Raised when the transport cannot deliver a message."""


class TransportConnectionError(TransportError):
    """Raised when the mail server is unreachable (network/timeout)."""


class TransportAuthError(TransportError):
    """Raised when the mail server rejects the credentials."""


class TransportRejectedError(TransportError):
    """Raised when the mail server refuses the sender, recipients or data."""


class MailTransport(Protocol):
    provider: str

    def deliver(self, from_email: str, recipients: Sequence[str], message: bytes) -> None: ...


class SmtpTransport:
    provider = "smtp"

    def __init__(
        self,
        server: str,
        port: str | int,
        *,
        username: str | None = None,
        password: str | None = None,
        local_hostname: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        self._server = server
        self._port = int(port)
        self._username = username
        self._password = password or ""
        self._local_hostname = local_hostname
        self._timeout = timeout

    def deliver(self, from_email: str, recipients: Sequence[str], message: bytes) -> None:
        try:
            with smtplib.SMTP(
                self._server, self._port, local_hostname=self._local_hostname, timeout=self._timeout
            ) as client:
                client.ehlo()
                if client.has_extn("starttls"):
                    client.starttls()
                    client.ehlo()
                if self._username:
                    client.login(self._username, self._password)
                refused = client.sendmail(from_email, list(recipients), message)
        except smtplib.SMTPAuthenticationError as exc:
            logger.warning("SMTP authentication failed for %s@%s:%s", self._username, self._server, self._port)
            raise TransportAuthError(f"SMTP authentication failed: {exc}") from exc
        except (smtplib.SMTPRecipientsRefused, smtplib.SMTPSenderRefused, smtplib.SMTPDataError) as exc:
            logger.warning("SMTP server %s:%s rejected the message: %s", self._server, self._port, exc)
            raise TransportRejectedError(f"SMTP server rejected the message: {exc}") from exc
        except (smtplib.SMTPServerDisconnected, smtplib.SMTPConnectError) as exc:
            logger.warning("SMTP server %s:%s disconnected: %s", self._server, self._port, exc)
            raise TransportConnectionError(f"SMTP server disconnected: {exc}") from exc
        except smtplib.SMTPException as exc:
            logger.warning("SMTP error from %s:%s: %s", self._server, self._port, exc)
            raise TransportError(f"SMTP error: {exc}") from exc
        except OSError as exc:
            logger.warning("SMTP connection to %s:%s failed: %s", self._server, self._port, exc)
            raise TransportConnectionError(f"SMTP connection failed: {exc}") from exc
        if refused:
            logger.warning("SMTP server %s:%s refused recipients: %s", self._server, self._port, refused)
            raise TransportRejectedError(f"SMTP server refused recipients: {refused}")
        logger.info("Mail sent via %s:%s to %s recipients", self._server, self._port, len(recipients))


class SESRawTransport:
    provider = "ses"

    def __init__(
        self,
        *,
        aws_region: str,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        aws_session_token: str | None = None,
        client=None,
    ) -> None:
        client_kwargs = {"region_name": aws_region}
        if aws_access_key_id and aws_secret_access_key:
            client_kwargs["aws_access_key_id"] = aws_access_key_id
            client_kwargs["aws_secret_access_key"] = aws_secret_access_key
            if aws_session_token:
                client_kwargs["aws_session_token"] = aws_session_token
        self._client = client or boto3.client("sesv2", **client_kwargs)

    def deliver(self, from_email: str, recipients: Sequence[str], message: bytes) -> None:
        # Destination is the envelope; visible headers come from the raw message.
        request = {
            "FromEmailAddress": from_email,
            "Destination": {"ToAddresses": list(recipients)},
            "Content": {"Raw": {"Data": message}},
        }
        try:
            response = self._client.send_email(**request)
        except (EndpointConnectionError, ConnectionClosedError, ReadTimeoutError) as exc:
            logger.warning("SES connection error: %s", exc)
            raise TransportConnectionError(f"SES connection failed: {exc}") from exc
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            logger.warning("SES rejected the message (code=%s)", code)
            if code in {"AccessDeniedException", "UnrecognizedClientException", "InvalidClientTokenId"}:
                raise TransportAuthError(f"SES authentication failed: {exc}") from exc
            raise TransportRejectedError(f"SES rejected the message: {exc}") from exc
        except BotoCoreError as exc:
            raise TransportError(f"SES error: {exc}") from exc
        logger.info("Mail sent via SES message_id=%s", response.get("MessageId"))
