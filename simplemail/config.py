from __future__ import annotations

import os
from dataclasses import dataclass

# --------------------------------
# Defaults

DEFAULT_SERVER = "localhost"
DEFAULT_PORT = "25"
DEFAULT_CHARSET = "UTF-8"
DEFAULT_HOST_NAME = "localhost"

DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"
DEFAULT_DISPOSITION = "attachment"

CONTENT_TYPE_PLAIN = "text/plain"
CONTENT_TYPE_HTML = "text/html"
CONTENT_TYPE_ALTERNATIVE = "multipart/alternative"

# X-Priority / X-MSMail-Priority / Importance
HIGH_PRIORITY = ("1 (Highest)", "High", "High")

BOUNDARY_LENGTH = 35
MESSAGE_ID_LENGTH = 32

TRANSPORT_SMTP = "smtp"
TRANSPORT_SES = "ses"
# --------------------------------


@dataclass
class Settings:
    from_email: str
    from_name: str | None = None
    transport: str = TRANSPORT_SMTP
    smtp_server: str = DEFAULT_SERVER
    smtp_port: str = DEFAULT_PORT
    smtp_username: str | None = None
    smtp_password: str | None = None
    host_name: str = DEFAULT_HOST_NAME
    aws_region: str | None = None
    aws_access_key_id: str | None = None
    aws_secret_access_key: str | None = None
    aws_session_token: str | None = None

    @staticmethod
    def from_env() -> "Settings":
        def require(name: str) -> str:
            value = os.getenv(name)
            if value is None or not value.strip():
                raise ValueError(f"Environment variable {name} is required.")
            return value.strip()

        def optional_with_default(name: str, default: str) -> str:
            value = os.getenv(name)
            if value is None or not value.strip():
                return default
            return value.strip()

        def optional(name: str) -> str | None:
            value = os.getenv(name)
            if value is None or not value.strip():
                return None
            return value.strip()

        transport = optional_with_default("MAIL_TRANSPORT", TRANSPORT_SMTP).lower()
        if transport not in {TRANSPORT_SMTP, TRANSPORT_SES}:
            raise ValueError(f"MAIL_TRANSPORT must be '{TRANSPORT_SMTP}' or '{TRANSPORT_SES}', got {transport!r}.")

        return Settings(
            from_email=require("FROM_EMAIL"),
            from_name=optional("FROM_NAME"),
            transport=transport,
            smtp_server=optional_with_default("SMTP_SERVER", DEFAULT_SERVER),
            smtp_port=optional_with_default("SMTP_PORT", DEFAULT_PORT),
            smtp_username=optional("SMTP_USERNAME"),
            # Passwords may legitimately carry surrounding whitespace.
            smtp_password=os.getenv("SMTP_PASSWORD") or None,
            host_name=optional_with_default("MAIL_HOSTNAME", DEFAULT_HOST_NAME),
            aws_region=optional("AWS_REGION") or optional("AWS_DEFAULT_REGION"),
            aws_access_key_id=optional("AWS_ACCESS_KEY_ID"),
            aws_secret_access_key=optional("AWS_SECRET_ACCESS_KEY"),
            aws_session_token=optional("AWS_SESSION_TOKEN"),
        )
