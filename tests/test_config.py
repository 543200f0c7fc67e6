from __future__ import annotations

import pytest

from simplemail.config import Settings

_VARS = [
    "FROM_EMAIL",
    "FROM_NAME",
    "MAIL_TRANSPORT",
    "SMTP_SERVER",
    "SMTP_PORT",
    "SMTP_USERNAME",
    "SMTP_PASSWORD",
    "MAIL_HOSTNAME",
    "AWS_REGION",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_requires_from_email():
    with pytest.raises(ValueError):
        Settings.from_env()


def test_from_env_defaults(monkeypatch):
    monkeypatch.setenv("FROM_EMAIL", "a@x.com")
    settings = Settings.from_env()
    assert settings.transport == "smtp"
    assert settings.smtp_server == "localhost"
    assert settings.smtp_port == "25"
    assert settings.smtp_username is None
    assert settings.host_name == "localhost"
    assert settings.from_name is None


def test_from_env_reads_smtp_and_aws(monkeypatch):
    monkeypatch.setenv("FROM_EMAIL", " a@x.com ")
    monkeypatch.setenv("FROM_NAME", "Alice")
    monkeypatch.setenv("MAIL_TRANSPORT", "SES")
    monkeypatch.setenv("SMTP_SERVER", "mx.example.com")
    monkeypatch.setenv("SMTP_PORT", "587")
    monkeypatch.setenv("SMTP_USERNAME", "user")
    monkeypatch.setenv("SMTP_PASSWORD", " secret ")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "ap-northeast-1")
    settings = Settings.from_env()
    assert settings.from_email == "a@x.com"
    assert settings.from_name == "Alice"
    assert settings.transport == "ses"
    assert settings.smtp_server == "mx.example.com"
    assert settings.smtp_port == "587"
    assert settings.smtp_password == " secret "
    assert settings.aws_region == "ap-northeast-1"


def test_from_env_rejects_unknown_transport(monkeypatch):
    monkeypatch.setenv("FROM_EMAIL", "a@x.com")
    monkeypatch.setenv("MAIL_TRANSPORT", "carrier-pigeon")
    with pytest.raises(ValueError):
        Settings.from_env()
