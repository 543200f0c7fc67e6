from __future__ import annotations

import pytest

from simplemail.models import Email, derive_content_type, is_multipart


class FakeReader:
    def __init__(self, contents: bytes = b"payload", name: str = "report.pdf"):
        self.sources: list[str] = []
        self._contents = contents
        self._name = name

    def read(self, source: str):
        self.sources.append(source)
        return self._contents, self._name


class FailingReader:
    def read(self, source: str):
        raise FileNotFoundError(source)


def test_defaults():
    email = Email()
    assert email.port == "25"
    assert email.server == "localhost"
    assert email.charset == "UTF-8"
    assert email.host_name == "localhost"
    assert (email.x_priority, email.x_msmail_priority, email.importance) == ("", "", "")


def test_set_high_priority_sets_all_three():
    email = Email()
    email.set_high_priority()
    assert email.x_priority == "1 (Highest)"
    assert email.x_msmail_priority == "High"
    assert email.importance == "High"


def test_recipients_keep_order_and_duplicates():
    email = Email(to=["a@x.com", "b@x.com"], cc=["a@x.com"], bcc=["z@x.com"])
    assert email.recipients() == ["a@x.com", "b@x.com", "a@x.com", "z@x.com"]


def test_address_joins_server_and_port():
    assert Email(server="smtp.example.com", port="587").address() == "smtp.example.com:587"


@pytest.mark.parametrize(
    "text, html, explicit, expected",
    [
        ("t", "", "", "text/plain"),
        ("", "h", "", "text/html"),
        ("t", "h", "", "multipart/alternative"),
        ("", "", "", "text/plain"),
        ("t", "h", "multipart/mixed", "multipart/mixed"),
        ("", "", "multipart/related", "multipart/related"),
    ],
)
def test_derive_content_type(text, html, explicit, expected):
    email = Email(text_body=text, html_body=html, content_type=explicit)
    assert derive_content_type(email) == expected
    assert email.content_type == explicit


def test_is_multipart():
    assert is_multipart("multipart/mixed")
    assert not is_multipart("text/plain")


def test_attach_file_uses_reader_and_returns_attachment():
    reader = FakeReader()
    email = Email()
    attachment = email.attach_file("/tmp/out/report.pdf", reader=reader)
    attachment.content_type = "application/pdf"

    assert reader.sources == ["/tmp/out/report.pdf"]
    assert email.attachments == [attachment]
    assert email.attachments[0].file_name == "report.pdf"
    assert email.attachments[0].contents == b"payload"
    assert email.attachments[0].content_type == "application/pdf"


def test_attach_file_reads_from_disk_by_default(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_bytes(b"hello")
    email = Email()
    attachment = email.attach_file(str(path))
    assert attachment.file_name == "notes.txt"
    assert attachment.contents == b"hello"


def test_attach_file_error_propagates_and_appends_nothing():
    email = Email()
    with pytest.raises(FileNotFoundError):
        email.attach_file("missing.txt", reader=FailingReader())
    assert email.attachments == []
