from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from .config import (
    CONTENT_TYPE_ALTERNATIVE,
    CONTENT_TYPE_HTML,
    CONTENT_TYPE_PLAIN,
    DEFAULT_ATTACHMENT_TYPE,
    DEFAULT_CHARSET,
    DEFAULT_DISPOSITION,
    DEFAULT_HOST_NAME,
    DEFAULT_PORT,
    DEFAULT_SERVER,
    HIGH_PRIORITY,
)
from .readers import AttachmentReader, FileReader


@dataclass
class Attachment:
    contents: bytes = b""
    file_name: str = ""
    content_type: str = DEFAULT_ATTACHMENT_TYPE
    content_disposition: str = DEFAULT_DISPOSITION
    content_id: str = ""


@dataclass
class Email:
    """
    A message to render and send.

    Fill out at least ``from_email``, ``to`` and one of the bodies. Setting only
    ``html_body`` produces an HTML email; setting both produces
    multipart/alternative. No username means the server needs no authentication.
    """

    from_email: str = ""
    from_name: str = ""
    sender: str = ""
    reply_to: List[str] = field(default_factory=list)
    to: List[str] = field(default_factory=list)
    cc: List[str] = field(default_factory=list)
    bcc: List[str] = field(default_factory=list)
    subject: str = ""
    text_body: str = ""
    html_body: str = ""
    content_type: str = ""
    charset: str = DEFAULT_CHARSET
    attachments: List[Attachment] = field(default_factory=list)
    x_priority: str = ""
    x_msmail_priority: str = ""
    importance: str = ""
    trace_id: str = ""
    server: str = DEFAULT_SERVER
    port: str = DEFAULT_PORT
    username: str = ""
    password: str = field(default="", repr=False)
    host_name: str = DEFAULT_HOST_NAME

    def set_high_priority(self) -> None:
        self.x_priority, self.x_msmail_priority, self.importance = HIGH_PRIORITY

    def recipients(self) -> List[str]:
        """Envelope recipients: to, cc and bcc in that order."""
        return [*self.to, *self.cc, *self.bcc]

    def address(self) -> str:
        return f"{self.server}:{self.port}"

    def attach_file(self, source: str, reader: Optional[AttachmentReader] = None) -> Attachment:
        """
        Read ``source`` and append it as an attachment.

        The returned attachment can be adjusted further (content type, inline
        disposition, content id). Read errors propagate and leave the email untouched.
        """
        contents, name = (reader or FileReader()).read(source)
        attachment = Attachment(contents=contents, file_name=name)
        self.attachments.append(attachment)
        return attachment


def derive_content_type(email: Email) -> str:
    if email.content_type:
        return email.content_type
    if email.text_body and email.html_body:
        return CONTENT_TYPE_ALTERNATIVE
    if email.html_body:
        return CONTENT_TYPE_HTML
    return CONTENT_TYPE_PLAIN


def is_multipart(content_type: str) -> bool:
    return "multipart" in content_type
