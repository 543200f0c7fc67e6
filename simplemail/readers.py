from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, Tuple
from urllib.parse import unquote, urlsplit

import httpx

from .transport import MailError

logger = logging.getLogger(__name__)


class AttachmentReadError(MailError):
    """Raised when a remote attachment cannot be fetched."""


class AttachmentReader(Protocol):
    def read(self, source: str) -> Tuple[bytes, str]: ...


class FileReader:
    """Read attachments from the local filesystem. OSError propagates as is."""

    def read(self, source: str) -> Tuple[bytes, str]:
        path = Path(source)
        contents = path.read_bytes()
        logger.info("Read attachment %s (%s bytes)", path.name, len(contents))
        return contents, path.name


class HttpReader:
    """Fetch attachments over HTTP(S); the file name is the last URL path segment."""

    def __init__(self, timeout: float = 20.0, client: httpx.Client | None = None):
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpReader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def read(self, source: str) -> Tuple[bytes, str]:
        try:
            response = self._client.get(source)
            response.raise_for_status()
        except httpx.RequestError as exc:
            logger.warning("Attachment request error for %s: %s", source, exc)
            raise AttachmentReadError(f"Attachment request failed: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise AttachmentReadError(f"Attachment request returned error: {exc}") from exc

        name = unquote(urlsplit(source).path.rstrip("/").split("/")[-1])
        logger.info("Fetched attachment %s (%s bytes)", name or source, len(response.content))
        return response.content, name


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def reader_for(source: str, http_reader: HttpReader) -> AttachmentReader:
    """Pick the reader for ``source``; URLs share the caller-owned ``http_reader``."""
    if is_url(source):
        return http_reader
    return FileReader()
