"""Wayback Machine snapshot URLs and the entries they describe."""

from __future__ import annotations

import re
from dataclasses import dataclass

from archivindex.digest import Digest
from archivindex.timestamp import Timestamp, TimestampError

_WAYBACK_URL_RE = re.compile(
    r"http(:?s)?://web.archive.org/web/(?P<timestamp>\d{14})(?:id_)?/(?P<url>.+)"
)


class EntryError(ValueError):
    """Raised when a Wayback Machine URL cannot be parsed."""


@dataclass(frozen=True, order=True)
class UrlParts:
    """The original URL and capture timestamp of a snapshot."""

    url: str
    timestamp: Timestamp

    @classmethod
    def parse(cls, value: str) -> UrlParts:
        """Split a Wayback Machine snapshot URL into its parts."""
        match = _WAYBACK_URL_RE.fullmatch(value)
        if match is None:
            raise EntryError(f"invalid URL: {value!r}")
        try:
            timestamp = Timestamp.parse(match["timestamp"])
        except TimestampError as error:
            raise EntryError(f"invalid timestamp in URL: {value!r}") from error
        return cls(match["url"], timestamp)

    def to_wb_url(self, https: bool = True, original: bool = False) -> str:
        """Build the snapshot URL; ``original`` asks for the unmodified content."""
        scheme = "https" if https else "http"
        suffix = "id_" if original else ""
        return f"{scheme}://web.archive.org/web/{self.timestamp}{suffix}/{self.url}"


@dataclass(frozen=True, order=True)
class EntryInfo:
    """A snapshot location together with the digest its content should have."""

    url_parts: UrlParts
    expected_digest: Digest