"""MIME types as listed in CDX results."""

from __future__ import annotations

import functools
from dataclasses import dataclass

_KNOWN_RANKS = {"text/html": 0, "application/json": 1}


class MimeTypeError(ValueError):
    """Raised when a MIME type value cannot be used."""


@functools.total_ordering
@dataclass(frozen=True)
class MimeType:
    """A MIME type; ``text/html`` and ``application/json`` sort first, in that order."""

    value: str

    @classmethod
    def parse(cls, value: str) -> MimeType:
        if not isinstance(value, str):
            raise MimeTypeError(f"invalid MIME type: {value!r}")
        return cls(value)

    def _key(self) -> tuple[int, str]:
        return (_KNOWN_RANKS.get(self.value, len(_KNOWN_RANKS)), self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return self.value


MimeType.TEXT_HTML = MimeType("text/html")
MimeType.APPLICATION_JSON = MimeType("application/json")