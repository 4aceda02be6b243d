"""Wayback Machine CDX search results in JSON output form."""

from __future__ import annotations

import enum
import functools
import json
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence, TypeVar

from archivindex.digest import Digest
from archivindex.entry import EntryInfo, UrlParts
from archivindex.mime_type import MimeType
from archivindex.surt import Surt
from archivindex.timestamp import Timestamp

_T = TypeVar("_T")
_MISSING = object()
_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_BASE_HEADER = ("urlkey", "timestamp", "original", "mimetype", "statuscode", "digest")
_NORMAL_HEADER = [*_BASE_HEADER, "length"]
_EXTENDED_HEADER = [
    *_BASE_HEADER,
    "redirect",
    "robotflags",
    "length",
    "offset",
    "filename",
]
_NORMAL_ROW_LEN = len(_NORMAL_HEADER)
_EXTENDED_ROW_LEN = len(_EXTENDED_HEADER)


class CdxError(ValueError):
    """Raised when CDX results are malformed."""


class _EntryHeader(enum.Enum):
    NORMAL = "normal"
    EXTENDED = "extended"


@dataclass(frozen=True, order=True)
class ExtendedInfo:
    """Fields present only in the extended CDX output."""

    redirect: str
    robot_flags: str
    offset: int
    file_name: str


def _optional_key(value: Any) -> tuple:
    return (0,) if value is None else (1, value)


@functools.total_ordering
@dataclass(frozen=True)
class Entry:
    """One capture listed in CDX results."""

    key: Surt
    timestamp: Timestamp
    original: str
    mime_type: MimeType
    status_code: Optional[int]
    digest: Digest
    length: int
    extended_info: Optional[ExtendedInfo] = None

    def _key(self) -> tuple:
        return (
            self.key,
            self.timestamp,
            self.original,
            self.mime_type,
            _optional_key(self.status_code),
            self.digest,
            self.length,
            _optional_key(self.extended_info),
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._key() < other._key()

    def entry_info(self) -> EntryInfo:
        """Return where the capture lives and the digest it should have."""
        return EntryInfo(UrlParts(self.original, self.timestamp), self.digest)


def _field(row: Sequence[Any], position: int) -> str:
    value = row[position]
    if not isinstance(value, str):
        raise CdxError(f"expected a string at position {position}, found {value!r}")
    return value


def _convert(parse: Callable[[str], _T], row: Sequence[Any], position: int) -> _T:
    text = _field(row, position)
    try:
        return parse(text)
    except ValueError as error:
        raise CdxError(f"invalid value at position {position}: {text!r}") from error


def _parse_unsigned(text: str, bits: int) -> int:
    if _UNSIGNED_RE.fullmatch(text):
        number = int(text)
        if number < 1 << bits:
            return number
    raise ValueError(f"not an unsigned {bits}-bit integer: {text!r}")


def _parse_status(text: str) -> Optional[int]:
    return None if text == "-" else _parse_unsigned(text, 16)


def _parse_u64(text: str) -> int:
    return _parse_unsigned(text, 64)


def _is_row(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _parse_header(row: Any) -> _EntryHeader:
    if not _is_row(row):
        raise CdxError(f"expected a header row, found {row!r}")
    fields = list(row)
    if fields == _NORMAL_HEADER:
        return _EntryHeader.NORMAL
    if fields == _EXTENDED_HEADER:
        return _EntryHeader.EXTENDED
    raise CdxError(f"invalid header row: {row!r}")


def _parse_entry(row: Any) -> Optional[Entry]:
    """Parse an entry row; an empty row marks the start of the resume key."""
    if not _is_row(row):
        raise CdxError(f"expected an entry row, found {row!r}")
    if not row:
        return None
    if len(row) not in (_NORMAL_ROW_LEN, _EXTENDED_ROW_LEN):
        raise CdxError(f"invalid entry row length {len(row)}: {row!r}")

    key = _convert(Surt.parse, row, 0)
    timestamp = _convert(Timestamp.parse, row, 1)
    original = _field(row, 2)
    mime_type = _convert(MimeType.parse, row, 3)
    status_code = _convert(_parse_status, row, 4)
    digest = _convert(Digest.parse, row, 5)

    if len(row) == _NORMAL_ROW_LEN:
        return Entry(
            key,
            timestamp,
            original,
            mime_type,
            status_code,
            digest,
            _convert(_parse_u64, row, 6),
        )

    extended_info = ExtendedInfo(
        redirect=_field(row, 6),
        robot_flags=_field(row, 7),
        offset=_convert(_parse_u64, row, 9),
        file_name=_field(row, 10),
    )
    return Entry(
        key,
        timestamp,
        original,
        mime_type,
        status_code,
        digest,
        _convert(_parse_u64, row, 8),
        extended_info,
    )


def _parse_resume_key(row: Any) -> str:
    if row is _MISSING:
        raise CdxError("missing resume key after empty row")
    if not _is_row(row) or len(row) != 1 or not isinstance(row[0], str):
        raise CdxError(f"invalid resume key row: {row!r}")
    return row[0]


@dataclass
class EntryList:
    """The entries of one page of CDX results, with its resume key if any."""

    values: list[Entry] = field(default_factory=list)
    header: Optional[_EntryHeader] = field(default=None, repr=False)
    resume_key: Optional[str] = None

    @classmethod
    def from_rows(cls, rows: Sequence[Any]) -> EntryList:
        """Build a list from decoded JSON rows: a header, entries, and an optional resume key."""
        if not _is_row(rows):
            raise CdxError(f"expected a list of rows, found {type(rows).__name__}")
        remaining = iter(rows)
        header_row = next(remaining, _MISSING)
        if header_row is _MISSING:
            return cls()
        header = _parse_header(header_row)

        values: list[Entry] = []
        resume_key: Optional[str] = None
        for row in remaining:
            entry = _parse_entry(row)
            if entry is None:
                resume_key = _parse_resume_key(next(remaining, _MISSING))
                break
            values.append(entry)

        if next(remaining, _MISSING) is not _MISSING:
            raise CdxError("unexpected rows after resume key")
        return cls(values, header, resume_key)

    @classmethod
    def from_json(cls, text: str | bytes) -> EntryList:
        """Parse CDX results from their JSON text."""
        try:
            rows = json.loads(text)
        except ValueError as error:
            raise CdxError(f"JSON decoding error: {error}") from error
        return cls.from_rows(rows)


def parse_entry_list(text: str | bytes) -> EntryList:
    """Parse CDX results from their JSON text."""
    return EntryList.from_json(text)