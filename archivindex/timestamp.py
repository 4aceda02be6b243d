"""Wayback Machine URL timestamps (``YYYYMMDDhhmmss``, UTC)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_LENGTH = 14
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)


class TimestampError(ValueError):
    """Raised when a timestamp cannot be parsed or represented."""


@dataclass(frozen=True, order=True)
class Timestamp:
    """A UTC moment as written in Wayback Machine URLs."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None:
            normalised = self.value.replace(tzinfo=timezone.utc)
        else:
            normalised = self.value.astimezone(timezone.utc)
        object.__setattr__(self, "value", normalised)

    @classmethod
    def parse(cls, value: str) -> Timestamp:
        """Parse a fourteen-digit timestamp string."""
        if len(value) != _LENGTH:
            raise TimestampError(f"invalid timestamp length: {value!r}")
        if not (value.isascii() and value.isdigit()):
            raise TimestampError(f"invalid timestamp input: {value!r}")
        try:
            moment = datetime(
                int(value[0:4]),
                int(value[4:6]),
                int(value[6:8]),
                int(value[8:10]),
                int(value[10:12]),
                int(value[12:14]),
                tzinfo=timezone.utc,
            )
        except ValueError as error:
            raise TimestampError(f"invalid timestamp input: {value!r}") from error
        return cls(moment)

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        """Wrap a datetime; naive values are taken to be UTC."""
        return cls(value)

    @classmethod
    def from_epoch(cls, seconds: int) -> Timestamp:
        """Build a timestamp from seconds since the Unix epoch."""
        try:
            return cls(_EPOCH + timedelta(seconds=seconds))
        except OverflowError as error:
            raise TimestampError(f"invalid timestamp: {seconds}") from error

    def to_datetime(self) -> datetime:
        """Return the moment as an aware UTC datetime."""
        return self.value

    def to_epoch(self) -> int:
        """Return whole seconds since the Unix epoch."""
        return (self.value - _EPOCH) // _ONE_SECOND

    def __str__(self) -> str:
        v = self.value
        return (
            f"{v.year:04d}{v.month:02d}{v.day:02d}"
            f"{v.hour:02d}{v.minute:02d}{v.second:02d}"
        )