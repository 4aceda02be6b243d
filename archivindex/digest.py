"""Digests as reported by the Wayback Machine CDX index.

Most digests are Base32-encoded SHA-1 hashes, but some use unknown encodings.
"""

from __future__ import annotations

import base64
import binascii
import functools
import hashlib
from dataclasses import dataclass
from typing import BinaryIO, Union

_ENCODED_LENGTH = 32
_DIGEST_LENGTH = 20
_CHUNK_SIZE = 64 * 1024


class DigestError(ValueError):
    """Raised when a digest string or byte value is malformed."""


def _decode_base32(value: str) -> bytes:
    try:
        return base64.b32decode(value.encode("ascii"))
    except (UnicodeEncodeError, binascii.Error) as error:
        raise DigestError(f"decoding error: {value!r}") from error


@dataclass(frozen=True, order=True)
class Sha1Digest:
    """A twenty-byte SHA-1 digest, shown in Base32."""

    value: bytes

    def __post_init__(self) -> None:
        value = bytes(self.value)
        if len(value) != _DIGEST_LENGTH:
            raise DigestError(f"invalid SHA-1 digest length: {value!r}")
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, value: str) -> Sha1Digest:
        """Parse a 32-character Base32 digest string."""
        if len(value.encode("utf-8")) != _ENCODED_LENGTH:
            raise DigestError(f"invalid SHA-1 digest string length: {value!r}")
        decoded = _decode_base32(value)
        if len(decoded) != _DIGEST_LENGTH:
            raise DigestError(f"invalid SHA-1 digest string input: {value!r}")
        return cls(decoded)

    @classmethod
    def from_bytes(cls, value: bytes) -> Sha1Digest:
        """Build a digest from exactly twenty bytes."""
        return cls(bytes(value))

    def __str__(self) -> str:
        return base64.b32encode(self.value).decode("ascii")


Sha1Digest.MIN = Sha1Digest(bytes([0x00]) * _DIGEST_LENGTH)
Sha1Digest.MAX = Sha1Digest(bytes([0xFF]) * _DIGEST_LENGTH)


@functools.total_ordering
@dataclass(frozen=True)
class Digest:
    """A CDX digest: a valid SHA-1 digest or an unrecognised string.

    Valid digests sort before invalid ones.
    """

    value: Union[Sha1Digest, str]

    def __post_init__(self) -> None:
        if not isinstance(self.value, (Sha1Digest, str)):
            raise TypeError(f"unexpected digest value: {self.value!r}")

    @classmethod
    def parse(cls, value: str) -> Digest:
        """Parse a digest string, keeping unrecognised encodings as invalid."""
        if len(value.encode("utf-8")) != _ENCODED_LENGTH:
            return cls(value)
        decoded = _decode_base32(value)
        if len(decoded) == _DIGEST_LENGTH:
            return cls(Sha1Digest(decoded))
        return cls(value)

    def valid(self) -> Sha1Digest | None:
        return self.value if isinstance(self.value, Sha1Digest) else None

    def invalid(self) -> str | None:
        return self.value if isinstance(self.value, str) else None

    def is_valid(self) -> bool:
        return isinstance(self.value, Sha1Digest)

    def _key(self) -> tuple:
        return (0, self.value) if self.is_valid() else (1, self.value)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Digest):
            return NotImplemented
        return self._key() < other._key()

    def __str__(self) -> str:
        return str(self.value)


class Sha1Computer:
    """Computes SHA-1 digests of binary streams or byte strings."""

    def __init__(self, chunk_size: int = _CHUNK_SIZE) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk size must be positive")
        self._chunk_size = chunk_size

    @staticmethod
    def compute_digest(stream: BinaryIO | bytes) -> Sha1Digest:
        """Digest a stream with a fresh computer."""
        return Sha1Computer().digest(stream)

    def digest_bytes(self, stream: BinaryIO | bytes) -> bytes:
        """Return the raw twenty-byte SHA-1 hash of everything read."""
        hasher = hashlib.sha1()
        if isinstance(stream, (bytes, bytearray, memoryview)):
            hasher.update(stream)
        else:
            for chunk in iter(lambda: stream.read(self._chunk_size), b""):
                hasher.update(chunk)
        return hasher.digest()

    def digest(self, stream: BinaryIO | bytes) -> Sha1Digest:
        return Sha1Digest(self.digest_bytes(stream))

    def digest_base32(self, stream: BinaryIO | bytes) -> str:
        return base64.b32encode(self.digest_bytes(stream)).decode("ascii")