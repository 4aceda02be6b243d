"""A simplified Sort-friendly URI Reordering Transform (SURT).

Only the features needed for Wayback Machine CDX results are supported.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

_DEFAULT_PORTS = {"http": 80, "https": 443}
_PATH_SAFE = "/%:@!$&'()*+,;=-._~"


class SurtError(ValueError):
    """Raised for malformed SURTs or unsupported URLs."""


def _is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


def _valid_domain_part(part: str) -> bool:
    return all((ch.isascii() and ch.isalnum()) or ch == "-" for ch in part)


@dataclass(frozen=True, order=True)
class Surt:
    """Reversed domain labels and a path, e.g. ``com,example)/path``."""

    domain: tuple[str, ...]
    path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "domain", tuple(self.domain))

    @classmethod
    def from_url(cls, url: str) -> Surt:
        """Build a SURT from an HTTP(S) URL on a domain with its default port."""
        lowered = url.lower()
        try:
            parts = urlsplit(lowered)
            port = parts.port
        except ValueError as error:
            raise SurtError(f"invalid URL: {url!r}") from error
        host = parts.hostname
        scheme = parts.scheme
        if (
            scheme not in _DEFAULT_PORTS
            or not host
            or _is_ip_address(host)
            or (port is not None and port != _DEFAULT_PORTS[scheme])
        ):
            raise SurtError(f"unexpected URL: {url!r}")
        path = quote(parts.path, safe=_PATH_SAFE) or "/"
        return cls(tuple(reversed(host.split("."))), path)

    @classmethod
    def parse(cls, value: str) -> Surt:
        """Parse the SURT form used as a CDX key."""
        if value.lower() != value:
            raise SurtError(f"invalid SURT: {value!r}")
        domain, separator, path = value.partition(")")
        parts = domain.split(",")
        for part in parts:
            if not _valid_domain_part(part):
                raise SurtError(f"invalid domain part: {part!r}")
        if not separator or not path.startswith("/"):
            raise SurtError(f"invalid SURT: {value!r}")
        return cls(tuple(parts), path)

    def canonical_url(self) -> str:
        """Return the HTTPS URL the SURT stands for."""
        return "https://" + ".".join(reversed(self.domain)) + self.path

    def __str__(self) -> str:
        return ",".join(self.domain) + ")" + self.path