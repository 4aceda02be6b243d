"""Redirect pages as stored by the Wayback Machine."""

from __future__ import annotations

import re

_REDIRECT_HTML_RE = re.compile(
    r'<html><body>You are being <a href="([^"]+)">redirected</a>\.</body></html>'
)


def make_redirect_html(url: str) -> str:
    """Guess the stored content of a 302 redirect page to ``url``.

    Redirect entries in CDX results usually, but not always, have this body,
    with the location header's value as the link.
    """
    return f'<html><body>You are being <a href="{url}">redirected</a>.</body></html>'


def parse_redirect_html(content: str) -> str | None:
    """Return the target URL of a redirect page, or None if it is not one."""
    match = _REDIRECT_HTML_RE.fullmatch(content)
    return match.group(1) if match else None