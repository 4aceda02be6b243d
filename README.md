# archivindex

Types for working with Wayback Machine CDX index results in Python.
The package has no dependencies outside the standard library.

It parses and formats the values that appear in CDX search results and in
Wayback Machine URLs:

- `archivindex.timestamp.Timestamp` — 14-digit `YYYYMMDDhhmmss` UTC
  timestamps, convertible to and from `datetime` objects and Unix epoch
  seconds.
- `archivindex.digest.Sha1Digest` and `Digest` — Base32-encoded SHA-1
  digests. `Digest` keeps strings in unknown encodings as invalid digests
  instead of rejecting them. `Sha1Computer` hashes binary streams or byte
  strings.
- `archivindex.surt.Surt` — a simplified Sort-friendly URI Reordering
  Transform, as used for CDX keys, built from a CDX key string or from an
  HTTP(S) URL.
- `archivindex.mime_type.MimeType` — MIME types from CDX rows.
- `archivindex.entry.UrlParts` and `EntryInfo` — Wayback Machine snapshot
  URLs split into the original URL and the capture timestamp.
- `archivindex.cdx.EntryList` and `Entry` — parsed CDX JSON output, in both
  the normal seven-column and the extended eleven-column form, including the
  resume key that follows an empty row.
- `archivindex.redirect` — building and recognising the HTML stored for
  302 redirects.

## Installation

```
pip install archivindex
```

## Usage

```python
import io

from archivindex.cdx import parse_entry_list
from archivindex.digest import Digest, Sha1Computer
from archivindex.entry import UrlParts
from archivindex.redirect import make_redirect_html, parse_redirect_html
from archivindex.surt import Surt
from archivindex.timestamp import Timestamp

parts = UrlParts.parse(
    "https://web.archive.org/web/20160508215503/https://example.com/page"
)
print(parts.url)                      # https://example.com/page
print(parts.to_wb_url(True, True))    # https://web.archive.org/web/20160508215503id_/https://example.com/page

print(Timestamp.parse("20160508215503").to_epoch())

surt = Surt.from_url("https://twitter.com/Example/")
print(surt)                           # com,twitter)/example/
print(surt.canonical_url())           # https://twitter.com/example/

digest = Digest.parse("ZHYT52YPEOCHJD5FZINSDYXGQZI22WJ4")
print(digest.is_valid())              # True

print(Sha1Computer.compute_digest(io.BytesIO(b"hello")))

html = make_redirect_html("https://example.com/")
print(parse_redirect_html(html))      # https://example.com/

cdx_json_text = """[
  ["urlkey","timestamp","original","mimetype","statuscode","digest","length"],
  ["com,example)/","20160508215503","https://example.com/","text/html","200",
   "ZHYT52YPEOCHJD5FZINSDYXGQZI22WJ4","1234"],
  [],
  ["resume-key"]
]"""
entries = parse_entry_list(cdx_json_text)
for entry in entries.values:
    print(entry.key, entry.timestamp, entry.status_code, entry.digest)
print(entries.resume_key)             # resume-key
```

`EntryList.from_rows` accepts rows that have already been decoded from JSON.

Parsing errors are raised as `TimestampError`, `DigestError`, `SurtError`,
`MimeTypeError`, `EntryError` and `CdxError` from their modules; all of them
are subclasses of `ValueError`.

## What the package does not do

It only parses and formats values. It does not query the CDX server, fetch
snapshots, store results, or provide a command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```