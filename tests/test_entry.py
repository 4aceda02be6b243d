from datetime import datetime, timezone

import pytest

from archivindex.digest import Digest
from archivindex.entry import EntryError, EntryInfo, UrlParts
from archivindex.timestamp import Timestamp

TWEET = "https://twitter.com/roman_dmowski99/status/725877225686454272"


def test_parse():
    url = "https://web.archive.org/web/20160508215503/" + TWEET
    expected = UrlParts(TWEET, Timestamp.parse("20160508215503"))

    assert UrlParts.parse(url) == expected


def test_parse_http_and_id_suffix():
    parsed = UrlParts.parse("http://web.archive.org/web/20160508215503id_/" + TWEET)
    assert parsed.url == TWEET
    assert parsed.timestamp.to_datetime() == datetime(
        2016, 5, 8, 21, 55, 3, tzinfo=timezone.utc
    )


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/web/20160508215503/" + TWEET,
        "https://web.archive.org/web/2016050821550/" + TWEET,
        "https://web.archive.org/web/20160508215503/",
        "ftp://web.archive.org/web/20160508215503/" + TWEET,
        "https://web.archive.org/web/20160508215503/a\nb",
    ],
)
def test_parse_invalid_url(url):
    with pytest.raises(EntryError):
        UrlParts.parse(url)


def test_parse_invalid_timestamp():
    with pytest.raises(EntryError):
        UrlParts.parse("https://web.archive.org/web/20161308215503/" + TWEET)


def test_to_wb_url_variants():
    parts = UrlParts(TWEET, Timestamp.parse("20160508215503"))
    assert parts.to_wb_url(True, False) == (
        "https://web.archive.org/web/20160508215503/" + TWEET
    )
    assert parts.to_wb_url(False, True) == (
        "http://web.archive.org/web/20160508215503id_/" + TWEET
    )


@pytest.mark.parametrize("https", [True, False])
@pytest.mark.parametrize("original", [True, False])
def test_to_wb_url_round_trip(https, original):
    parts = UrlParts(TWEET, Timestamp.parse("20200101000000"))
    assert UrlParts.parse(parts.to_wb_url(https, original)) == parts


def test_url_parts_ordering():
    early = UrlParts("https://a.example.com/", Timestamp.parse("20200101000000"))
    late = UrlParts("https://a.example.com/", Timestamp.parse("20210101000000"))
    other = UrlParts("https://b.example.com/", Timestamp.parse("20000101000000"))
    assert sorted([other, late, early]) == [early, late, other]


def test_entry_info_fields_and_ordering():
    parts = UrlParts(TWEET, Timestamp.parse("20160508215503"))
    valid = EntryInfo(parts, Digest.parse("ZHYT52YPEOCHJD5FZINSDYXGQZI22WJ4"))
    invalid = EntryInfo(parts, Digest.parse("short"))
    assert valid.expected_digest.is_valid()
    assert sorted([invalid, valid]) == [valid, invalid]