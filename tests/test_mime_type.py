import pytest
from hypothesis import given
from hypothesis import strategies as st

from archivindex.mime_type import MimeType, MimeTypeError


def test_known_types():
    assert MimeType.parse("text/html") == MimeType.TEXT_HTML
    assert MimeType.parse("application/json") == MimeType.APPLICATION_JSON


@given(st.text())
def test_string_round_trip(text):
    assert str(MimeType.parse(text)) == text
    assert MimeType.parse(text) == MimeType.parse(str(MimeType.parse(text)))


def test_ordering_known_first():
    other = MimeType.parse("image/png")
    early = MimeType.parse("aaa/aaa")
    result = sorted([other, MimeType.APPLICATION_JSON, early, MimeType.TEXT_HTML])
    assert result == [MimeType.TEXT_HTML, MimeType.APPLICATION_JSON, early, other]


@given(st.text())
def test_others_sort_after_known(text):
    mime = MimeType.parse(text)
    if mime not in (MimeType.TEXT_HTML, MimeType.APPLICATION_JSON):
        assert MimeType.APPLICATION_JSON < mime
        assert MimeType.TEXT_HTML < mime


def test_non_string_rejected():
    with pytest.raises(MimeTypeError):
        MimeType.parse(42)