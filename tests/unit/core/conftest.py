"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_REQUEST = """\
GET /api/users?id=1 HTTP/1.1
Host: example.com
Accept: application/json

"""

SAMPLE_REQUEST_MODIFIED = """\
GET /api/users?id=2 HTTP/1.1
Host: example.com
Accept: text/html

"""


def _check_side(segments, text):
    """Segments rebuild text exactly and tile it without gaps or overlaps."""
    assert "".join(s.content for s in segments) == text
    pos = 0
    for s in segments:
        assert s.position == pos
        assert s.length == len(s.content)
        pos += s.length
    assert pos == len(text)


@pytest.fixture(name="check_side")
def check_side_fixture():
    return _check_side


@pytest.fixture(name="kinds")
def kinds_fixture():
    """Reduce a segment list to (kind value, content) pairs."""
    return lambda segments: [(s.kind.value, s.content) for s in segments]


@pytest.fixture(name="sample_pair")
def sample_pair_fixture():
    return SAMPLE_REQUEST, SAMPLE_REQUEST_MODIFIED
