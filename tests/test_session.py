"""Unit tests for DiffSession."""

from __future__ import annotations

import pytest

from hexdiff.evaluation import summarize
from hexdiff.session import NO_FILE, DiffSession
from hexdiff.types import ByteBlob, Diff


def _blob(name: str, data: bytes) -> ByteBlob:
    return ByteBlob(name=name, data=data, file_type="test")


def test_empty_session_has_no_classifications():
    """A fresh session has no data, no names and no diffs."""
    session = DiffSession()
    assert not session.ready
    assert session.data("left") == b""
    assert session.name("right") == NO_FILE
    assert session.diffs("left") == []
    assert session.diffs("right") == []


def test_single_side_loaded_keeps_diffs_empty():
    """Classifications stay empty until both sides are present."""
    session = DiffSession()
    session.load("left", _blob("a.bin", b"\x01\x02"))
    assert session.data("left") == b"\x01\x02"
    assert session.diffs("left") == []
    assert session.diffs("right") == []


def test_half_loaded_session_has_no_result():
    """A session with one side cannot be summarized as identical."""
    session = DiffSession()
    with pytest.raises(ValueError):
        session.result  # pylint: disable=pointless-statement

    session.load("left", _blob("a.bin", b"\x01\x02"))
    with pytest.raises(ValueError, match="right"):
        summarize(session.result)

    session.load("right", _blob("b.bin", b""))
    summary = summarize(session.result)
    assert not summary.identical
    assert summary.match_ratio == 0.0


def test_loading_both_sides_computes_diffs():
    """Loading the second side triggers a comparison."""
    session = DiffSession()
    session.load("left", _blob("a.bin", b"\x01\x02\x03"))
    session.load("right", _blob("b.bin", b"\x01\xff"))
    assert session.ready
    assert session.diffs("left") == [Diff.SAME, Diff.DIFFERENT, Diff.NO_OTHER]
    assert session.diffs("right") == [Diff.SAME, Diff.DIFFERENT]
    assert session.result.diffs_a == (Diff.SAME, Diff.DIFFERENT, Diff.NO_OTHER)


def test_replacing_a_side_recomputes():
    """Every load fully recomputes both sides."""
    session = DiffSession(_blob("a", b"ab"), _blob("b", b"ab"))
    assert session.diffs("left") == [Diff.SAME, Diff.SAME]

    session.load("right", _blob("c", b"abcd"))
    assert session.diffs("left") == [Diff.SAME, Diff.SAME]
    assert session.diffs("right") == [Diff.SAME, Diff.SAME, Diff.NO_OTHER, Diff.NO_OTHER]
    assert session.name("right") == "c"


def test_randomize_loads_random_test_data():
    """randomize() loads a blob named 'random' of the requested size."""
    session = DiffSession()
    session.randomize("left", size=64, seed=1)
    session.randomize("right", size=64, seed=1)

    blob = session.blob("left")
    assert blob.name == "random"
    assert blob.file_type == "test"
    assert len(session.data("left")) == 64
    assert len(session.diffs("left")) == 64
    # same seed and size, so the data matches
    assert set(session.diffs("right")) == {Diff.SAME}

    session.randomize("right", size=32, seed=2)
    assert len(session.diffs("left")) == 64
    assert len(session.diffs("right")) == 32
    assert session.diffs("left")[32:] == [Diff.NO_OTHER] * 32


def test_diffs_returns_a_copy():
    """Mutating a returned list does not change the session."""
    session = DiffSession(_blob("a", b"a"), _blob("b", b"a"))
    session.diffs("left").append(Diff.DIFFERENT)
    assert session.diffs("left") == [Diff.SAME]


def test_panels_are_ordered_left_then_right():
    """panels() yields (name, data, diffs) per side."""
    session = DiffSession(_blob("a", b"\x00"), _blob("b", b"\x01"))
    assert session.panels() == [
        ("a", b"\x00", [Diff.DIFFERENT]),
        ("b", b"\x01", [Diff.DIFFERENT]),
    ]


@pytest.mark.parametrize("method", ["data", "name", "diffs", "blob"])
def test_unknown_side_is_rejected(method):
    """Only 'left' and 'right' are valid sides."""
    session = DiffSession()
    with pytest.raises(ValueError):
        getattr(session, method)("middle")
    with pytest.raises(ValueError):
        session.load("middle", _blob("x", b""))
