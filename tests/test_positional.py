"""Unit tests for positional byte classification."""

from __future__ import annotations

import pytest

from hexdiff.algorithms import ByteDiffer, PositionalDiffer, compare
from hexdiff.types import Diff, DiffResult

SAME, DIFFERENT, NO_OTHER = Diff.SAME, Diff.DIFFERENT, Diff.NO_OTHER

PAIRS = [
    (b"", b""),
    (b"", b"\x00"),
    (b"\x00", b""),
    (b"abc", b"abc"),
    (b"abc", b"abd"),
    (b"\x01\x02\x03", b"\x01\xff"),
    (b"\xaa", b"\xaa\xbb\xcc"),
    (bytes(range(256)), bytes(reversed(range(256)))),
    (b"\x00" * 40, b"\x00" * 17),
]


def test_compare_examples_with_longer_first_sequence():
    """Mismatched overlap then NO_OTHER tail on the longer side only."""
    diffs_a, diffs_b = compare([0x01, 0x02, 0x03], [0x01, 0xFF])
    assert diffs_a == [SAME, DIFFERENT, NO_OTHER]
    assert diffs_b == [SAME, DIFFERENT]


def test_compare_examples_with_longer_second_sequence():
    """The tail is attributed to the second sequence when it is longer."""
    diffs_a, diffs_b = compare([0xAA], [0xAA, 0xBB, 0xCC])
    assert diffs_a == [SAME]
    assert diffs_b == [SAME, NO_OTHER, NO_OTHER]


def test_compare_empty_sequences():
    """Two empty sequences give two empty classification lists."""
    assert compare([], []) == ([], [])
    assert compare(b"", b"") == ([], [])


def test_compare_one_empty_sequence():
    """Against an empty sequence every byte is NO_OTHER."""
    assert compare(b"xyz", b"") == ([NO_OTHER] * 3, [])
    assert compare(b"", b"xy") == ([], [NO_OTHER] * 2)


@pytest.mark.parametrize("a,b", PAIRS)
def test_compare_output_lengths_match_inputs(a, b):
    """Each classification list has one entry per input byte."""
    diffs_a, diffs_b = compare(a, b)
    assert len(diffs_a) == len(a)
    assert len(diffs_b) == len(b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_compare_overlap_is_symmetric(a, b):
    """Both sides agree on every index they share, and never report NO_OTHER there."""
    diffs_a, diffs_b = compare(a, b)
    overlap = min(len(a), len(b))
    assert diffs_a[:overlap] == diffs_b[:overlap]
    assert NO_OTHER not in diffs_a[:overlap]
    for i in range(overlap):
        assert (diffs_a[i] is SAME) == (a[i] == b[i])


@pytest.mark.parametrize("a,b", PAIRS)
def test_compare_tail_is_no_other(a, b):
    """Past the shorter length only the longer side has entries, all NO_OTHER."""
    diffs_a, diffs_b = compare(a, b)
    overlap = min(len(a), len(b))
    longer = diffs_a if len(a) >= len(b) else diffs_b
    assert all(diff is NO_OTHER for diff in longer[overlap:])


def test_compare_identical_sequences_are_all_same():
    """Comparing a sequence with itself gives SAME everywhere on both sides."""
    data = bytes(range(256)) * 3
    diffs_a, diffs_b = compare(data, data)
    assert set(diffs_a) == {SAME}
    assert set(diffs_b) == {SAME}


def test_compare_accepts_mixed_sequence_types():
    """bytes, bytearray, memoryview and int lists compare by value."""
    data = b"\x10\x20\x30"
    expected = ([SAME] * 3, [SAME] * 3)
    assert compare(data, bytearray(data)) == expected
    assert compare(memoryview(data), [0x10, 0x20, 0x30]) == expected


def test_compare_does_not_mutate_inputs():
    """Inputs are left untouched."""
    a = bytearray(b"\x01\x02")
    b = [0x01, 0x03, 0x04]
    compare(a, b)
    assert a == bytearray(b"\x01\x02")
    assert b == [0x01, 0x03, 0x04]


def test_compare_returns_fresh_lists():
    """Results of separate calls do not share state."""
    first_a, _ = compare(b"a", b"a")
    first_a.append(DIFFERENT)
    second_a, _ = compare(b"a", b"a")
    assert second_a == [SAME]


def test_positional_differ_wraps_compare():
    """PositionalDiffer returns the same classifications as a DiffResult."""
    differ = PositionalDiffer()
    assert isinstance(differ, ByteDiffer)

    result = differ.diff(b"\x01\x02\x03", b"\x01\xff")
    assert isinstance(result, DiffResult)
    assert result.diffs_a == (SAME, DIFFERENT, NO_OTHER)
    assert result.diffs_b == (SAME, DIFFERENT)
    assert result.overlap == 2
    assert result.span == 3


def test_byte_differ_is_abstract():
    """ByteDiffer cannot be instantiated directly."""
    with pytest.raises(TypeError):
        ByteDiffer()  # pylint: disable=abstract-class-instantiated
