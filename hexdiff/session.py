"""Two-sided comparison state, recomputed whenever either side changes."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from hexdiff.algorithms import compare
from hexdiff.types import ByteBlob, Diff, DiffResult
from hexdiff.utils.loader import random_blob
from hexdiff.utils.render import Panel

SIDES: Tuple[str, str] = ("left", "right")
NO_FILE = "no file"


def _validate_side(side: str) -> None:
    if side not in SIDES:
        raise ValueError(f"Unknown side {side!r}; expected one of {list(SIDES)}")


class DiffSession:
    """Holds the left and right blobs and the classifications derived from them.

    Classifications are only computed once both sides are loaded; until then
    both classification sequences are empty.
    """

    def __init__(
        self, left: Optional[ByteBlob] = None, right: Optional[ByteBlob] = None
    ):
        self._blobs: Dict[str, Optional[ByteBlob]] = {"left": left, "right": right}
        self._diffs: Dict[str, List[Diff]] = {"left": [], "right": []}
        self._update_diffs()

    def _update_diffs(self) -> None:
        left, right = self._blobs["left"], self._blobs["right"]
        if left is not None and right is not None:
            diffs_left, diffs_right = compare(left.data, right.data)
        else:
            diffs_left, diffs_right = [], []
        self._diffs = {"left": diffs_left, "right": diffs_right}

    def load(self, side: str, blob: ByteBlob) -> None:
        """Replace one side and recompute."""
        _validate_side(side)
        self._blobs[side] = blob
        self._update_diffs()

    def randomize(self, side: str, size: int = 1000, seed: Optional[int] = None) -> None:
        """Replace one side with random test data and recompute."""
        self.load(side, random_blob(size=size, seed=seed))

    def blob(self, side: str) -> Optional[ByteBlob]:
        _validate_side(side)
        return self._blobs[side]

    def data(self, side: str) -> bytes:
        """Bytes of one side, empty when the side is not loaded."""
        blob = self.blob(side)
        return blob.data if blob is not None else b""

    def name(self, side: str) -> str:
        blob = self.blob(side)
        return blob.name if blob is not None else NO_FILE

    def diffs(self, side: str) -> List[Diff]:
        """Copy of one side's classifications."""
        _validate_side(side)
        return list(self._diffs[side])

    @property
    def ready(self) -> bool:
        """True once both sides are loaded."""
        return all(blob is not None for blob in self._blobs.values())

    @property
    def result(self) -> DiffResult:
        """Classifications of both sides; only defined once both are loaded."""
        if not self.ready:
            missing = [side for side in SIDES if self._blobs[side] is None]
            raise ValueError(
                f"Cannot compare before both sides are loaded; missing: {missing}"
            )
        return DiffResult(
            diffs_a=tuple(self._diffs["left"]), diffs_b=tuple(self._diffs["right"])
        )

    def panels(self) -> List[Panel]:
        """(name, data, diffs) for each side, in left/right order."""
        return [(self.name(side), self.data(side), self.diffs(side)) for side in SIDES]


__all__ = ["DiffSession", "SIDES", "NO_FILE"]
