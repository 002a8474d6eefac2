"""Functions for producing byte blobs from files and from random data."""

from __future__ import annotations

import mimetypes
from pathlib import Path
from typing import Optional, Union

import numpy as np

from hexdiff.types import ByteBlob

DEFAULT_FILE_TYPE = "application/octet-stream"
RANDOM_NAME = "random"
RANDOM_FILE_TYPE = "test"


def read_blob(file_path: Union[str, Path]) -> ByteBlob:
    """Read a whole file as a ByteBlob named after the file."""
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"Input file not found: {path}")

    file_type, _ = mimetypes.guess_type(path.name)
    return ByteBlob(
        name=path.name,
        data=path.read_bytes(),
        file_type=file_type or DEFAULT_FILE_TYPE,
    )


def random_blob(size: int = 1000, seed: Optional[int] = None) -> ByteBlob:
    """Generate `size` uniformly random bytes; the same seed gives the same blob."""
    if size < 0:
        raise ValueError(f"Blob size must be non-negative, got {size}.")

    rng = np.random.default_rng(seed)
    data = rng.integers(0, 256, size=size, dtype=np.uint8).tobytes()
    return ByteBlob(name=RANDOM_NAME, data=data, file_type=RANDOM_FILE_TYPE)


__all__ = ["read_blob", "random_blob"]
