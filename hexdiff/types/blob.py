"""Byte blob type."""

from dataclasses import dataclass
from typing import Iterable, Union

BytesLike = Union[bytes, bytearray, memoryview, Iterable[int]]


@dataclass(frozen=True)
class ByteBlob:
    """One side of a comparison: a named byte payload."""

    name: str
    data: bytes
    file_type: str = "application/octet-stream"

    def __post_init__(self) -> None:
        # Normalize to immutable bytes on initialization
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", _to_bytes(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        return (
            f"{class_name} (\n"
            f"   name: {self.name}\n"
            f"   type: {self.file_type}\n"
            f"   size: {len(self.data)} bytes\n"
            f")"
        )


def _to_bytes(data: BytesLike) -> bytes:
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)

    values = list(data)
    invalid = {value for value in values if not 0 <= value <= 255}
    if invalid:
        raise ValueError(
            f"Invalid byte values: {sorted(invalid)}; allowed: 0..255"
        )
    return bytes(values)


__all__ = ["ByteBlob", "BytesLike"]
