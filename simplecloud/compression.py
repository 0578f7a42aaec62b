"""Length-prefixed zlib compression of byte strings."""

from __future__ import annotations

import struct
import threading
import zlib

__all__ = ["CompressionError", "Compressor", "compress", "decompress"]

_HEADER = struct.Struct(">I")


class CompressionError(ValueError):
    """Raised when data cannot be compressed or decompressed."""


def compress(data: bytes) -> bytes:
    """Compress ``data``; the result starts with its 4-byte big-endian length."""
    data = bytes(data)
    if len(data) > 0xFFFFFFFF:
        raise CompressionError("data too large to compress")
    if not data:
        return _HEADER.pack(0)
    return _HEADER.pack(len(data)) + zlib.compress(data)


def decompress(data: bytes) -> bytes:
    """Reverse :func:`compress`, raising :class:`CompressionError` on bad input."""
    data = bytes(data)
    if len(data) < _HEADER.size:
        raise CompressionError("input too short to hold a length header")
    (expected,) = _HEADER.unpack_from(data)
    body = data[_HEADER.size:]
    if not body:
        if expected:
            raise CompressionError("input holds a length but no compressed data")
        return b""
    try:
        return zlib.decompress(body)
    except zlib.error as exc:
        raise CompressionError(f"data is corrupt: {exc}") from exc


class Compressor:
    """Stateful wrapper that tracks whether a compression cycle is running."""

    def __init__(self) -> None:
        self._working = False
        self._stopped = threading.Event()

    def compress_data(self, data: bytes) -> bytes:
        self._working = True
        return compress(data)

    def decompress_data(self, data: bytes) -> bytes:
        try:
            return decompress(data)
        finally:
            self._working = False

    def is_working(self) -> bool:
        return self._working

    @property
    def stopped(self) -> bool:
        return self._stopped.is_set()

    def stop(self) -> None:
        self._stopped.set()