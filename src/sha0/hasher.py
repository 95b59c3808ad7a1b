from __future__ import annotations

import struct
from typing import Optional

from .compress import BLOCK_SIZE, INITIAL_STATE, compress
from .padding import pad

_MASK_64 = 0xFFFFFFFFFFFFFFFF


class HasherFinalizedError(RuntimeError):
    """Raised when a hasher is used after ``finalize`` has produced its digest."""


def _check_bytes_like(data) -> None:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")


class Sha0:
    """
    Pure-Python SHA-0 implementation with a streaming API.

    The interface follows hashlib-style objects, except that ``finalize``
    consumes the hasher: the digest is produced exactly once and any later
    ``update``, ``finalize`` or ``copy`` raises :class:`HasherFinalizedError`.
    Use :meth:`copy` to take a digest of a prefix while streaming continues.

    Instances are not thread-safe; share one only behind external locking.
    """

    name = "sha0"
    digest_size = 20
    block_size = BLOCK_SIZE

    def __init__(self, data: Optional[bytes] = None):
        self._state = INITIAL_STATE
        self._tail = b""
        # Wraps modulo 2**64 like the length field it feeds.
        self._bit_length = 0
        self._finalized = False

        if data is not None:
            self.update(data)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def copy(self) -> "Sha0":
        self._ensure_active()
        dup = self.__class__.__new__(self.__class__)
        dup._state = self._state
        dup._tail = self._tail
        dup._bit_length = self._bit_length
        dup._finalized = False
        return dup

    def update(self, data: bytes) -> "Sha0":
        self._ensure_active()
        _check_bytes_like(data)

        raw = self._tail + bytes(data)
        self._bit_length = (self._bit_length + len(data) * 8) & _MASK_64
        self._tail = self._consume_blocks(raw)
        return self

    def finalize(self) -> bytes:
        """Pad, compress the final block(s) and return the 20-byte digest."""
        self._ensure_active()
        self._finalized = True

        remainder = self._consume_blocks(pad(self._tail, self._bit_length))
        assert not remainder
        self._tail = b""
        return struct.pack(">5I", *self._state)

    # Internal helpers -------------------------------------------------
    def _consume_blocks(self, raw: bytes) -> bytes:
        offset_limit = len(raw) - (len(raw) % BLOCK_SIZE)
        state = self._state
        for idx in range(0, offset_limit, BLOCK_SIZE):
            state = compress(state, raw[idx : idx + BLOCK_SIZE])
        self._state = state
        return raw[offset_limit:]

    def _ensure_active(self) -> None:
        if self._finalized:
            raise HasherFinalizedError("SHA-0 hasher has already been finalized")


def new(data: Optional[bytes] = None) -> Sha0:
    """Convenience constructor matching hashlib-style usage."""
    return Sha0(data)


def sha0_hash(data: bytes) -> bytes:
    """Return the SHA-0 digest of ``data`` in one call."""
    _check_bytes_like(data)
    return new().update(data).finalize()


__all__ = ["HasherFinalizedError", "Sha0", "new", "sha0_hash"]
