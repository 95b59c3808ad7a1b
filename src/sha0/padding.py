from __future__ import annotations

import struct

from .compress import BLOCK_SIZE

_MASK_64 = 0xFFFFFFFFFFFFFFFF
_LENGTH_OFFSET = BLOCK_SIZE - 8


def pad(tail: bytes, bit_length: int) -> bytes:
    """
    Append the SHA-0 padding to the unprocessed tail of a message.

    The marker byte ``0x80`` is followed by zeros up to 56 mod 64 and then the
    message length in bits as a big-endian 64-bit integer. The result is one
    block long, or two when the tail leaves no room for the length field.
    """
    zeros = (_LENGTH_OFFSET - (len(tail) + 1)) % BLOCK_SIZE
    return (
        bytes(tail)
        + b"\x80"
        + b"\x00" * zeros
        + struct.pack(">Q", bit_length & _MASK_64)
    )


__all__ = ["pad"]
