from __future__ import annotations

import struct
from typing import List, Tuple

_MASK_32 = 0xFFFFFFFF

BLOCK_SIZE = 64
ROUNDS = 80

State = Tuple[int, int, int, int, int]

INITIAL_STATE: State = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

_K0 = 0x5A827999
_K1 = 0x6ED9EBA1
_K2 = 0x8F1BBCDC
_K3 = 0xCA62C1D6


def _rotl(x: int, b: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << b) | (x >> (32 - b))) & _MASK_32


def message_schedule(block: bytes) -> List[int]:
    """
    Expand a 64-byte block into the 80 round words.

    Unlike SHA-1 the expanded words are never rotated:
    ``w[t] = w[t-3] ^ w[t-8] ^ w[t-14] ^ w[t-16]``.
    """
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"SHA-0 block must be exactly {BLOCK_SIZE} bytes")

    w = list(struct.unpack(">16I", block))
    for t in range(16, ROUNDS):
        w.append(w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16])
    return w


def compress(state: State, block: bytes) -> State:
    """Advance the five-word state by one 64-byte block."""
    w = message_schedule(block)
    a, b, c, d, e = state

    for t in range(ROUNDS):
        if t < 20:
            f = (b & c) | (~b & d)
            k = _K0
        elif t < 40:
            f = b ^ c ^ d
            k = _K1
        elif t < 60:
            f = (b & c) | (b & d) | (c & d)
            k = _K2
        else:
            f = b ^ c ^ d
            k = _K3

        temp = (_rotl(a, 5) + (f & _MASK_32) + e + k + w[t]) & _MASK_32
        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = temp

    h0, h1, h2, h3, h4 = state
    return (
        (h0 + a) & _MASK_32,
        (h1 + b) & _MASK_32,
        (h2 + c) & _MASK_32,
        (h3 + d) & _MASK_32,
        (h4 + e) & _MASK_32,
    )


__all__ = ["BLOCK_SIZE", "INITIAL_STATE", "ROUNDS", "compress", "message_schedule"]
