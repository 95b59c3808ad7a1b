"""
Pure-Python SHA-0 message digest with streaming and column helpers.
"""

from .compress import compress, message_schedule
from .hasher import HasherFinalizedError, Sha0, new, sha0_hash
from .padding import pad
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "HasherFinalizedError",
    "Sha0",
    "new",
    "sha0_hash",
    "compress",
    "message_schedule",
    "pad",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
