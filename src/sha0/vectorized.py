from __future__ import annotations

from typing import Any, Optional

from .hasher import sha0_hash


def _hash_value(value: Any) -> Optional[bytes]:
    if value is None:
        return None
    if isinstance(value, str):
        return sha0_hash(value.encode("utf-8"))
    if isinstance(value, (bytes, bytearray, memoryview)):
        return sha0_hash(value)
    raise TypeError(f"Unsupported type for SHA-0 column hashing: {type(value)!r}")


def hash_pandas_series(series: Any):
    """
    Hash a pandas Series into a Series of 20-byte digests.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = [None if pd.isna(val) else _hash_value(val) for val in series]
    return pd.Series(
        hashes,
        index=getattr(series, "index", None),
        name=getattr(series, "name", None),
        dtype="object",
    )


def hash_arrow_array(array: Any):
    """
    Hash a pyarrow Array (or values coercible to one) into a binary(20) Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = [
        _hash_value(val.as_py() if hasattr(val, "as_py") else val) for val in arr
    ]
    return pa.array(hashes, type=pa.binary(20))


def hash_polars_series(series: Any):
    """
    Hash a polars Series into a Binary Series.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if isinstance(series, pl.Series) else pl.Series(series)
    hashes = [_hash_value(val) for val in ser]
    name = ser.name or "sha0"
    return pl.Series(name=name, values=hashes, dtype=pl.Binary)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
