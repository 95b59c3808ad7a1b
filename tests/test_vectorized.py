import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../src")))

import pytest

from sha0.hasher import sha0_hash

ABC_DIGEST = bytes.fromhex("0164b8a914cd2a5e74c4f7ff082c4d97f1edf880")


def test_pandas_series_hashes_elementwise():
    pd = pytest.importorskip("pandas")
    from sha0.vectorized import hash_pandas_series

    series = pd.Series([b"abc", "abc", None], index=[10, 20, 30], name="payload")
    hashed = hash_pandas_series(series)

    assert list(hashed.index) == [10, 20, 30]
    assert hashed.name == "payload"
    assert hashed[10] == ABC_DIGEST
    assert hashed[20] == ABC_DIGEST
    assert hashed[30] is None


def test_arrow_array_hashes_elementwise():
    pa = pytest.importorskip("pyarrow")
    from sha0.vectorized import hash_arrow_array

    hashed = hash_arrow_array(pa.array([b"abc", b"", None], type=pa.binary()))

    assert hashed.type == pa.binary(20)
    assert hashed.to_pylist() == [ABC_DIGEST, sha0_hash(b""), None]


def test_arrow_accepts_plain_lists():
    pytest.importorskip("pyarrow")
    from sha0.vectorized import hash_arrow_array

    assert hash_arrow_array(["abc"]).to_pylist() == [ABC_DIGEST]


def test_polars_series_hashes_elementwise():
    pl = pytest.importorskip("polars")
    from sha0.vectorized import hash_polars_series

    hashed = hash_polars_series(pl.Series("payload", ["abc", None]))

    assert hashed.name == "payload"
    assert hashed.dtype == pl.Binary
    assert hashed.to_list() == [ABC_DIGEST, None]


def test_polars_default_name():
    pytest.importorskip("polars")
    from sha0.vectorized import hash_polars_series

    assert hash_polars_series(["abc"]).name == "sha0"


def test_unsupported_element_type():
    pd = pytest.importorskip("pandas")
    from sha0.vectorized import hash_pandas_series

    with pytest.raises(TypeError) as excinfo:
        hash_pandas_series(pd.Series([1.5, 2.5]))
    assert "Unsupported type" in str(excinfo.value)
