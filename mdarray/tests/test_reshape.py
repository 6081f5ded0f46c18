import numpy as np
import pytest
from numpy.testing import assert_array_equal

from mdarray.errors import (DataSizeError, DimensionChainError,
                            DimensionNumberError, DimensionSizeError,
                            FillValueError, HighAddressBoundsError,
                            LowAddressBoundsError)
from mdarray.reshape import contract, expand


def test_expand_dim0():
    data = np.arange(6)
    out, shape = expand(data, (3, 2), -1, 0, 3, 1)
    assert (4, 2) == shape
    assert_array_equal([0, 1, 2, -1, 3, 4, 5, -1], out)

    out, shape = expand(data, (3, 2), -1, 0, 0, 1)
    assert (4, 2) == shape
    assert_array_equal([-1, 0, 1, 2, -1, 3, 4, 5], out)

    # input untouched
    assert_array_equal(np.arange(6), data)


def test_expand_dim1():
    out, shape = expand(np.arange(6), (3, 2), 9, 1, 1, 1)
    assert (3, 3) == shape
    assert_array_equal([0, 1, 2, 9, 9, 9, 3, 4, 5], out)


def test_expand_adds_dimensions():
    out, shape = expand(np.arange(6), (3, 2), 0, 2, 1, 1)
    assert (3, 2, 2) == shape
    assert_array_equal([0, 1, 2, 3, 4, 5, 0, 0, 0, 0, 0, 0], out)

    out, shape = expand(np.arange(6), (3, 2), 0, 3, 0, 2)
    assert (3, 2, 1, 3) == shape
    assert_array_equal([0] * 12 + list(range(6)), out)


def test_expand_empty():
    out, shape = expand(np.empty(0, dtype=object), (5, 4, 0), 7, 2, 0, 3)
    assert (5, 4, 3) == shape
    assert [7] * 60 == out.tolist()

    out, shape = expand(np.empty(0, dtype=object), (0,), 'a', 0, 0, 4)
    assert (4,) == shape
    assert ['a'] * 4 == out.tolist()

    # lower dimensions of an empty array cannot grow
    with pytest.raises(DimensionNumberError):
        expand(np.empty(0, dtype=object), (5, 4, 0), 7, 1, 0, 1)


def test_expand_errors():
    data = np.arange(6)
    with pytest.raises(LowAddressBoundsError):
        expand(data, (3, 2), 0, 0, 4, 1)
    with pytest.raises(LowAddressBoundsError):
        expand(data, (3, 2), 0, 0, -1, 1)
    with pytest.raises(DimensionSizeError):
        expand(data, (3, 2), 0, 0, 0, -1)
    with pytest.raises(DimensionNumberError):
        expand(data, (3, 2), 0, -1, 0, 1)


def test_contract_dim0():
    out, shape = contract(np.arange(20), (5, 4), 1, 0, 2)
    assert (3, 4) == shape
    assert_array_equal([0, 3, 4, 5, 8, 9, 10, 13, 14, 15, 18, 19], out)


def test_contract_top_to_empty():
    out, shape = contract(np.arange(20), (5, 4), 0, 1, 4)
    assert (5, 0) == shape
    assert 0 == out.size

    out, shape = contract(np.arange(20), (5, 4), 0, 1, 4,
                          collapse_top_on_empty=True)
    assert (0,) == shape
    assert 0 == out.size


def test_contract_chain_break():
    data = np.arange(60)
    with pytest.raises(DimensionChainError):
        contract(data, (5, 4, 3), 0, 1, 4)
    assert_array_equal(np.arange(60), data)


def test_contract_removes_unit_dimension():
    data = np.arange(12)
    out, shape = contract(data, (1, 4, 3), 0, 0, 1)
    assert (4, 3) == shape
    assert out is data


def test_contract_errors():
    data = np.arange(20)
    with pytest.raises(HighAddressBoundsError):
        contract(data, (5, 4), 3, 1, 2)
    with pytest.raises(LowAddressBoundsError):
        contract(data, (5, 4), 4, 1, 1)
    with pytest.raises(DimensionNumberError):
        contract(data, (5, 4), 0, 2, 1)
    with pytest.raises(DimensionSizeError):
        contract(data, (5, 4), 0, 1, -1)


@pytest.mark.parametrize('dim, at, count', [
    (0, 0, 2),
    (0, 5, 1),
    (1, 2, 3),
    (2, 1, 2),
    (2, 3, 4),
])
def test_expand_contract_round_trip(dim, at, count):
    data = np.arange(60, dtype=object)
    shape = (5, 4, 3)
    out, new_shape = expand(data, shape, None, dim, at, count)
    assert shape[dim] + count == new_shape[dim]
    out, new_shape = contract(out, new_shape, at, dim, count)
    assert shape == new_shape
    assert_array_equal(data, out)


def test_expand_casts_init_value():
    data = np.arange(6)
    out, shape = expand(data, (3, 2), 2.0, 0, 3, 1)
    assert data.dtype == out.dtype
    assert_array_equal([0, 1, 2, 2, 3, 4, 5, 2], out)

    with pytest.raises(FillValueError):
        expand(data, (3, 2), 'x', 0, 3, 1)
    with pytest.raises(DataSizeError):
        expand(data, (3, 2), (1, 2), 1, 0, 1)
    assert_array_equal(np.arange(6), data)

    # object buffers store any value
    out, shape = expand(np.arange(6, dtype=object), (3, 2), (1, 2), 1, 0, 1)
    assert (1, 2) == out[0]
