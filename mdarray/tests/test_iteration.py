import pytest

from mdarray.addressing import element_count
from mdarray.iteration import (Step, decrement, decrement_info, increment,
                               increment_info, iter_coords)


def test_increment():
    assert (1, 0) == increment((5, 4), (0, 0))
    assert (0, 1) == increment((5, 4), (4, 0))
    assert (0, 0, 1) == increment((5, 4, 3), (4, 3, 0))
    # wraps past the last element
    assert (0, 0) == increment((5, 4), (4, 3))


def test_decrement():
    assert (3, 2) == decrement((5, 4), (4, 2))
    assert (4, 0) == decrement((5, 4), (0, 1))
    # wraps past the first element
    assert (4, 3) == decrement((5, 4), (0, 0))


def test_increment_info():
    info = increment_info((5, 4), (1, 2))
    assert (2, 2) == info.coord
    assert (Step.NORMAL, Step.NONE) == info.changes
    assert 0 == info.high_dim
    assert not info.wrapped

    info = increment_info((5, 4), (4, 0))
    assert (0, 1) == info.coord
    assert (Step.RESET, Step.NORMAL) == info.changes
    assert 1 == info.high_dim
    assert not info.wrapped

    info = increment_info((5, 4), (4, 3))
    assert (0, 0) == info.coord
    assert (Step.RESET, Step.RESET) == info.changes
    assert 1 == info.high_dim
    assert info.wrapped


def test_decrement_info():
    info = decrement_info((5, 4, 3), (0, 0, 1))
    assert (4, 3, 0) == info.coord
    assert (Step.RESET, Step.RESET, Step.NORMAL) == info.changes
    assert 2 == info.high_dim
    assert not info.wrapped

    info = decrement_info((5, 4, 3), (0, 0, 0))
    assert (4, 3, 2) == info.coord
    assert info.wrapped


@pytest.mark.parametrize('shape', [(1,), (7,), (5, 4), (5, 4, 3), (2, 1, 3, 2)])
def test_iteration_is_total(shape):
    coords = list(iter_coords(shape))
    assert element_count(shape) == len(coords)
    assert element_count(shape) == len(set(coords))
    assert (0,) * len(shape) == coords[0]
    assert tuple(s - 1 for s in shape) == coords[-1]
    assert coords[::-1] == list(iter_coords(shape, reverse=True))


@pytest.mark.parametrize('shape', [(7,), (5, 4), (5, 4, 3)])
def test_increment_decrement_inverse(shape):
    for coord in iter_coords(shape):
        assert coord == decrement(shape, increment(shape, coord))
        assert coord == increment(shape, decrement(shape, coord))


def test_iter_coords_empty():
    assert [] == list(iter_coords((5, 0)))
    assert [] == list(iter_coords((0,)))
