"""Row-major address arithmetic.

Dimension 0 is the fastest varying axis: for a shape ``(5, 4, 3)`` the
element at coordinate ``(x, y, z)`` lives at flat index
``x + 5 * y + 20 * z``. None of the functions here check that a coordinate
lies inside the shape; see :mod:`mdarray.validation` for that.
"""
import operator
from functools import reduce

from mdarray.errors import DimensionNumberError


def element_count(shape):
    """Number of elements held by an array of the given shape."""
    return reduce(operator.mul, shape, 1)


def flat_index(shape, coord):
    """Flat storage offset of `coord` within an array of the given `shape`.

    `coord` must have at least as many entries as `shape`.
    """
    index = coord[0]
    stride = shape[0]
    for i in range(1, len(shape)):
        index += coord[i] * stride
        stride *= shape[i]
    return index


def unravel_index(shape, index):
    """Coordinate of flat `index` within an array of the given `shape`."""
    coord = []
    for size in shape[:-1]:
        index, c = divmod(index, size)
        coord.append(c)
    coord.append(index)
    return tuple(coord)


def pad_coordinate(shape, coord):
    """Pad `coord` with zeros so it has one entry per dimension of `shape`."""
    coord = tuple(coord)
    missing = len(shape) - len(coord)
    if missing > 0:
        coord += (0,) * missing
    return coord


def dimension_size(shape, dim):
    """Number of flat elements spanned by dimensions 0 through `dim` inclusive.

    This is the repeating block that contains every unit of dimension `dim`,
    i.e. how many elements one unit of dimension ``dim + 1`` represents.
    """
    if dim < 0 or dim >= len(shape):
        raise DimensionNumberError(dim, len(shape))
    return reduce(operator.mul, shape[:dim + 1], 1)


def element_block_size(shape, dim):
    """Number of flat elements spanned by a single unit of dimension `dim`.

    An empty array's zero-sized last dimension counts as 1, and dimensions
    beyond the rank of `shape` count as 1, so the result is still meaningful
    when an array is about to grow into those dimensions.
    """
    last = len(shape) - 1
    size = 1
    for i in range(dim):
        if i < last:
            size *= shape[i]
        elif i == last and shape[i] != 0:
            size *= shape[i]
    return size


def dim_to_shape(shape, dim, count):
    """Shape of a block of `count` units of dimension `dim` of `shape`."""
    if dim < 0 or dim >= len(shape):
        raise DimensionNumberError(dim, len(shape))
    lower = tuple(shape[:dim])
    if any(s > 0 for s in lower):
        return lower + (count,)
    return (count,)
