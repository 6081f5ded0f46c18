"""Block reads, writes and copies on flat buffers.

These functions take a one-dimensional numpy buffer together with its shape
and trust their caller: coordinates must already be padded to the rank of
the shape. :func:`read`, :func:`write`, :func:`read_range` and
:func:`write_range` do no bounds checking at all. :func:`copy`,
:func:`extract` and :func:`copy_structure` validate their arguments before
touching any data.
"""
import numpy as np

from mdarray.addressing import dim_to_shape, element_block_size, flat_index
from mdarray.errors import DataSizeError, DimensionSizeError
from mdarray.util import normalize_fill_value
from mdarray.validation import check_aligned_range, check_dim


def read(data, shape, coord):
    return data[flat_index(shape, coord)]


def write(data, shape, coord, value):
    data[flat_index(shape, coord)] = value


def read_range(data, shape, coord, count):
    """Copy of the `count` elements stored from `coord` onward."""
    start = flat_index(shape, coord)
    return data[start:start + count].copy()


def write_range(data, shape, coord, count, source):
    """Write the first `count` items of `source` from `coord` onward."""
    if len(source) < count:
        raise DataSizeError(count, len(source))
    start = flat_index(shape, coord)
    for i in range(count):
        data[start + i] = source[i]


def copy(src_data, src_shape, src_coord, dst_data, dst_shape, dst_coord, dim, count):
    """Copy `count` units of dimension `dim` from one buffer to another.

    Both coordinates must be aligned to `dim` and the ranges must fit their
    arrays. A unit of `dim` must hold the same number of elements on both
    sides.
    """
    if count < 0:
        raise DimensionSizeError(tuple(dst_shape), count)
    check_aligned_range(dst_shape, dst_coord, dim, count)
    check_aligned_range(src_shape, src_coord, dim, count)

    unit = element_block_size(dst_shape, dim)
    src_unit = element_block_size(src_shape, dim)
    if unit != src_unit:
        raise DataSizeError(unit, src_unit)

    nitems = unit * count
    dst_start = flat_index(dst_shape, dst_coord)
    src_start = flat_index(src_shape, src_coord)
    # copy first so overlapping ranges within one buffer behave
    dst_data[dst_start:dst_start + nitems] = \
        src_data[src_start:src_start + nitems].copy()


def extract(data, shape, coord, dim, count):
    """Copy `count` units of dimension `dim` starting at `coord` into a new
    buffer, returning the buffer and its shape."""
    check_aligned_range(shape, coord, dim, count)
    nitems = element_block_size(shape, dim) * count
    start = flat_index(shape, coord)
    out = data[start:start + nitems].copy()
    return out, dim_to_shape(shape, dim, count)


def copy_structure(shape, dim, count, init_value, dtype):
    """New buffer shaped like `count` units of dimension `dim` of `shape`, with
    every element set to `init_value`."""
    check_dim(shape, dim)
    if count < 0:
        raise DimensionSizeError(dim_to_shape(shape, dim, count), count)
    init_value = normalize_fill_value(init_value, dtype)
    nitems = element_block_size(shape, dim) * count
    out = np.empty(nitems, dtype=dtype)
    out.fill(init_value)
    return out, dim_to_shape(shape, dim, count)
