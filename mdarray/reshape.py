"""Growing and shrinking array dimensions.

Data is laid out row-major, so every unit of dimension ``dim`` sits inside a
repeating block of ``dimension_size(shape, dim)`` elements. Inserting (or
removing) units of ``dim`` therefore means opening (or closing) the same gap
at the same offset in every one of those blocks.

Both functions build their result in a new buffer and leave the input
untouched, so a failed call never leaves an array half moved.
"""
from logging import getLogger

import numpy as np

from mdarray.addressing import dimension_size, element_block_size, element_count
from mdarray.errors import (DimensionChainError, DimensionNumberError,
                            DimensionSizeError)
from mdarray.util import normalize_fill_value
from mdarray.validation import check_dim_address, check_dim_address_range

logger = getLogger(__name__)


def expand(data, shape, init_value, dim, at, count):
    """Insert `count` units of dimension `dim` before unit `at`.

    `at` ranges from 0 (before the first unit) to the current size of the
    dimension (append). If `dim` is beyond the highest dimension, dimensions
    of size 1 are added up to it; when the array is empty the new highest
    dimension starts at size 0 instead, since it holds nothing yet.

    Parameters
    ----------
    data : ndarray
        One-dimensional buffer holding the array elements.
    shape : tuple of ints
        Shape of `data`.
    init_value : object
        Value for every new element. Cast to the dtype of `data`; a value that
        does not fit raises :class:`~mdarray.errors.FillValueError`.
    dim : int
        Dimension to grow.
    at : int
        Insert position along `dim`.
    count : int
        Number of units to insert.

    Returns
    -------
    data : ndarray
        New buffer.
    shape : tuple of ints
        New shape.

    """
    shape = list(shape)
    ndim = len(shape)
    last = ndim - 1
    orig_size = element_count(shape)

    if count < 0:
        raise DimensionSizeError(tuple(shape), count)
    init_value = normalize_fill_value(init_value, data.dtype)

    # an empty array can only grow along its highest dimension or above
    if orig_size == 0 and dim < last:
        raise DimensionNumberError(dim, ndim)

    # add dimensions if needed
    if dim >= ndim:
        if shape[last] == 0:
            shape[last] = 1
        for i in range(ndim, dim + 1):
            if i == dim and orig_size == 0:
                shape.append(0)
            else:
                shape.append(1)
        ndim = dim + 1

    check_dim_address(ndim, dim, at, shape[dim] if dim >= 0 else -1)

    unit = element_block_size(shape, dim)
    block = dimension_size(shape, dim)
    offset = at * unit
    gap = unit * count

    shape[dim] += count
    new_size = element_count(shape)
    logger.debug("expand: dim %s at %s by %s, %s -> %s elements",
                 dim, at, count, orig_size, new_size)

    if orig_size == 0:
        out = np.empty(new_size, dtype=data.dtype)
        out.fill(init_value)
        return out, tuple(shape)

    rows = data.reshape(-1, block)
    out = np.empty((rows.shape[0], block + gap), dtype=data.dtype)
    out[:, :offset] = rows[:, :offset]
    out[:, offset:offset + gap].fill(init_value)
    out[:, offset + gap:] = rows[:, offset:]
    return out.reshape(-1), tuple(shape)


def contract(data, shape, at, dim, count, collapse_top_on_empty=False):
    """Remove `count` units of dimension `dim` starting at unit `at`.

    Only the highest dimension can be shrunk to size 0, which leaves an empty
    array with its lower dimensions intact, or with shape ``(0,)`` if
    `collapse_top_on_empty` is true. A lower dimension can only be emptied if
    its size is 1, in which case the dimension itself is removed and the
    elements are unchanged.

    Returns
    -------
    data : ndarray
        New buffer, or `data` itself if only the shape changed.
    shape : tuple of ints
        New shape.

    """
    shape = list(shape)
    ndim = len(shape)

    if count < 0:
        raise DimensionSizeError(tuple(shape), count)

    max_address = shape[dim] - 1 if 0 <= dim < ndim else -1
    check_dim_address_range(ndim, dim, at, max_address, count)

    size = shape[dim]
    new_dim_size = size - count

    if new_dim_size == 0 and dim != ndim - 1:
        if size != 1:
            raise DimensionChainError(dim, size)
        del shape[dim]
        logger.debug("contract: removed dimension %s, new shape %s", dim, shape)
        return data, tuple(shape)

    unit = element_block_size(shape, dim)
    block = dimension_size(shape, dim)
    offset = at * unit
    gap = unit * count

    rows = data.reshape(-1, block)
    out = np.delete(rows, np.s_[offset:offset + gap], axis=1).reshape(-1)

    if out.size == 0 and collapse_top_on_empty:
        shape = [0]
    else:
        shape[dim] = new_dim_size
    logger.debug("contract: dim %s at %s by %s, %s -> %s elements",
                 dim, at, count, data.size, out.size)

    return out, tuple(shape)
