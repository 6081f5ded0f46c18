import numbers
from textwrap import TextWrapper

import numpy as np
from asciitree import BoxStyle, LeftAligned
from asciitree.traversal import Traversal

from typing import Any, Dict, Tuple

from mdarray.errors import FillValueError


def normalize_shape(shape) -> Tuple[int, ...]:
    """Convenience function to normalize the `shape` argument."""

    if shape is None:
        raise TypeError('shape is None')

    # handle 1D convenience form
    if isinstance(shape, numbers.Integral):
        shape = (int(shape),)

    # normalize
    shape = tuple(int(s) for s in shape)
    return shape


def normalize_coord(coord) -> Tuple[int, ...]:
    """Convenience function to normalize a coordinate argument."""

    if coord is None:
        raise TypeError('coordinate is None')

    if isinstance(coord, numbers.Integral):
        coord = (int(coord),)

    return tuple(int(c) for c in coord)


def normalize_dtype(dtype, default):
    if dtype is None:
        dtype = default
    return np.dtype(dtype)


def ensure_flat_ndarray(data, dtype=None) -> np.ndarray:
    """Return `data` as a one-dimensional numpy array.

    The result is always a new buffer, never a view of `data`. numpy arrays
    keep their dtype unless `dtype` is given; any other iterable is copied
    item by item, so sequences of tuples or lists stay single elements when
    the dtype is ``object``.
    """

    if isinstance(data, np.ndarray):
        return np.array(data, dtype=dtype, copy=True).reshape(-1)

    if dtype is None:
        dtype = np.dtype(object)
    items = list(data)
    out = np.empty(len(items), dtype=dtype)
    for i, v in enumerate(items):
        out[i] = v
    return out


def normalize_fill_value(fill_value, dtype):
    """Cast `fill_value` to a single element of `dtype`.

    Object buffers take any value as is. For other dtypes numpy decides what
    converts; a value it refuses, or one that is not a scalar, raises
    :class:`~mdarray.errors.FillValueError`.
    """

    dtype = np.dtype(dtype)
    if dtype.hasobject:
        return fill_value

    try:
        value = np.array(fill_value, dtype=dtype)
    except (TypeError, ValueError, OverflowError):
        raise FillValueError(fill_value, dtype)
    if value.ndim != 0:
        raise FillValueError(fill_value, dtype)
    return value[()]


def human_readable_size(size) -> str:
    if size < 2**10:
        return '%s' % size
    elif size < 2**20:
        return '%.1fK' % (size / float(2**10))
    elif size < 2**30:
        return '%.1fM' % (size / float(2**20))
    elif size < 2**40:
        return '%.1fG' % (size / float(2**30))
    elif size < 2**50:
        return '%.1fT' % (size / float(2**40))
    else:
        return '%.1fP' % (size / float(2**50))


def info_text_report(items: Dict[Any, Any]) -> str:
    keys = [k for k, v in items]
    max_key_len = max(len(k) for k in keys)
    report = ''
    for k, v in items:
        wrapper = TextWrapper(width=80,
                              initial_indent=k.ljust(max_key_len) + ' : ',
                              subsequent_indent=' '*max_key_len + ' : ')
        text = wrapper.fill(str(v))
        report += text + '\n'
    return report


class InfoReporter(object):

    def __init__(self, obj):
        self.obj = obj

    def __repr__(self):
        items = self.obj.info_items()
        return info_text_report(items)


class TreeNode(object):
    """One block of an array: the whole array at the root, then one node per
    unit of each dimension from the highest down to dimension 1, whose
    children are leaves holding a single row."""

    def __init__(self, array, dim, coord, depth=0, level=None):
        self.array = array
        self.dim = dim
        self.coord = coord
        self.depth = depth
        self.level = level

    def get_children(self):
        if self.dim < 1 or self.array.size == 0:
            return []
        if self.level is not None and self.depth >= self.level:
            return []
        dim = self.dim - 1
        depth = self.depth + 1
        return [TreeNode(self.array, dim, self.coord[:dim] + (i,) + self.coord[dim + 1:],
                         depth=depth, level=self.level)
                for i in range(self.array.shape[self.dim])]

    def get_text(self):
        if self.depth == 0:
            text = '{} {}'.format(self.array.shape, self.array.dtype)
        else:
            axis = self.dim + 1
            text = '{} = {}'.format(dim_label(axis), self.coord[axis])
        if self.dim == 0 and self.array.size > 0:
            row = self.array.read_range(self.coord, self.array.shape[0])
            text += ': ' + ' '.join(str(v) for v in row)
        return text


def dim_label(dim: int) -> str:
    """Name of a dimension as printed: X, Y, Z, W, then W+1, W+2, ..."""
    if dim < 4:
        return 'XYZW'[dim]
    return 'W+{}'.format(dim - 3)


class TreeTraversal(Traversal):

    def get_children(self, node):
        return node.get_children()

    def get_root(self, tree):
        return tree

    def get_text(self, node):
        return node.get_text()


class TreeViewer(object):

    def __init__(self, array, level=None):

        self.array = array
        self.level = level

        self.text_kwargs = dict(
            horiz_len=2,
            label_space=1,
            indent=1
        )

        self.bytes_kwargs = dict(
            UP_AND_RIGHT="+",
            HORIZONTAL="-",
            VERTICAL="|",
            VERTICAL_AND_RIGHT="+"
        )

        self.unicode_kwargs = dict(
            UP_AND_RIGHT="\u2514",
            HORIZONTAL="\u2500",
            VERTICAL="\u2502",
            VERTICAL_AND_RIGHT="\u251C"
        )

    def _root(self):
        ndim = self.array.ndim
        return TreeNode(self.array, ndim - 1, (0,) * ndim, level=self.level)

    def __bytes__(self):
        drawer = LeftAligned(
            traverse=TreeTraversal(),
            draw=BoxStyle(gfx=self.bytes_kwargs, **self.text_kwargs)
        )
        result = drawer(self._root())

        # Unicode characters slip in on Python 3.
        # So we need to straighten that out first.
        result = result.encode()

        return result

    def __unicode__(self):
        drawer = LeftAligned(
            traverse=TreeTraversal(),
            draw=BoxStyle(gfx=self.unicode_kwargs, **self.text_kwargs)
        )
        return drawer(self._root())

    def __repr__(self):
        return self.__unicode__()


class NoLock(object):
    """A lock that doesn't lock."""

    def __enter__(self):
        pass

    def __exit__(self, *args):
        pass


nolock = NoLock()
