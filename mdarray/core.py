from logging import getLogger

import numpy as np

from mdarray import reshape, transfer
from mdarray.addressing import element_count, flat_index, pad_coordinate
from mdarray.config import config
from mdarray.descriptor import (decode_trailer, encode_trailer,
                                make_descriptor, to_raw_save)
from mdarray.errors import DataSizeError, ReadOnlyError
from mdarray.iteration import (decrement, decrement_info, increment,
                               increment_info, iter_coords)
from mdarray.printing import format_array
from mdarray.sync import DEFAULT_KEY, hold_locks
from mdarray.util import (InfoReporter, TreeViewer, ensure_flat_ndarray,
                          human_readable_size, nolock, normalize_coord,
                          normalize_dtype)
from mdarray.validation import check_bounds, check_shape

__all__ = ["DenseArray", "copy"]

logger = getLogger(__name__)


class DenseArray:
    """A dense array of any rank stored in a flat, row-major buffer.

    Dimension 0 is the fastest varying. A shape whose last entry is 0 denotes
    an empty array whose lower dimensions are kept so it can grow again.

    Parameters
    ----------
    data : array-like
        Flat sequence of ``product(shape)`` elements, copied into a new
        buffer owned by the array. Use :meth:`from_raw` to wrap an existing
        buffer without copying.
    shape : int or tuple of ints
        Dimension sizes.
    dtype : string or dtype, optional
        Element type. Defaults to the dtype of a numpy `data`, otherwise to
        the ``array.default_dtype`` configuration value (``object``).
    name : string, optional
        Name used in reports and as the synchronizer lock key.
    read_only : bool, optional
        True if the array should be protected against modification.
    synchronizer : object, optional
        Array synchronizer, see :mod:`mdarray.sync`.

    Raises
    ------
    NoDimensionsError, DimensionSizeError
        If `shape` is malformed.
    DataSizeError
        If `data` does not hold exactly ``product(shape)`` elements.

    Examples
    --------
    >>> import mdarray
    >>> a = mdarray.create(range(20), (5, 4))
    >>> a.read((2, 1))
    7
    >>> a.shape
    (5, 4)

    """

    def __init__(self, data, shape, dtype=None, name=None, read_only=False,
                 synchronizer=None):
        shape = check_shape(shape)
        if dtype is None and not isinstance(data, np.ndarray):
            dtype = config.get("array.default_dtype")
        if dtype is not None:
            dtype = normalize_dtype(dtype, None)
        data = ensure_flat_ndarray(data, dtype)

        size = element_count(shape)
        if data.size != size:
            raise DataSizeError(size, data.size)

        self._data = data
        self._shape = shape
        self._name = name
        self._read_only = bool(read_only)
        self._synchronizer = synchronizer

    @classmethod
    def from_raw(cls, data, descriptor, **kwargs):
        """Wrap a flat numpy buffer with a descriptor, without validation.

        This is the fast path for reattaching a descriptor obtained from
        :meth:`to_raw_save`; use the constructor if either may be malformed.
        """
        obj = cls.__new__(cls)
        obj._data = data
        obj._shape = tuple(descriptor.shape)
        obj._name = kwargs.get('name')
        obj._read_only = bool(kwargs.get('read_only', False))
        obj._synchronizer = kwargs.get('synchronizer')
        return obj

    @classmethod
    def from_flat(cls, flat, **kwargs):
        """Load an array from a flat sequence carrying a trailer.

        Raises
        ------
        NotArrayError
            If `flat` has no valid trailer.
        DataSizeError
            If the number of elements does not match the trailer.
        """
        descriptor = decode_trailer(flat)
        raw, _ = to_raw_save(flat)
        return cls(raw, descriptor.shape, **kwargs)

    @property
    def name(self):
        """Array name, or None."""
        return self._name

    @property
    def read_only(self):
        """A boolean, True if modification operations are not permitted."""
        return self._read_only

    @read_only.setter
    def read_only(self, value):
        self._read_only = bool(value)

    @property
    def synchronizer(self):
        """Object used to synchronize access to the array."""
        return self._synchronizer

    @property
    def lock_key(self):
        """Key of this array's lock in its synchronizer."""
        return self._name or DEFAULT_KEY

    @property
    def shape(self):
        """A tuple of integers describing the length of each dimension of
        the array."""
        return self._shape

    @property
    def ndim(self):
        """Number of dimensions."""
        return len(self._shape)

    @property
    def size(self):
        """The total number of elements in the array."""
        return self._data.size

    @property
    def dtype(self):
        """The NumPy data type of the backing buffer."""
        return self._data.dtype

    @property
    def nbytes(self):
        """The number of bytes held by the backing buffer."""
        return self._data.nbytes

    @property
    def data(self):
        """The flat backing buffer."""
        return self._data

    @property
    def descriptor(self):
        """The :class:`~mdarray.descriptor.Descriptor` of the array."""
        return make_descriptor(self._shape)

    def __len__(self):
        return self.size

    def __eq__(self, other):
        return (
            isinstance(other, DenseArray) and
            self._shape == other._shape and
            np.array_equal(self._data, other._data)
        )

    def __repr__(self):
        t = type(self)
        r = '<{}.{}'.format(t.__module__, t.__name__)
        if self._name:
            r += ' %r' % self._name
        r += ' %s' % str(self._shape)
        r += ' %s' % self.dtype
        if self._read_only:
            r += ' read-only'
        r += '>'
        return r

    def _lock(self):
        if self._synchronizer is None:
            return nolock
        return self._synchronizer[self.lock_key]

    def _synchronized_op(self, f, *args, **kwargs):
        with self._lock():
            return f(*args, **kwargs)

    def _write_op(self, f, *args, **kwargs):
        # guard condition
        if self._read_only:
            raise ReadOnlyError()

        return self._synchronized_op(f, *args, **kwargs)

    def _coord(self, coord):
        return pad_coordinate(self._shape, normalize_coord(coord))

    # addressing

    def flat_index(self, coord):
        """Flat buffer offset of `coord`. Not bounds checked."""
        return flat_index(self._shape, self._coord(coord))

    def check_bounds(self, coord):
        """Raise :class:`~mdarray.errors.AddressBoundsError` unless `coord`
        lies inside the array."""
        check_bounds(self._shape, normalize_coord(coord))

    # iteration

    def increment(self, coord):
        return increment(self._shape, self._coord(coord))

    def decrement(self, coord):
        return decrement(self._shape, self._coord(coord))

    def increment_info(self, coord):
        return increment_info(self._shape, self._coord(coord))

    def decrement_info(self, coord):
        return decrement_info(self._shape, self._coord(coord))

    def coords(self, reverse=False):
        """Iterate over every coordinate of the array in storage order."""
        return iter_coords(self._shape, reverse=reverse)

    # element access

    def read(self, coord):
        """Read one element. Not bounds checked; use indexing for that."""
        return self._synchronized_op(self._read_nosync, coord)

    def _read_nosync(self, coord):
        return transfer.read(self._data, self._shape, self._coord(coord))

    def write(self, coord, value):
        """Write one element. Not bounds checked; use indexing for that."""
        self._write_op(self._write_nosync, coord, value)

    def _write_nosync(self, coord, value):
        transfer.write(self._data, self._shape, self._coord(coord), value)

    def __getitem__(self, coord):
        return self._synchronized_op(self._getitem_nosync, coord)

    def _getitem_nosync(self, coord):
        coord = normalize_coord(coord)
        check_bounds(self._shape, coord)
        return self._read_nosync(coord)

    def __setitem__(self, coord, value):
        self._write_op(self._setitem_nosync, coord, value)

    def _setitem_nosync(self, coord, value):
        coord = normalize_coord(coord)
        check_bounds(self._shape, coord)
        self._write_nosync(coord, value)

    def read_range(self, coord, count):
        """Copy of `count` consecutive elements starting at `coord`."""
        return self._synchronized_op(self._read_range_nosync, coord, count)

    def _read_range_nosync(self, coord, count):
        return transfer.read_range(self._data, self._shape, self._coord(coord),
                                   count)

    def write_range(self, coord, count, source):
        """Write the first `count` items of `source` starting at `coord`."""
        self._write_op(self._write_range_nosync, coord, count, source)

    def _write_range_nosync(self, coord, count, source):
        transfer.write_range(self._data, self._shape, self._coord(coord),
                             count, source)

    # block transfer

    def copy_from(self, source, source_coord, coord, dim, count):
        """Copy `count` units of dimension `dim` of `source` into this array.

        Parameters
        ----------
        source : DenseArray
            Array to copy from; may be this array.
        source_coord : tuple of ints
            Start of the block to read, aligned to `dim`.
        coord : tuple of ints
            Start of the block to write, aligned to `dim`.
        dim : int
            Dimension whose units are copied.
        count : int
            Number of units to copy.

        """
        if self._read_only:
            raise ReadOnlyError()
        with hold_locks(self, source):
            self._copy_from_nosync(source, source_coord, coord, dim, count)

    def _copy_from_nosync(self, source, source_coord, coord, dim, count):
        source_coord = pad_coordinate(source._shape, normalize_coord(source_coord))
        coord = self._coord(coord)
        logger.debug("copy: %s units of dim %s from %s to %s",
                     count, dim, source_coord, coord)
        transfer.copy(source._data, source._shape, source_coord, self._data,
                      self._shape, coord, dim, count)

    def extract(self, coord, dim, count, **kwargs):
        """New array holding a copy of `count` units of dimension `dim`
        starting at the aligned coordinate `coord`.

        Examples
        --------
        >>> import mdarray
        >>> a = mdarray.create(range(20), (5, 4))
        >>> b = a.extract((0, 1), 1, 2)
        >>> b.shape
        (5, 2)
        >>> list(b.data)
        [5, 6, 7, 8, 9, 10, 11, 12, 13, 14]

        """
        data, shape = self._synchronized_op(
            lambda: transfer.extract(self._data, self._shape, self._coord(coord),
                                     dim, count))
        return type(self)(data, shape, **kwargs)

    def copy_structure(self, dim, count, init_value, **kwargs):
        """New array shaped like `count` units of dimension `dim` of this
        array, filled with `init_value`."""
        data, shape = transfer.copy_structure(self._shape, dim, count,
                                              init_value, self.dtype)
        return type(self)(data, shape, **kwargs)

    # shape transforms

    def expand(self, init_value, dim, at, count):
        """Insert `count` units of dimension `dim` before unit `at`, filled
        with `init_value`. Dimensions are added if `dim` is beyond the
        highest one.
        `init_value` must fit the dtype of the array, otherwise
        :class:`~mdarray.errors.FillValueError` is raised and nothing changes.

        Returns
        -------
        new_shape : tuple

        Examples
        --------
        >>> import mdarray
        >>> a = mdarray.create(range(6), (3, 2))
        >>> a.expand(-1, 0, 3, 1)
        (4, 2)
        >>> list(a.data)
        [0, 1, 2, -1, 3, 4, 5, -1]

        """
        return self._write_op(self._expand_nosync, init_value, dim, at, count)

    def _expand_nosync(self, init_value, dim, at, count):
        data, shape = reshape.expand(self._data, self._shape, init_value,
                                     dim, at, count)
        self._data = data
        self._shape = shape
        return shape

    def contract(self, at, dim, count, collapse_top_on_empty=None):
        """Remove `count` units of dimension `dim` starting at unit `at`.

        Parameters
        ----------
        at : int
            First unit to remove.
        dim : int
            Dimension to shrink.
        count : int
            Number of units to remove.
        collapse_top_on_empty : bool, optional
            If the array ends up empty, reduce the shape to ``(0,)``. Defaults
            to the ``contract.collapse_top_on_empty`` configuration value.

        Returns
        -------
        new_shape : tuple

        """
        if collapse_top_on_empty is None:
            collapse_top_on_empty = config.get("contract.collapse_top_on_empty")
        return self._write_op(self._contract_nosync, at, dim, count,
                              collapse_top_on_empty)

    def _contract_nosync(self, at, dim, count, collapse_top_on_empty):
        data, shape = reshape.contract(self._data, self._shape, at, dim,
                                       count, collapse_top_on_empty)
        self._data = data
        self._shape = shape
        return shape

    # serialization boundary

    def to_raw(self):
        """The backing buffer, detached from the descriptor."""
        return self._data

    def to_raw_save(self):
        """The backing buffer and the descriptor needed to reattach it with
        :meth:`from_raw`."""
        return self._data, self.descriptor

    def to_flat(self):
        """The elements followed by the descriptor trailer, as a list."""
        return self._synchronized_op(
            lambda: self._data.tolist() + encode_trailer(self.descriptor))

    # diagnostics

    def tree(self, level=None):
        """Provide a ``print``-able display of the array's dimensions.

        Parameters
        ----------
        level : int
            Maximum depth to descend into the dimensions.

        Examples
        --------
        >>> import mdarray
        >>> a = mdarray.create(range(6), (3, 2))
        >>> print(a.tree())
        (3, 2) object
         ├── Y = 0: 0 1 2
         └── Y = 1: 3 4 5

        """
        return TreeViewer(self, level=level)

    def format(self):
        """Render the array as pages of X/Y tables, see
        :func:`mdarray.printing.format_array`."""
        return format_array(self)

    @property
    def info(self):
        """Report some diagnostic information about the array."""
        return InfoReporter(self)

    def info_items(self):
        return self._synchronized_op(self._info_items_nosync)

    def _info_items_nosync(self):

        def typestr(o):
            return '{}.{}'.format(type(o).__module__, type(o).__name__)

        def bytestr(n):
            if n > 2**10:
                return '{} ({})'.format(n, human_readable_size(n))
            else:
                return str(n)

        items = []

        if self._name is not None:
            items += [('Name', self._name)]
        items += [
            ('Type', typestr(self)),
            ('Data type', str(self.dtype)),
            ('Shape', str(self._shape)),
            ('No. dimensions', str(self.ndim)),
            ('No. elements', str(self.size)),
            ('No. bytes', bytestr(self.nbytes)),
            ('Read-only', str(self._read_only)),
        ]

        if self._synchronizer is not None:
            items += [('Synchronizer type', typestr(self._synchronizer))]

        return items


def copy(source, source_coord, dest, dest_coord, dim, count):
    """Copy `count` units of dimension `dim` from `source` to `dest`.

    Both coordinates must be aligned to `dim`, i.e. zero in every lower
    dimension. Nothing is written if either range fails validation.
    """
    dest.copy_from(source, source_coord, dest_coord, dim, count)
