import numpy as np

from mdarray.addressing import element_count
from mdarray.config import config
from mdarray.core import DenseArray
from mdarray.util import normalize_dtype, normalize_fill_value
from mdarray.validation import check_shape


def create(data, shape, dtype=None, **kwargs):
    """Create a dense array from a flat sequence of elements.

    Parameters
    ----------
    data : array-like
        ``product(shape)`` elements in storage order, dimension 0 fastest.
    shape : int or tuple of ints
        Dimension sizes. Only the last may be 0.
    dtype : string or dtype, optional
        Element type.
    **kwargs
        Passed through to :class:`mdarray.core.DenseArray`.

    Returns
    -------
    a : mdarray.core.DenseArray

    Examples
    --------
    >>> import mdarray
    >>> a = mdarray.create(range(60), (5, 4, 3))
    >>> a
    <mdarray.core.DenseArray (5, 4, 3) object>
    >>> a[(4, 3, 2)]
    59

    """
    return DenseArray(data, shape, dtype=dtype, **kwargs)


def create_init(shape, init_value, dtype=None, **kwargs):
    """Create a dense array with every element set to `init_value`.

    Examples
    --------
    >>> import mdarray
    >>> a = mdarray.create_init((3, 2), '')
    >>> a.info
    Type           : mdarray.core.DenseArray
    Data type      : object
    Shape          : (3, 2)
    No. dimensions : 2
    No. elements   : 6
    No. bytes      : 48
    Read-only      : False
    <BLANKLINE>

    """
    shape = check_shape(shape)
    dtype = normalize_dtype(dtype, config.get("array.default_dtype"))
    init_value = normalize_fill_value(init_value, dtype)
    data = np.empty(element_count(shape), dtype=dtype)
    data.fill(init_value)
    return DenseArray(data, shape, **kwargs)
