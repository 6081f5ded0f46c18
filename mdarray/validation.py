from mdarray.errors import (AddressAlignmentError, AddressBoundsError,
                            DimensionNumberError, DimensionSizeError,
                            HighAddressBoundsError, LowAddressBoundsError,
                            NegativeAddressError, NoDimensionsError)
from mdarray.util import normalize_shape


def check_shape(shape):
    """Validate and normalize a shape.

    A shape needs at least one dimension, and no negative sizes. Only the
    last (highest) dimension may be zero, which marks an empty array whose
    lower dimensions are still defined.
    """
    shape = normalize_shape(shape)
    if len(shape) == 0:
        raise NoDimensionsError(shape)
    last = len(shape) - 1
    for i, s in enumerate(shape):
        if s < 0 or (s == 0 and i != last):
            raise DimensionSizeError(shape, s)
    return shape


def check_dim(shape, dim):
    if dim < 0 or dim >= len(shape):
        raise DimensionNumberError(dim, len(shape))


def check_bounds(shape, coord):
    """Check every entry of `coord` lies within ``[0, shape[i])``.

    Missing trailing entries are taken as zero; extra entries must be zero.
    """
    for i, size in enumerate(shape):
        c = coord[i] if i < len(coord) else 0
        if c < 0 or c >= size:
            raise AddressBoundsError(tuple(coord), tuple(shape))
    if any(c != 0 for c in coord[len(shape):]):
        raise AddressBoundsError(tuple(coord), tuple(shape))


def check_aligned(shape, coord, dim):
    """Check `coord` is in bounds and addresses the start of a whole unit of
    dimension `dim`, i.e. every entry below `dim` is zero."""
    check_dim(shape, dim)
    for i, size in enumerate(shape):
        c = coord[i]
        if c < 0:
            raise NegativeAddressError(tuple(coord))
        elif c > size - 1:
            raise AddressBoundsError(tuple(coord), tuple(shape))
        elif i < dim and c != 0:
            raise AddressAlignmentError(tuple(coord), dim)


def check_aligned_range(shape, coord, dim, count):
    """As :func:`check_aligned`, and check that `count` units of dimension
    `dim` starting at ``coord[dim]`` fit inside the array.

    Raises :class:`LowAddressBoundsError` when the start itself is past the
    end of the dimension, :class:`HighAddressBoundsError` when the start is
    valid but the range overruns.
    """
    check_dim(shape, dim)
    for i, size in enumerate(shape):
        c = coord[i]
        max_address = size - 1
        if c < 0:
            raise NegativeAddressError(tuple(coord))
        elif i == dim:
            if c > max_address:
                raise LowAddressBoundsError(tuple(coord), dim, size)
            if c + count - 1 > max_address:
                raise HighAddressBoundsError(tuple(coord), dim, size, count)
        elif c > max_address:
            raise AddressBoundsError(tuple(coord), tuple(shape))
        elif i < dim and c != 0:
            raise AddressAlignmentError(tuple(coord), dim)


def check_dim_address(ndim, dim, address, max_address):
    """Check `dim` names one of `ndim` dimensions and `address` lies within
    ``[0, max_address]`` along it."""
    if dim < 0 or dim >= ndim:
        raise DimensionNumberError(dim, ndim)
    if address < 0 or address > max_address:
        raise LowAddressBoundsError(address, dim, max_address + 1)


def check_dim_address_range(ndim, dim, address, max_address, count):
    """As :func:`check_dim_address`, and check the `count` addresses starting
    at `address` all lie within ``[0, max_address]``."""
    check_dim_address(ndim, dim, address, max_address)
    if address + count - 1 > max_address:
        raise HighAddressBoundsError(address, dim, max_address + 1, count)
