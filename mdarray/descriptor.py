"""Array descriptors and the flat, self-describing trailer form.

In memory a :class:`~mdarray.core.DenseArray` owns its :class:`Descriptor`
directly. When an array has to travel as a single flat sequence the
descriptor is appended after the elements as a trailer of
``TRAILER_SIZE`` items, read from the tail backward::

    [ element_0 ... element_{N-1} | "5 4 3" | 3 | 60 | 92317547 ]
                                    shape    ndim size  tag

The tag is a cheap heuristic against passing the wrong sequence, not a
checksum.
"""
import collections

from mdarray.addressing import element_count
from mdarray.errors import NotArrayError


MDA_TAG = 92317547
TRAILER_SIZE = 4

# trailer field positions, counted back from the end of the sequence
TRAILER_TAG = 0
TRAILER_SIZE_FIELD = 1
TRAILER_NDIM = 2
TRAILER_SHAPE = 3

SHAPE_SEPARATOR = ' '


Descriptor = collections.namedtuple(
    'Descriptor',
    ('shape', 'ndim', 'size', 'tag')
)
"""Shape metadata of a dense array.

Parameters
----------
shape
    Tuple of dimension sizes, dimension 0 fastest varying.
ndim
    Number of dimensions.
size
    Number of elements.
tag
    Validity tag, always ``MDA_TAG`` for a well formed descriptor.

"""


def make_descriptor(shape):
    shape = tuple(shape)
    return Descriptor(shape, len(shape), element_count(shape), MDA_TAG)


def encode_shape(shape):
    return SHAPE_SEPARATOR.join(str(s) for s in shape)


def decode_shape(s):
    return tuple(int(v) for v in str(s).split())


def encode_trailer(descriptor):
    """Encode a descriptor as the list of trailer items, lowest offset first."""
    return [encode_shape(descriptor.shape), descriptor.ndim, descriptor.size,
            descriptor.tag]


def decode_trailer(trailer):
    """Decode the last ``TRAILER_SIZE`` items of `trailer` into a descriptor."""
    if len(trailer) < TRAILER_SIZE:
        raise NotArrayError('sequence of length {} is shorter than the trailer'
                            .format(len(trailer)))
    last = len(trailer) - 1
    tag = trailer[last - TRAILER_TAG]
    # a tag read back from text is a string
    if str(tag) != str(MDA_TAG):
        raise NotArrayError('bad trailer tag {!r}'.format(tag))
    try:
        shape = decode_shape(trailer[last - TRAILER_SHAPE])
        ndim = int(trailer[last - TRAILER_NDIM])
        size = int(trailer[last - TRAILER_SIZE_FIELD])
    except (TypeError, ValueError) as e:
        raise NotArrayError('malformed trailer; nested exception: {}'.format(e))
    return Descriptor(shape, ndim, size, MDA_TAG)


def get_descriptor(obj):
    """Get the descriptor of a dense array or of a flat sequence carrying a
    trailer.

    Raises
    ------
    NotArrayError
        If `obj` is a sequence without a valid trailer.
    """
    descriptor = getattr(obj, 'descriptor', None)
    if isinstance(descriptor, Descriptor):
        return descriptor
    return decode_trailer(obj)


def to_raw(flat):
    """Strip the trailer from a flat sequence, returning the elements."""
    raw, _ = to_raw_save(flat)
    return raw


def to_raw_save(flat):
    """Strip the trailer from a flat sequence, returning the elements and the
    trailer items so they can be reattached with :func:`from_raw`."""
    if len(flat) < TRAILER_SIZE:
        raise NotArrayError('sequence of length {} is shorter than the trailer'
                            .format(len(flat)))
    split = len(flat) - TRAILER_SIZE
    return list(flat[:split]), list(flat[split:])


def from_raw(raw, trailer):
    """Append `trailer` to the elements in `raw`. No validation is performed;
    use :func:`get_descriptor` afterwards if the result may be malformed."""
    return list(raw) + list(trailer)
