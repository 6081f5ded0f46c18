"""Odometer-style stepping of coordinates.

Dimension 0 moves first; when it runs off either end it is reset and the
step carries (or borrows) into dimension 1, and so on. Carrying out of the
highest dimension is a wrap: the coordinate has gone all the way round and
iteration is complete.
"""
import collections
from enum import IntEnum

from mdarray.addressing import element_count


class Step(IntEnum):
    """What a single step did to one dimension of a coordinate."""

    NONE = 0
    NORMAL = 1
    RESET = 2


StepInfo = collections.namedtuple(
    'StepInfo',
    ('coord', 'changes', 'high_dim', 'wrapped')
)
"""Result of a step with change information.

Parameters
----------
coord
    The new coordinate.
changes
    One :class:`Step` per dimension.
high_dim
    Highest dimension whose entry changed.
wrapped
    True if the step carried or borrowed out of the highest dimension.

"""


def increment(shape, coord):
    coord = list(coord)
    for dim, size in enumerate(shape):
        coord[dim] += 1
        if coord[dim] < size:
            break
        coord[dim] = 0
    return tuple(coord)


def decrement(shape, coord):
    coord = list(coord)
    for dim, size in enumerate(shape):
        coord[dim] -= 1
        if coord[dim] >= 0:
            break
        coord[dim] = size - 1
    return tuple(coord)


def _step_info(shape, coord, delta):
    ndim = len(shape)
    coord = list(coord)
    changes = [Step.NONE] * ndim
    wrapped = False
    dim = 0
    while dim < ndim:
        coord[dim] += delta
        if 0 <= coord[dim] < shape[dim]:
            changes[dim] = Step.NORMAL
            break
        coord[dim] = 0 if delta > 0 else shape[dim] - 1
        changes[dim] = Step.RESET
        if dim == ndim - 1:
            wrapped = True
            break
        dim += 1
    return StepInfo(tuple(coord), tuple(changes), dim, wrapped)


def increment_info(shape, coord):
    """Increment `coord` and report which dimensions changed.

    Examples
    --------
    >>> from mdarray.iteration import increment_info
    >>> increment_info((5, 4), (4, 0))
    StepInfo(coord=(0, 1), changes=(<Step.RESET: 2>, <Step.NORMAL: 1>), high_dim=1, wrapped=False)

    """
    return _step_info(shape, coord, 1)


def decrement_info(shape, coord):
    """Decrement `coord` and report which dimensions changed."""
    return _step_info(shape, coord, -1)


def iter_coords(shape, reverse=False):
    """Yield every coordinate of `shape` in storage order, or in reverse
    storage order if `reverse` is true. Yields nothing for an empty shape."""
    if element_count(shape) == 0:
        return
    ndim = len(shape)
    if reverse:
        coord = tuple(s - 1 for s in shape)
        step = decrement_info
    else:
        coord = (0,) * ndim
        step = increment_info
    while True:
        yield coord
        coord, _, _, wrapped = step(shape, coord)
        if wrapped:
            return
