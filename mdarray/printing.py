"""Text rendering of dense arrays as pages of X/Y tables.

A two dimensional array prints as a single table, X across and Y down::

     X 0     1     2     3     4
    Y  --    --    --    --    --
    0| 0     1     2     3     4
    1| 5     6     7     8     9
    2| 10    11    12    13    14
    3| 15    16    17    18    19

Every higher dimension adds a level of labelled, indented pages
(``Z = 0 --->``, ``W = 1 --->``, ...), highest dimension outermost.
"""
from mdarray.config import config, parse_non_negative_int
from mdarray.errors import EmptyArrayError
from mdarray.iteration import increment_info
from mdarray.util import dim_label


def _column_widths(array):
    shape = array.shape
    nx = shape[0]
    widths = [len(str(i)) for i in range(nx)]
    for i, value in enumerate(array.data):
        x = i % nx
        widths[x] = max(widths[x], len(str(value)))
    return widths


def _cells(values, widths, sep):
    last = len(widths) - 1
    return ''.join(str(v).ljust(w + (sep if i != last else 0))
                   for i, (v, w) in enumerate(zip(values, widths)))


def _table(array, page, widths, sep, pad):
    shape = array.shape
    nx = shape[0]
    ny = shape[1] if array.ndim > 1 else 1
    ylabel = len(str(ny - 1))

    lines = [
        pad + ' ' * ylabel + 'X ' + _cells(range(nx), widths, sep),
        pad + 'Y'.ljust(ylabel) + '  ' + _cells(['-' * w for w in widths], widths, sep),
    ]
    for y in range(ny):
        coord = (0, y) + page if array.ndim > 1 else (0,)
        row = array.read_range(coord, nx)
        lines.append(pad + str(y).ljust(ylabel) + '| ' + _cells(row, widths, sep))
    return [line.rstrip() for line in lines]


def format_array(array):
    """Render `array` as text.

    Parameters
    ----------
    array : DenseArray

    Returns
    -------
    text : str

    Raises
    ------
    EmptyArrayError
        If the array holds no elements.

    """
    if array.size == 0:
        raise EmptyArrayError(array.shape)

    sep = parse_non_negative_int(config.get("print.column_separator"),
                                 "print.column_separator")
    indent = parse_non_negative_int(config.get("print.indent"), "print.indent")

    widths = _column_widths(array)
    ndim = array.ndim
    last = ndim - 1

    if ndim <= 2:
        return '\n'.join(_table(array, (), widths, sep, '')) + '\n'

    page_shape = array.shape[2:]
    page = (0,) * len(page_shape)
    high_dim = last
    table_pad = ' ' * ((last - 1) * indent)

    lines = []
    while True:
        for dim in range(high_dim, 1, -1):
            label = '{} = {} --->'.format(dim_label(dim), page[dim - 2])
            lines.append(' ' * ((last - dim) * indent) + label)
        lines.extend(_table(array, page, widths, sep, table_pad))
        lines.append('')

        page, _, page_high, wrapped = increment_info(page_shape, page)
        if wrapped:
            break
        high_dim = page_high + 2

    return '\n'.join(lines)
