from enum import IntEnum


class Status(IntEnum):
    """Status codes shared by every operation. The numeric values are stable."""

    OK = 0
    NOT_ARRAY = 1
    NO_DIMENSIONS = 2
    DIMENSION_SIZE = 3
    DIMENSION_NUMBER = 4
    DATA_SIZE = 5
    EMPTY = 6
    ADDRESS_ALIGNMENT = 7
    ADDRESS_BOUNDS = 8
    ADDRESS_BOUNDS_NEGATIVE = 9
    ADDRESS_BOUNDS_LOW = 10
    ADDRESS_BOUNDS_HIGH = 11
    ADDRESS_BOUNDS_HIGH_ZERO = 12
    ELEMENT_BOUNDS = 13
    ELEMENT_BOUNDS_NEGATIVE = 14
    ELEMENT_BOUNDS_LOW = 15
    ELEMENT_BOUNDS_HIGH = 16
    DIMENSION_CHAIN = 17


status_messages = {
    Status.OK: "Exit okay",
    Status.NOT_ARRAY: "Not a multidimensional array",
    Status.NO_DIMENSIONS: "No dimensions",
    Status.DIMENSION_SIZE: "Invalid dimension size",
    Status.DIMENSION_NUMBER: "Invalid dimension number",
    Status.DATA_SIZE: "Wrong user data size",
    Status.EMPTY: "Array is empty",
    Status.ADDRESS_ALIGNMENT: "Address is out of alignment",
    Status.ADDRESS_BOUNDS: "Address is out of bounds",
    Status.ADDRESS_BOUNDS_NEGATIVE: "Address is negative",
    Status.ADDRESS_BOUNDS_LOW: "Low address is out of bounds",
    Status.ADDRESS_BOUNDS_HIGH: "High address is out of bounds",
    Status.ADDRESS_BOUNDS_HIGH_ZERO: "Upper address is not 0",
    Status.ELEMENT_BOUNDS: "Element address is out of bounds",
    Status.ELEMENT_BOUNDS_NEGATIVE: "Element address is negative",
    Status.ELEMENT_BOUNDS_LOW: "Low element address is out of bounds",
    Status.ELEMENT_BOUNDS_HIGH: "High element address is out of bounds",
    Status.DIMENSION_CHAIN: "Dimension chain break",
}


class MDArrayError(Exception):
    """Base class for all errors raised on bad arguments or array state."""

    status = Status.OK
    _msg = ""

    def __init__(self, *args):
        super().__init__(self._msg.format(*args))

    @property
    def status_message(self):
        return status_messages[self.status]


class _BaseValueError(MDArrayError, ValueError):
    pass


class _BaseIndexError(MDArrayError, IndexError):
    pass


class NotArrayError(_BaseValueError):
    status = Status.NOT_ARRAY
    _msg = "not a multidimensional array: {0}"


class NoDimensionsError(_BaseValueError):
    status = Status.NO_DIMENSIONS
    _msg = "shape must have at least one dimension, found {0!r}"


class DimensionSizeError(_BaseValueError):
    status = Status.DIMENSION_SIZE
    _msg = "invalid dimension size {1!r} in {0!r}"


class DimensionNumberError(_BaseIndexError):
    status = Status.DIMENSION_NUMBER
    _msg = "dimension {0!r} does not exist in an array with {1} dimension(s)"


class DataSizeError(_BaseValueError):
    status = Status.DATA_SIZE
    _msg = "wrong data size; expected {0} element(s), found {1}"


class FillValueError(DataSizeError):
    _msg = "fill value {0!r} cannot be stored as a single element of dtype {1}"


class EmptyArrayError(_BaseValueError):
    status = Status.EMPTY
    _msg = "array with shape {0!r} is empty"


class AddressAlignmentError(_BaseIndexError):
    status = Status.ADDRESS_ALIGNMENT
    _msg = "address {0!r} is not aligned to dimension {1}"


class AddressBoundsError(_BaseIndexError):
    status = Status.ADDRESS_BOUNDS
    _msg = "address {0!r} is out of bounds for shape {1!r}"


class NegativeAddressError(AddressBoundsError):
    status = Status.ADDRESS_BOUNDS_NEGATIVE
    _msg = "address {0!r} is negative"


class LowAddressBoundsError(AddressBoundsError):
    status = Status.ADDRESS_BOUNDS_LOW
    _msg = "start address {0!r} is out of bounds for dimension {1} with length {2}"


class HighAddressBoundsError(AddressBoundsError):
    status = Status.ADDRESS_BOUNDS_HIGH
    _msg = ("range of {3} from address {0!r} overruns dimension {1} "
            "with length {2}")


class DimensionChainError(_BaseValueError):
    status = Status.DIMENSION_CHAIN
    _msg = ("cannot remove all {1} unit(s) of dimension {0}; only the highest "
            "dimension or a dimension of size 1 can be emptied")


class ReadOnlyError(PermissionError):
    def __init__(self):
        super().__init__("object is read-only")
