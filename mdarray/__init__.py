# flake8: noqa
from mdarray.config import config
from mdarray.core import DenseArray, copy
from mdarray.creation import create, create_init
from mdarray.descriptor import (MDA_TAG, TRAILER_SIZE, Descriptor, decode_trailer,
                                encode_trailer, from_raw, get_descriptor, to_raw,
                                to_raw_save)
from mdarray.errors import (AddressAlignmentError, AddressBoundsError, DataSizeError,
                            DimensionChainError, DimensionNumberError,
                            DimensionSizeError, EmptyArrayError, FillValueError,
                            HighAddressBoundsError, LowAddressBoundsError,
                            MDArrayError, NegativeAddressError, NoDimensionsError,
                            NotArrayError, ReadOnlyError, Status)
from mdarray.iteration import Step, StepInfo
from mdarray.printing import format_array
from mdarray.sync import ProcessSynchronizer, ThreadSynchronizer, hold_locks
from mdarray.version import version as __version__
