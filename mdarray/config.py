"""
The config module holds the runtime configuration of mdarray and is based on the Donfig
python library.

Example:
    Values can be set programmatically, temporarily with a context manager, or with
    environment variables of the form ``MDARRAY_PRINT__COLUMN_SEPARATOR=2``. The double
    underscore ``__`` is used to indicate nested access.

    ```python
    from mdarray.config import config

    with config.set({"contract.collapse_top_on_empty": True}):
        a.contract(0, 2, 3)
    ```

For more information, see the Donfig documentation at https://github.com/pytroll/donfig.
"""

from donfig import Config as DConfig


class BadConfigError(ValueError):
    pass


class Config(DConfig):
    """The Config will collect configuration from config files and environment variables

    Example environment variables:
    Grabs environment variables of the form "MDARRAY_FOO__BAR_BAZ=123" and
    turns these into config variables of the form ``{"foo": {"bar-baz": 123}}``
    It transforms the key and value in the following way:

    -  Lower-cases the key text
    -  Treats ``__`` (double-underscore) as nested access
    -  Calls ``ast.literal_eval`` on the value

    """

    def reset(self):
        self.clear()
        self.refresh()


# The default configuration for mdarray
config = Config(
    "mdarray",
    defaults=[
        {
            "array": {"default_dtype": "object"},
            "contract": {"collapse_top_on_empty": False},
            "print": {"column_separator": 4, "indent": 4},
        }
    ],
)


def parse_non_negative_int(data, name):
    if isinstance(data, bool) or not isinstance(data, int) or data < 0:
        raise BadConfigError(f"{name} must be a non-negative integer, got {data!r}")
    return data
