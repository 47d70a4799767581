"""Exception classes for basexx.

This module defines the exception types raised by the decoding entry points.
The ``try_*`` operations never raise them; they report failure through their
result tuple instead.
"""


class BaseXXError(Exception):
    """Base exception class for all basexx errors."""

    pass


class NullInputError(BaseXXError, TypeError):
    """Exception raised when ``None`` is passed where encoded text was expected."""

    pass


class FormatError(BaseXXError, ValueError):
    """Exception raised when input is not valid encoded text."""

    pass
