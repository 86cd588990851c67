"""Exception classes for optwalk.

Every error raised by the walker derives from OptwalkError, so callers can
report any usage problem with a single except clause.
"""

from __future__ import annotations

from optwalk.ostext import display


class OptwalkError(Exception):
    """Base exception for all optwalk errors."""

    pass


class MissingParameter(OptwalkError):
    """A flag required a parameter but none was available.

    Raised by required_parameter when there is no attached value and the
    argument list is exhausted, for example on `-f` at the very end.
    """

    def __init__(self, flag: str) -> None:
        """Initialize missing parameter error.

        Args:
            flag: The flag that wanted a parameter (e.g. "-f", "--fruit")
        """
        self.flag = flag
        super().__init__(f"parameter missing for flag {flag}")


class UnexpectedAttachedValue(OptwalkError):
    """A flag carried an attached value it does not accept.

    Raised when the caller declared attached values unacceptable but the user
    wrote `--fruit=banana` or `-fbanana`, and by take_item in strict mode when
    a `--name=value` value was never claimed.
    """

    def __init__(self, flag: str, value: str) -> None:
        """Initialize unexpected attached value error.

        Args:
            flag: The flag the value was attached to
            value: The attached value as an os-string
        """
        self.flag = flag
        self.value = value
        super().__init__(f"unexpected parameter for flag {flag}")


class InvalidText(OptwalkError):
    """An argument fragment could not be decoded as valid text.

    Only the text-validated accessors raise this; the `_os` accessors hand
    out the same fragment unchanged.
    """

    def __init__(self, value: str, position: int) -> None:
        """Initialize invalid text error.

        Args:
            value: The offending fragment as an os-string
            position: Index of the first undecodable code point in value
        """
        self.value = value
        self.position = position
        super().__init__(f"invalid unicode in argument {display(value)!r}")


class WalkerUsageError(OptwalkError):
    """A parameter was requested when no flag was waiting for one."""

    def __init__(self, flag: str | None) -> None:
        self.flag = flag
        if flag is None:
            message = "parameter requested but the previous item was not a flag"
        else:
            message = f"parameter for flag {flag} was already taken"
        super().__init__(message)
