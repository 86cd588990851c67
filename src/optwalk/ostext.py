"""Helpers for os-strings: arguments that are not necessarily valid text.

Python hands process arguments to programs as ``str`` following PEP 383.
On POSIX, bytes that do not decode under the filesystem encoding become lone
surrogates U+DC80..U+DCFF (the ``surrogateescape`` handler). On Windows,
unpaired UTF-16 code units become lone surrogates U+D800..U+DFFF. Either way
the ``str`` round-trips losslessly through ``os.fsencode``.

The walker slices these strings by code point, which never splits or merges
an undecodable byte or code unit. A fragment counts as valid text exactly
when it contains no surrogate code point.

Example:
    >>> first_invalid("banana")
    >>> first_invalid("ban\\udcffana")
    3
    >>> display("ban\\udcffana")
    'ban\\\\udcffana'

"""

from __future__ import annotations

import os

type RawArg = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def from_arg(arg: RawArg) -> str:
    """Convert one caller-supplied argument to an os-string.

    ``str`` passes through unchanged; ``bytes`` and path-like objects are
    decoded with ``os.fsdecode`` so undecodable bytes survive as surrogates.

    Raises:
        TypeError: If arg is not str, bytes or path-like.
    """
    if isinstance(arg, str):
        return arg
    return os.fsdecode(arg)


def first_invalid(value: str) -> int | None:
    """Return the index of the first undecodable code point, or None.

    Strict UTF-8 encoding fails on exactly the surrogate code points, and
    the C codec reports where.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        return e.start
    return None


def is_valid_text(value: str) -> bool:
    """True if value contains no undecodable code points."""
    return first_invalid(value) is None


def display(value: str) -> str:
    """Render an os-string as printable text, escaping undecodable parts."""
    return value.encode("utf-8", "backslashreplace").decode("utf-8")


def to_bytes(value: str) -> bytes:
    """Convert an os-string back to the platform byte representation."""
    return os.fsencode(value)


__all__ = [
    "RawArg",
    "display",
    "first_invalid",
    "from_arg",
    "is_valid_text",
    "to_bytes",
]
