"""
optwalk: command line argument walker

Splits a raw argument list into flags and words without any schema of known
flags. The caller decides, flag by flag, whether a value is expected:

    >>> from optwalk import ArgWalker, Flag, Word
    >>> walker = ArgWalker(["eat", "file1", "-vfbanana", "file2", "file3"])
    >>> verbose, fruit, files = False, None, []
    >>> for item in walker:
    ...     match item:
    ...         case Flag("-v"):
    ...             verbose = True
    ...         case Flag("-f") | Flag("--fruit"):
    ...             fruit = walker.required_parameter(True)
    ...         case Word(value):
    ...             files.append(value)
    >>> verbose, fruit, files
    (True, 'banana', ['eat', 'file1', 'file2', 'file3'])

Services:
- Splitting clusters such as ``-xvf`` into ``-x``, ``-v``, ``-f``
- Attached values (``-fbanana``, ``--fruit=banana``) and separate values
  (``-f banana``)
- Arguments that are not valid text: every method has an ``_os`` twin that
  hands out os-strings unchanged (see optwalk.ostext)

Zero runtime dependencies.
"""

from collections.abc import Iterable

from optwalk.config import (
    WalkConfig,
    get_walk_config,
    reset_walk_config,
    set_walk_config,
    walk_config_context,
)
from optwalk.errors import (
    InvalidText,
    MissingParameter,
    OptwalkError,
    UnexpectedAttachedValue,
    WalkerUsageError,
)
from optwalk.items import Flag, Item, Word
from optwalk.ostext import RawArg
from optwalk.walker import ArgWalker, WalkState

__version__ = "0.1.0"


def walk(args: Iterable[RawArg], *, config: WalkConfig | None = None) -> ArgWalker:
    """Create an ArgWalker over args (program name already removed).

    Args:
        args: Arguments as str, bytes or path-like values
        config: Walker configuration (defaults to the context config)

    Returns:
        A fresh ArgWalker
    """
    return ArgWalker(args, config=config)


__all__ = [
    "ArgWalker",
    "Flag",
    "InvalidText",
    "Item",
    "MissingParameter",
    "OptwalkError",
    "RawArg",
    "UnexpectedAttachedValue",
    "WalkConfig",
    "WalkState",
    "WalkerUsageError",
    "Word",
    "__version__",
    "get_walk_config",
    "reset_walk_config",
    "set_walk_config",
    "walk",
    "walk_config_context",
]
