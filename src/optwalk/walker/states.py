"""Walker states and argument classification.

This module defines the finite state machine states for the walker. Each
state describes what the next call to take_item will do.
"""

from __future__ import annotations

from enum import Enum, auto


class WalkState(Enum):
    """Walker states.

    - FINISHED: No arguments remain (terminal)
    - BEFORE_DOUBLE: Next argument starts with ``--``
    - BEFORE_SINGLE: Next argument starts with a single ``-`` and is longer than it
    - BEFORE_WORD: Next argument is a word (including a lone ``-``)
    - SPLITTING: Inside a short-flag cluster, letters buffered
    - LONG_ARG: A ``--name=value`` flag was emitted, value buffered

    """

    FINISHED = auto()
    BEFORE_DOUBLE = auto()
    BEFORE_SINGLE = auto()
    BEFORE_WORD = auto()
    SPLITTING = auto()
    LONG_ARG = auto()


# States in which the buffer holds an attached value
ATTACHED_STATES = frozenset({WalkState.SPLITTING, WalkState.LONG_ARG})


def classify(arg: str | None) -> WalkState:
    """Classify the next unprocessed argument.

    Args:
        arg: The argument, or None when the list is exhausted

    Returns:
        The state the walker enters before processing arg.
    """
    if arg is None:
        return WalkState.FINISHED
    if arg.startswith("--"):
        return WalkState.BEFORE_DOUBLE
    if arg.startswith("-") and len(arg) > 1:
        return WalkState.BEFORE_SINGLE
    return WalkState.BEFORE_WORD
