"""State-machine argument walker for optwalk.

Architecture:
walker/
├── __init__.py          # Re-exports ArgWalker, WalkState
├── core.py              # ArgWalker class (transitions + parameter claiming)
└── states.py            # WalkState enum, argument classification

Usage:
    >>> from optwalk.walker import ArgWalker
    >>> list(ArgWalker(["-xv", "file"]))
    [Flag(name='-x', index=0), Flag(name='-v', index=0), Word(value='file', index=1)]

"""

from optwalk.walker.core import ArgWalker
from optwalk.walker.states import WalkState

__all__ = ["ArgWalker", "WalkState"]
