"""Items produced by the argument walker.

The walker classifies every piece of the command line as either a Flag or a
Word. Both are frozen dataclasses with slots, so they compare by value and
work naturally with ``match``:

    >>> from optwalk import ArgWalker, Flag, Word
    >>> walker = ArgWalker(["-v", "notes.txt"])
    >>> for item in walker:
    ...     match item:
    ...         case Flag("-v"):
    ...             print("verbose")
    ...         case Word(name):
    ...             print("file", name)
    verbose
    file notes.txt

Values are os-strings (see optwalk.ostext). Items returned by the text
accessors are guaranteed to hold valid text; items returned by the ``_os``
accessors may hold lone surrogates standing for undecodable bytes.

Thread Safety:
Items are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field

from optwalk.errors import InvalidText
from optwalk.ostext import display, first_invalid, to_bytes


def require_text(value: str) -> str:
    """Return value unchanged if it is valid text, else raise InvalidText."""
    pos = first_invalid(value)
    if pos is not None:
        raise InvalidText(value, pos)
    return value


@dataclass(frozen=True, slots=True)
class Flag:
    """A single short flag (``-x``) or a long flag (``--name``).

    The leading dash or dashes are part of the name so callers can match
    short and long spellings uniformly.

    Attributes:
        name: Flag name including dashes
        index: Position of the originating argument (not compared)

    """

    name: str
    index: int = field(default=-1, compare=False)

    @property
    def value(self) -> str:
        return self.name

    def text(self) -> str:
        """Name as validated text.

        Raises:
            InvalidText: If the name holds undecodable code points.
        """
        return require_text(self.name)

    def to_bytes(self) -> bytes:
        return to_bytes(self.name)

    def __str__(self) -> str:
        return display(self.name)


@dataclass(frozen=True, slots=True)
class Word:
    """A bare positional argument, or an attached value nobody claimed.

    Attributes:
        value: The word as an os-string
        index: Position of the originating argument (not compared)

    """

    value: str
    index: int = field(default=-1, compare=False)

    def text(self) -> str:
        """Value as validated text.

        Raises:
            InvalidText: If the value holds undecodable code points.
        """
        return require_text(self.value)

    def to_bytes(self) -> bytes:
        return to_bytes(self.value)

    def __str__(self) -> str:
        return display(self.value)


type Item = Flag | Word


def text_item(item: Item | None) -> Item | None:
    """Validate the value of an item for the text accessors."""
    if item is not None:
        require_text(item.value)
    return item


__all__ = ["Flag", "Item", "Word", "require_text", "text_item"]
