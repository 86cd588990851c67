"""State-machine argument walker.

Walks a list of command line arguments and doles out one classified item per
call: words, single-letter flags split out of clusters such as ``-xvf``, and
long flags such as ``--fruit``. Values bound to a flag are claimed by the
caller right after the flag is returned, because only the caller knows which
flags take a value.

The machine runs once over os-strings (see optwalk.ostext). Text accessors
perform the same transition and then validate the single fragment they hand
out, so the two views can never drift apart.

Thread Safety:
Walker instances are single-use and owned by one caller.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator

from optwalk.config import WalkConfig, get_walk_config
from optwalk.errors import MissingParameter, UnexpectedAttachedValue, WalkerUsageError
from optwalk.items import Flag, Item, Word, require_text, text_item
from optwalk.ostext import RawArg, display, from_arg
from optwalk.utils.logger import get_logger
from optwalk.walker.states import ATTACHED_STATES, WalkState, classify

logger = get_logger(__name__)


class ArgWalker:
    """Command line argument walker.

    Every call to take_item returns another flag or word. Single-dash
    arguments are split into separate flags, so ``-vf`` yields ``-v`` then
    ``-f``. After receiving a flag, call required_parameter to claim its
    value: the rest of a cluster (``banana`` in ``-fbanana``), the part after
    ``=`` in ``--fruit=banana``, or otherwise the next whole argument.

    Usage:
            >>> walker = ArgWalker(["eat", "-vfbanana", "file2"])
            >>> walker.take_item()
        Word(value='eat', index=0)
            >>> walker.take_item()
        Flag(name='-v', index=1)
            >>> walker.take_item()
        Flag(name='-f', index=1)
            >>> walker.required_parameter(True)
        'banana'
            >>> walker.take_item()
        Word(value='file2', index=2)
            >>> walker.take_item() is None
        True

    Every text method has an ``_os`` twin that returns os-strings and never
    raises InvalidText.

    """

    __slots__ = (
        "_args",
        "_pos",  # Index of the next unprocessed argument
        "_state",
        "_hold",  # Cluster letters or attached value, per _state
        "_hold_index",  # Argument the held text came from
        "_flag",  # Most recently emitted flag
        "_awaiting",  # _flag may still claim a parameter
        "_config",
    )

    def __init__(
        self,
        args: Iterable[RawArg],
        *,
        config: WalkConfig | None = None,
    ) -> None:
        """Initialize walker over a sequence of arguments.

        Args:
            args: Arguments without the program name. Items may be str,
                bytes or path-like; bytes are decoded losslessly.
            config: Walker configuration (defaults to the context config)

        Raises:
            TypeError: If args is a single str or bytes instead of a sequence.
        """
        if isinstance(args, (str, bytes)):
            raise TypeError("args must be a sequence of arguments, not a single string")
        self._args: tuple[str, ...] = tuple(from_arg(a) for a in args)
        self._pos = 0
        self._hold = ""
        self._hold_index = -1
        self._flag: str | None = None
        self._awaiting = False
        self._config = config if config is not None else get_walk_config()
        self._state = classify(self._args[0] if self._args else None)

    @classmethod
    def from_argv(
        cls,
        argv: Iterable[RawArg] | None = None,
        *,
        config: WalkConfig | None = None,
    ) -> ArgWalker:
        """Create a walker over a full argv, skipping the program name.

        Args:
            argv: Argument vector including the program name
                (defaults to sys.argv)
            config: Walker configuration
        """
        args = list(sys.argv if argv is None else argv)
        return cls(args[1:], config=config)

    def __repr__(self) -> str:
        return f"ArgWalker(state={self._state.name}, pos={self._pos}/{len(self._args)})"

    def __iter__(self) -> Iterator[Item]:
        return self

    def __next__(self) -> Item:
        item = self.take_item()
        if item is None:
            raise StopIteration
        return item

    # =========================================================================
    # Introspection
    # =========================================================================

    @property
    def state(self) -> WalkState:
        """Current state of the machine."""
        return self._state

    @property
    def config(self) -> WalkConfig:
        return self._config

    @property
    def current_flag(self) -> str | None:
        """The most recently returned flag, or None if the last item was a word."""
        return self._flag

    def remaining_os(self) -> list[str]:
        """Unconsumed input as a list of os-strings.

        Cluster letters still pending come back as a new cluster (``-xyz``)
        and a pending ``=value`` comes back as a bare value, which is how
        take_item would treat them. A fresh walker over the result yields the
        same items unless the pending text itself starts with a dash:
        ``-a-b`` stopped after ``-a`` comes back as the long flag ``--b``, and
        ``--opt=-v`` stopped after ``--opt`` comes back as ``-v``, a flag
        rather than the word take_item would return. Hand-off is exact when
        the walker is between arguments, e.g. right after a Word.
        """
        rest = list(self._args[self._pos :])
        if self._state == WalkState.SPLITTING:
            return [f"-{self._hold}", *rest]
        if self._state == WalkState.LONG_ARG:
            return [self._hold, *rest]
        return rest

    # =========================================================================
    # Items
    # =========================================================================

    def take_item(self) -> Item | None:
        """Return the next item as validated text and move on.

        Returns:
            Flag or Word, or None once all arguments are consumed.

        Raises:
            InvalidText: If the item is not valid text. The walker has still
                moved past it; the raw value is on the exception.
            UnexpectedAttachedValue: In strict mode, for an unclaimed
                ``--name=value`` value.
        """
        return text_item(self.take_item_os())

    def take_item_os(self) -> Item | None:
        """Return the next item as an os-string and move on."""
        state = self._state

        if state == WalkState.FINISHED:
            self._flag = None
            self._awaiting = False
            return None

        if state == WalkState.LONG_ARG:
            flag = self._flag
            index = self._hold_index
            value = self._release()
            self._flag = None
            self._awaiting = False
            if self._config.strict_attached_values and flag is not None:
                raise UnexpectedAttachedValue(flag, value)
            logger.debug("Unclaimed value for %s returned as word", flag)
            return Word(value, index)

        if state == WalkState.SPLITTING:
            letter = self._hold[0]
            self._hold = self._hold[1:]
            index = self._hold_index
            if not self._hold:
                self._hold_index = -1
                self._recompute()
            return self._emit_flag(f"-{letter}", index)

        index = self._pos
        arg = self._args[index]
        self._pos += 1

        if state == WalkState.BEFORE_DOUBLE and arg != "--":
            name, sep, value = arg.partition("=")
            if sep:
                self._hold = value
                self._hold_index = index
                self._state = WalkState.LONG_ARG
            else:
                self._recompute()
            return self._emit_flag(name, index)

        if state == WalkState.BEFORE_SINGLE:
            self._hold = arg[2:]
            if self._hold:
                self._hold_index = index
                self._state = WalkState.SPLITTING
            else:
                self._recompute()
            return self._emit_flag(arg[:2], index)

        # BEFORE_WORD, or a bare "--"
        self._recompute()
        self._flag = None
        self._awaiting = False
        return Word(arg, index)

    def peek_item(self) -> Item | None:
        """Return the item take_item would return, without moving on."""
        return text_item(self.peek_item_os())

    def peek_item_os(self) -> Item | None:
        """Return the item take_item_os would return, without moving on."""
        return self._clone().take_item_os()

    def take_flag(self, skipped: list[str]) -> str | None:
        """Skip words until the next flag and return its name.

        Args:
            skipped: Receives the text of every word passed over

        Each item is peeked before it is taken, so an item that fails (for
        example InvalidText) is left in place for the _os accessors.

        Returns:
            The flag name, or None if the arguments ran out first.
        """
        while True:
            item = self.peek_item()
            self.take_item_os()
            if item is None:
                return None
            if isinstance(item, Flag):
                return item.name
            skipped.append(item.value)

    # =========================================================================
    # Parameters
    # =========================================================================

    def has_parameter(self, separate_ok: bool = False) -> bool:
        """True if a parameter is available for the flag just returned.

        Args:
            separate_ok: Also count a following word argument (but never
                something that looks like a flag)

        Always False when no flag is awaiting a parameter, matching the
        WalkerUsageError that parameter would raise.
        """
        if not self._awaiting:
            return False
        if self._state in ATTACHED_STATES:
            return True
        return separate_ok and self._state == WalkState.BEFORE_WORD

    def required_parameter(self, attached_ok: bool) -> str:
        """Claim the value of the flag just returned, as validated text.

        Raises:
            InvalidText: If the value is not valid text (it is consumed anyway).
        """
        return require_text(self.required_parameter_os(attached_ok))

    def required_parameter_os(self, attached_ok: bool) -> str:
        """Claim the value of the flag just returned, as an os-string.

        An attached value wins. Otherwise the next whole argument is taken,
        even if it looks like a flag.

        Args:
            attached_ok: Whether the flag accepts ``-fVALUE`` and
                ``--flag=VALUE`` spellings

        Raises:
            UnexpectedAttachedValue: attached_ok is False but a value is attached.
            MissingParameter: No attached value and no arguments left.
            WalkerUsageError: The previous item was not a flag awaiting a value.
        """
        flag = self._expect_flag()
        if self._state in ATTACHED_STATES:
            return self._take_attached(flag, attached_ok)
        if self._state == WalkState.FINISHED:
            logger.debug("No parameter left for %s", flag)
            raise MissingParameter(flag)
        return self._take_separate()

    def parameter(self, attached_ok: bool = True, separate_ok: bool = False) -> str | None:
        """Optional variant of required_parameter, returning validated text."""
        value = self.parameter_os(attached_ok, separate_ok)
        return None if value is None else require_text(value)

    def parameter_os(self, attached_ok: bool = True, separate_ok: bool = False) -> str | None:
        """Claim the value of the flag just returned if there is one.

        Args:
            attached_ok: Whether an attached value is acceptable
            separate_ok: Whether a following word may serve as the value

        Returns:
            The value, or None (walker unchanged) if no value is available.

        Raises:
            UnexpectedAttachedValue: attached_ok is False but a value is attached.
            WalkerUsageError: The previous item was not a flag awaiting a value.
        """
        flag = self._expect_flag()
        if self._state in ATTACHED_STATES:
            return self._take_attached(flag, attached_ok)
        if separate_ok and self._state == WalkState.BEFORE_WORD:
            return self._take_separate()
        return None

    # =========================================================================
    # Internals
    # =========================================================================

    def _recompute(self) -> None:
        """Set the state from the next unprocessed argument."""
        self._state = classify(self._args[self._pos] if self._pos < len(self._args) else None)

    def _release(self) -> str:
        """Empty the buffer and leave the held argument behind."""
        value = self._hold
        self._hold = ""
        self._hold_index = -1
        self._recompute()
        return value

    def _emit_flag(self, name: str, index: int) -> Flag:
        self._flag = name
        self._awaiting = True
        return Flag(name, index)

    def _expect_flag(self) -> str:
        if not self._awaiting or self._flag is None:
            raise WalkerUsageError(self._flag)
        return self._flag

    def _take_attached(self, flag: str, attached_ok: bool) -> str:
        if not attached_ok:
            if self._state == WalkState.SPLITTING and self._config.preserve_cluster_on_refusal:
                logger.debug("Refused attached value for %s, keeping -%s", flag, display(self._hold))
                raise UnexpectedAttachedValue(flag, self._hold)
            value = self._release()
            self._awaiting = False
            logger.debug("Refused attached value for %s, dropped", flag)
            raise UnexpectedAttachedValue(flag, value)
        self._awaiting = False
        return self._release()

    def _take_separate(self) -> str:
        value = self._args[self._pos]
        self._pos += 1
        self._recompute()
        self._awaiting = False
        return value

    def _clone(self) -> ArgWalker:
        clone = ArgWalker.__new__(ArgWalker)
        for name in ArgWalker.__slots__:
            setattr(clone, name, getattr(self, name))
        return clone
