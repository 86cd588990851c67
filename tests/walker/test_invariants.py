"""Property-based tests for walker invariants using Hypothesis.

These tests verify that the walker never invents or drops input, always
terminates, and agrees between its raw and text views.
"""

from __future__ import annotations

from collections import defaultdict

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from optwalk import ArgWalker, Flag, InvalidText, Word
from optwalk.ostext import is_valid_text

# Dashes and equals signs drive the state machine; the surrogate stands for
# an undecodable byte.
chars = st.sampled_from(["-", "=", "a", "b", "é", " ", "\udcff"])
raw_args = st.lists(st.lists(chars, max_size=8).map("".join), max_size=8)

# Dashes mostly as a prefix, but also inside the body so pending text can
# start with one.
prefixed_args = st.lists(
    st.builds(
        lambda prefix, body: prefix + body,
        st.sampled_from(["", "-", "--"]),
        st.lists(st.sampled_from(["a", "b", "=", "-", "\udcff"]), max_size=5).map("".join),
    ),
    max_size=6,
)


def walk_raw(args: list[str]) -> list:
    walker = ArgWalker(args)
    items = []
    while (item := walker.take_item_os()) is not None:
        items.append(item)
    return items


def rebuild(arg: str, items: list) -> str:
    """Reassemble one argument from the items that came out of it."""
    flags = [i.name for i in items if isinstance(i, Flag)]
    words = [i.value for i in items if isinstance(i, Word)]
    if not flags:
        assert len(words) == 1
        return words[0]
    if arg.startswith("--"):
        assert len(flags) == 1
        return flags[0] + "".join(f"={w}" for w in words)
    assert not words
    return "-" + "".join(f[1:] for f in flags)


class TestLossless:
    """No input is ever invented or dropped."""

    @given(raw_args)
    @settings(max_examples=300)
    def test_items_rebuild_arguments(self, args: list[str]) -> None:
        """Grouping raw items by origin reproduces every argument exactly."""
        by_index: dict[int, list] = defaultdict(list)
        for item in walk_raw(args):
            by_index[item.index].append(item)

        assert sorted(by_index) == list(range(len(args)))
        for index, arg in enumerate(args):
            assert rebuild(arg, by_index[index]) == arg

    @given(raw_args)
    @settings(max_examples=200)
    def test_claimed_values_rebuild_arguments(self, args: list[str]) -> None:
        """Claiming every attached value still accounts for all input."""
        walker = ArgWalker(args)
        seen: list[str] = []
        while (item := walker.take_item_os()) is not None:
            if isinstance(item, Flag) and walker.has_parameter():
                seen.append(f"{item.name}={walker.required_parameter_os(True)}")
            elif isinstance(item, Flag):
                seen.append(item.name)
            else:
                seen.append(item.value)
        joined = "".join(seen).replace("=", "").replace("-", "")
        assert joined == "".join(args).replace("=", "").replace("-", "")

    @given(prefixed_args, st.integers(min_value=0, max_value=20))
    @settings(max_examples=200)
    def test_remaining_walks_the_same(self, args: list[str], steps: int) -> None:
        """A fresh walker over remaining_os() yields the rest of the stream."""
        walker = ArgWalker(args)
        for _ in range(steps):
            if walker.take_item_os() is None:
                break
        # Pending text starting with a dash is re-read as a flag; see
        # TestRemaining in test_walker_state.py.
        assume(not walker._hold.startswith("-"))
        rest = ArgWalker(walker.remaining_os())
        expected = []
        while (item := walker.take_item_os()) is not None:
            expected.append(item)
        actual = []
        while (item := rest.take_item_os()) is not None:
            actual.append(item)
        assert actual == expected


class TestTermination:
    """Walking always ends, and the end is sticky."""

    @given(raw_args)
    @settings(max_examples=200)
    def test_bounded_steps(self, args: list[str]) -> None:
        bound = sum(len(a) for a in args) + len(args)
        assert len(walk_raw(args)) <= bound

    @given(raw_args, st.integers(min_value=1, max_value=5))
    @settings(max_examples=50)
    def test_end_is_sticky(self, args: list[str], extra: int) -> None:
        walker = ArgWalker(args)
        while walker.take_item_os() is not None:
            pass
        for _ in range(extra):
            assert walker.take_item_os() is None
        assert walker.remaining_os() == []


class TestViews:
    """The text view agrees with the raw view."""

    @given(raw_args)
    @settings(max_examples=200)
    def test_text_view_matches_raw_view(self, args: list[str]) -> None:
        """take_item returns what take_item_os returns, or raises InvalidText."""
        raw = walk_raw(args)
        walker = ArgWalker(args)
        for expected in raw:
            if is_valid_text(expected.value):
                assert walker.take_item() == expected
            else:
                try:
                    walker.take_item()
                except InvalidText as e:
                    assert e.value == expected.value
                else:
                    raise AssertionError("InvalidText not raised")
        assert walker.take_item() is None

    @given(raw_args)
    @settings(max_examples=50)
    def test_deterministic(self, args: list[str]) -> None:
        assert walk_raw(args) == walk_raw(args)
