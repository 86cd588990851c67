"""Global flags first, then hand everything after the command to a sub-walker.

Filenames are kept as os-strings so undecodable bytes survive untouched.
The hand-off happens right after a Word, when the walker is between
arguments, so remaining_os() reproduces the rest of the command line exactly.

    python subcommand.py -q copy -r src/ dst/
"""

import os
import sys

from optwalk import ArgWalker, Flag, Word


def main(argv: list[str]) -> int:
    walker = ArgWalker.from_argv(argv)
    quiet = False
    command = None
    while (item := walker.take_item()) is not None:
        if item == Flag("-q"):
            quiet = True
        elif isinstance(item, Word):
            command = item.value
            break
        else:
            print(f"unknown global flag {item}", file=sys.stderr)
            return 2

    if command != "copy":
        print("usage: subcommand [-q] copy [-r] SRC DST", file=sys.stderr)
        return 2

    sub = ArgWalker(walker.remaining_os())
    recursive = False
    paths: list[bytes] = []
    while (item := sub.take_item_os()) is not None:
        if item == Flag("-r"):
            recursive = True
        elif isinstance(item, Word):
            paths.append(item.to_bytes())
        else:
            print(f"unknown copy flag {item}", file=sys.stderr)
            return 2

    if not quiet:
        print(f"copy recursive={recursive}", [os.fsdecode(p) for p in paths])
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
