"""Walk a command line by hand: flags, a fruit value, and some files.

    python eat.py -v --fruit=banana lunch.txt dinner.txt
    python eat.py -vfbanana lunch.txt
"""

import sys

from optwalk import ArgWalker, Flag, OptwalkError, Word


def main(argv: list[str]) -> int:
    walker = ArgWalker.from_argv(argv)
    verbose = False
    fruit = "apple"
    files: list[str] = []
    try:
        for item in walker:
            match item:
                case Flag("-v") | Flag("--verbose"):
                    verbose = True
                case Flag("-f") | Flag("--fruit"):
                    fruit = walker.required_parameter(True)
                case Flag(name):
                    print(f"unknown flag {name}. Usage: eat [-v] [-f FRUIT] FILE...")
                    return 2
                case Word(value):
                    files.append(value)
    except OptwalkError as e:
        print(f"eat: {e}", file=sys.stderr)
        return 2

    if verbose:
        print(f"eating {fruit} while reading {len(files)} file(s)")
    for name in files:
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
