"""Greet the world or the user by name."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .prompts import Prompter


def greet(name: Optional[str] = None) -> str:
    """Return a greeting for ``name``, or for the world when no name is given."""
    return f"hello, {'world' if name is None else name}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="hello", description="Say hello.")
    parser.add_argument("--world", action="store_true", help="greet the world without asking")
    args = parser.parse_args(argv)

    if args.world:
        print(greet())
        return 0
    answer = Prompter().get_string("What's your name? ")
    print(greet("" if answer is None else answer))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())