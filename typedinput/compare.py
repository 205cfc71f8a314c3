"""Compare two integers typed by the user."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .prompts import Prompter

LESS = "x is less than y"
GREATER = "x is greater than y"
EQUAL = "x is equal to y"


def compare(x: int, y: int) -> str:
    """Describe how x relates to y."""
    if x < y:
        return LESS
    if x > y:
        return GREATER
    return EQUAL


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="compare", description="Compare two integers.")
    parser.parse_args(argv)

    prompter = Prompter()
    x = prompter.get_int("What's x? ")
    y = prompter.get_int("What's y? ")
    print(compare(x, y))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())