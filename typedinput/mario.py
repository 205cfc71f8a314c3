"""Draw rows, columns and square grids of blocks."""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

from .prompts import Prompter

QUESTION_BLOCK = "?"
BRICK = "#"
ROW_WIDTH = 4
COLUMN_HEIGHT = 3


def row(width: int = ROW_WIDTH) -> str:
    """Return a row of ``width`` question-mark blocks."""
    return QUESTION_BLOCK * max(width, 0)


def column(height: int = COLUMN_HEIGHT) -> List[str]:
    """Return the lines of a column of ``height`` bricks."""
    return [BRICK] * max(height, 0)


def grid(size: int) -> List[str]:
    """Return the lines of a ``size``-by-``size`` grid of bricks."""
    if size < 1:
        return []
    return [BRICK * size] * size


def prompt_size(prompter: Optional[Prompter] = None) -> int:
    """Prompt for a size until a positive integer is given."""
    prompter = Prompter() if prompter is None else prompter
    while True:
        size = prompter.get_int("Size: ")
        if size >= 1:
            return size


def _non_negative(text: str) -> int:
    number = int(text)
    if number < 0:
        raise argparse.ArgumentTypeError("size must not be negative")
    return number


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mario", description="Draw blocks.")
    parser.add_argument("--shape", choices=("row", "column", "grid"), default="grid")
    parser.add_argument("--size", type=_non_negative, default=None, help="number of blocks")
    args = parser.parse_args(argv)

    if args.shape == "row":
        print(row(ROW_WIDTH if args.size is None else args.size))
        return 0
    if args.shape == "column":
        lines = column(COLUMN_HEIGHT if args.size is None else args.size)
    else:
        lines = grid(prompt_size() if args.size is None else args.size)
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())