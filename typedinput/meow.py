"""Meow some number of times."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

SOUND = "meow"
DEFAULT_TIMES = 3


def meow(times: int = DEFAULT_TIMES) -> str:
    """Return ``times`` lines of meowing."""
    return f"{SOUND}\n" * max(times, 0)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="meow", description="Meow a few times.")
    parser.add_argument("-n", "--times", type=int, default=DEFAULT_TIMES)
    args = parser.parse_args(argv)
    print(meow(args.times), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())