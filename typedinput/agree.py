"""Ask whether the user agrees and report the answer."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .prompts import Prompter

AGREED = "Agreed."
NOT_AGREED = "Not agreed."
QUESTION = "Do you agree? "


def agreement(answer: str, ignore_case: bool = True) -> Optional[str]:
    """Return the verdict for a one-character answer, or None if it is neither y nor n.

    With ``ignore_case`` false only lowercase ``y`` and ``n`` are recognised.
    """
    yes = ("y", "Y") if ignore_case else ("y",)
    no = ("n", "N") if ignore_case else ("n",)
    if answer in yes:
        return AGREED
    if answer in no:
        return NOT_AGREED
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="agree", description="Ask whether you agree.")
    parser.add_argument(
        "--case-sensitive",
        action="store_true",
        help="accept only lowercase y and n",
    )
    args = parser.parse_args(argv)

    answer = Prompter().get_char(QUESTION)
    verdict = agreement(answer, ignore_case=not args.case_sensitive)
    if verdict is not None:
        print(verdict)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())