"""Add and divide two numbers typed by the user, in several numeric types."""

from __future__ import annotations

import argparse
import math
import struct
import sys
from typing import Optional, Sequence

from .prompts import Prompter

DEFAULT_DIGITS = 6


def _single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _divide_ieee(x: float, y: float) -> float:
    """Divide with IEEE semantics for a zero divisor."""
    if y == 0:
        if x == 0 or math.isnan(x):
            return math.nan
        return math.copysign(math.inf, x) * math.copysign(1.0, y)
    return x / y


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def divide_truncated(x: int, y: int) -> int:
    """Divide integers, truncating the quotient toward zero."""
    if y == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient


def divide_single(x: int, y: int) -> float:
    """Divide in single precision, as float operands and a float result."""
    return _single(_divide_ieee(_single(float(x)), _single(float(y))))


def divide_double(x: int, y: int) -> float:
    """Divide in double precision."""
    return _divide_ieee(float(x), float(y))


def format_fixed(value: float, digits: int = DEFAULT_DIGITS) -> str:
    """Format a number in fixed-point notation with ``digits`` decimals."""
    return f"{value:.{digits}f}"


def _digits(text: str) -> int:
    number = int(text)
    if number < 0:
        raise argparse.ArgumentTypeError("digits must not be negative")
    return number


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="calculator", description="Add or divide x and y.")
    parser.add_argument(
        "operation",
        nargs="?",
        default="add",
        choices=("add", "truncate", "single", "double"),
        help="add, or divide as integers, single or double precision",
    )
    parser.add_argument("--long", dest="wide", action="store_true", help="read 64-bit integers")
    parser.add_argument("--digits", type=_digits, default=None, help="decimals to print")
    args = parser.parse_args(argv)

    prompter = Prompter()
    read = prompter.get_long if args.wide else prompter.get_int
    x = read("x: ")
    y = read("y: ")
    digits = DEFAULT_DIGITS if args.digits is None else args.digits

    if args.operation == "add":
        print(add(x, y))
    elif args.operation == "truncate":
        try:
            quotient = divide_truncated(x, y)
        except ZeroDivisionError as error:
            print(f"calculator: {error}", file=sys.stderr)
            return 1
        if args.digits is None:
            print(quotient)
        else:
            print(format_fixed(float(quotient), digits))
    elif args.operation == "single":
        print(format_fixed(divide_single(x, y), digits))
    else:
        print(format_fixed(divide_double(x, y), digits))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())