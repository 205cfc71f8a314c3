"""Prompt for lines of text and typed values on a pair of text streams.

Each typed getter prints its prompt, reads one line and re-prompts until
the line holds exactly one value of the wanted type. When input ends
before anything was typed, the getters return the largest value of
their type, and ``get_string`` returns ``None``.
"""

from __future__ import annotations

import math
import re
import struct
import sys
from typing import Callable, Optional, TextIO, TypeVar

T = TypeVar("T")

CHAR_MAX = "\x7f"
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
LLONG_MIN = -(2**63)
LLONG_MAX = 2**63 - 1
DBL_MAX = sys.float_info.max
DBL_MIN = sys.float_info.min
FLT_MAX = struct.unpack("<f", bytes.fromhex("ffff7f7f"))[0]
FLT_MIN = struct.unpack("<f", bytes.fromhex("00008000"))[0]

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)")
_NONZERO_DIGIT = re.compile(r"[1-9]")


def _to_single(value: float) -> Optional[float]:
    """Round a double to single precision, or None if it overflows."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return None


def _parse_decimal(line: str, *, single: bool = False) -> Optional[float]:
    """Parse a plain decimal number (no exponent, no hex, no inf or nan).

    Returns None when the text is not such a number or when the value
    overflows or underflows the target precision.
    """
    if not _DECIMAL.fullmatch(line):
        return None
    value: Optional[float] = float(line)
    smallest = DBL_MIN
    if single:
        value = _to_single(value) if math.isfinite(value) else None
        smallest = FLT_MIN
    if value is None or not math.isfinite(value):
        return None
    if value == 0.0 and _NONZERO_DIGIT.search(line):
        return None
    if value != 0.0 and abs(value) < smallest:
        return None
    return value


def _parse_integer(line: str, low: int, high: int) -> Optional[int]:
    """Parse a base-10 integer n with low <= n < high."""
    if not _INTEGER.fullmatch(line):
        return None
    number = int(line)
    if low <= number < high:
        return number
    return None


def _parse_char(line: str) -> Optional[str]:
    return line if len(line) == 1 else None


def _parse_double(line: str) -> Optional[float]:
    value = _parse_decimal(line)
    if value is not None and value < DBL_MAX:
        return value
    return None


def _parse_float(line: str) -> Optional[float]:
    value = _parse_decimal(line, single=True)
    if value is not None and value < FLT_MAX:
        return value
    return None


class Prompter:
    """Reads lines and typed values from ``stdin``, prompting on ``stdout``."""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = sys.stdin if stdin is None else stdin
        self.stdout = sys.stdout if stdout is None else stdout
        self._pushback = ""

    def _getc(self) -> str:
        if self._pushback:
            char, self._pushback = self._pushback, ""
            return char
        return self.stdin.read(1)

    def read_line(self) -> Optional[str]:
        """Read one line without its ending (CR, LF or CRLF).

        Returns "" for an empty line and None at end of input.
        """
        chars = []
        while True:
            char = self._getc()
            if char in ("", "\r", "\n"):
                break
            chars.append(char)
        if not chars and char == "":
            return None
        if char == "\r":
            following = self._getc()
            if following not in ("", "\n"):
                self._pushback = following
        return "".join(chars)

    def _show(self, prompt: Optional[str], args: tuple) -> None:
        if prompt is None:
            return
        text = prompt % args if args else prompt
        self.stdout.write(text)
        self.stdout.flush()

    def get_string(self, prompt: Optional[str] = None, *args) -> Optional[str]:
        """Prompt and return one line of text, or None at end of input."""
        self._show(prompt, args)
        return self.read_line()

    def _ask(
        self,
        prompt: Optional[str],
        args: tuple,
        convert: Callable[[str], Optional[T]],
        at_end: T,
    ) -> T:
        while True:
            line = self.get_string(prompt, *args)
            if line is None:
                return at_end
            value = convert(line)
            if value is not None:
                return value

    def get_char(self, prompt: Optional[str] = None, *args) -> str:
        """Prompt until the line is a single character; CHAR_MAX at end of input."""
        return self._ask(prompt, args, _parse_char, CHAR_MAX)

    def get_double(self, prompt: Optional[str] = None, *args) -> float:
        """Prompt until the line is a plain decimal number; DBL_MAX at end of input."""
        return self._ask(prompt, args, _parse_double, DBL_MAX)

    def get_float(self, prompt: Optional[str] = None, *args) -> float:
        """Like get_double, but in single precision; FLT_MAX at end of input."""
        return self._ask(prompt, args, _parse_float, FLT_MAX)

    def get_int(self, prompt: Optional[str] = None, *args) -> int:
        """Prompt until the line is an integer in [INT_MIN, INT_MAX); INT_MAX at end."""
        return self._ask(prompt, args, lambda s: _parse_integer(s, INT_MIN, INT_MAX), INT_MAX)

    def get_long(self, prompt: Optional[str] = None, *args) -> int:
        """Prompt until the line is an integer in [LONG_MIN, LONG_MAX); LONG_MAX at end."""
        return self._ask(prompt, args, lambda s: _parse_integer(s, LONG_MIN, LONG_MAX), LONG_MAX)

    def get_long_long(self, prompt: Optional[str] = None, *args) -> int:
        """Prompt until the line is an integer in [LLONG_MIN, LLONG_MAX); LLONG_MAX at end."""
        return self._ask(
            prompt, args, lambda s: _parse_integer(s, LLONG_MIN, LLONG_MAX), LLONG_MAX
        )


_default: Optional[Prompter] = None


def _prompter() -> Prompter:
    """Return a prompter bound to the current standard streams."""
    global _default
    if _default is None or _default.stdin is not sys.stdin or _default.stdout is not sys.stdout:
        _default = Prompter(sys.stdin, sys.stdout)
    return _default


def get_string(prompt: Optional[str] = None, *args) -> Optional[str]:
    """Prompt on standard output and read a line from standard input."""
    return _prompter().get_string(prompt, *args)


def get_char(prompt: Optional[str] = None, *args) -> str:
    """Prompt on the standard streams for a single character."""
    return _prompter().get_char(prompt, *args)


def get_double(prompt: Optional[str] = None, *args) -> float:
    """Prompt on the standard streams for a double-precision number."""
    return _prompter().get_double(prompt, *args)


def get_float(prompt: Optional[str] = None, *args) -> float:
    """Prompt on the standard streams for a single-precision number."""
    return _prompter().get_float(prompt, *args)


def get_int(prompt: Optional[str] = None, *args) -> int:
    """Prompt on the standard streams for a 32-bit integer."""
    return _prompter().get_int(prompt, *args)


def get_long(prompt: Optional[str] = None, *args) -> int:
    """Prompt on the standard streams for a 64-bit integer."""
    return _prompter().get_long(prompt, *args)


def get_long_long(prompt: Optional[str] = None, *args) -> int:
    """Prompt on the standard streams for a 64-bit integer."""
    return _prompter().get_long_long(prompt, *args)