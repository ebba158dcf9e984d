"""Console output with a small printf-style formatter."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass
from typing import Any, Iterator, TextIO

from emos.x86 import UINT64_MAX, Teletype, div64_32

_HEX_CHARS = "0123456789abcdef"


class Length(enum.Enum):
    """Length modifier of a conversion, valued by the width of its integer in bits."""

    NONE = ("", 16)
    LONG = ("l", 32)
    LONG_LONG = ("ll", 64)
    SHORT = ("h", 16)
    SHORT_SHORT = ("hh", 16)

    def __init__(self, modifier: str, bits: int) -> None:
        self.modifier = modifier
        self.bits = bits

    @classmethod
    def from_modifier(cls, modifier: str | None) -> "Length":
        modifier = modifier or ""
        return next(length for length in cls if length.modifier == modifier)


class Flag(enum.IntFlag):
    LEFT_JUSTIFY = 0x01
    FORCE_SIGN = 0x02
    SPACE = 0x04
    ALTERNATE = 0x08
    ZERO_PAD = 0x10
    WIDTH = 0x20
    PRECISION = 0x40


_FLAG_CHARS = {
    "-": Flag.LEFT_JUSTIFY,
    "+": Flag.FORCE_SIGN,
    " ": Flag.SPACE,
    "#": Flag.ALTERNATE,
    "0": Flag.ZERO_PAD,
}

# Numeric conversions: specifier -> (radix, signed)
_NUMERIC = {
    "d": (10, True),
    "i": (10, True),
    "u": (10, False),
    "x": (16, False),
    "X": (16, False),
    "p": (16, False),
    "o": (8, False),
}

_DIRECTIVE = re.compile(
    r"""
    %
    (?P<flags>[-+\ \#0]*)
    (?P<width>[0-9]*)(?P<width_arg>\*)?
    (?:\.(?P<precision>[0-9]*)|(?P<precision_arg>\*))?
    (?P<length>ll|l|hh|h)?
    (?P<specifier>.)?
    """,
    re.VERBOSE | re.DOTALL,
)


@dataclass(frozen=True)
class _Spec:
    flags: Flag
    width: int
    precision: int
    length: Length
    specifier: str | None


class _Arguments:
    """Sequential access to the variadic arguments of a format call."""

    def __init__(self, args: tuple[Any, ...]) -> None:
        self._iter: Iterator[Any] = iter(args)

    def next(self) -> Any:
        try:
            return next(self._iter)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def next_int(self) -> int:
        value = self.next()
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer argument, got {type(value).__name__}")
        return value


def _until_nul(text: str) -> str:
    return text.partition("\0")[0]


def _parse(match: re.Match[str], args: _Arguments) -> _Spec:
    flags = Flag(0)
    for char in match["flags"]:
        flags |= _FLAG_CHARS[char]

    width = int(match["width"] or 0)
    if match["width_arg"]:
        width = args.next_int()
    if width < 0:
        flags |= Flag.LEFT_JUSTIFY
        width = -width
    if width > 0:
        flags |= Flag.WIDTH

    precision = 0
    if match["precision"] is not None:
        precision = int(match["precision"] or 0)
    elif match["precision_arg"]:
        precision = max(args.next_int(), 0)
    if precision > 0:
        flags |= Flag.PRECISION

    return _Spec(
        flags=flags,
        width=width,
        precision=precision,
        length=Length.from_modifier(match["length"]),
        specifier=match["specifier"],
    )


def _format_number(value: int, length: Length, signed: bool, radix: int) -> str:
    bits = length.bits
    raw = value & ((1 << bits) - 1)
    negative = False
    if signed and raw >> (bits - 1):
        negative = True
        number = raw - (1 << bits)
        magnitude = -number
        if magnitude == 1 << (bits - 1):
            # Negating the most negative value overflows and stays negative.
            magnitude = number & UINT64_MAX
        raw = magnitude

    digits = []
    while True:
        raw, digit = div64_32(raw, radix)
        digits.append(_HEX_CHARS[digit])
        if raw == 0:
            break
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def _convert(spec: _Spec, args: _Arguments) -> str:
    specifier = spec.specifier
    if specifier is None:
        return ""
    if specifier == "c":
        value = args.next()
        if isinstance(value, str):
            if len(value) != 1:
                raise TypeError("%c requires a single character")
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"%c requires a character, got {type(value).__name__}")
        return chr(value & 0xFF)
    if specifier == "s":
        value = args.next()
        if not isinstance(value, str):
            raise TypeError(f"%s requires a string, got {type(value).__name__}")
        return _until_nul(value)
    if specifier == "%":
        return "%"
    if specifier in _NUMERIC:
        radix, signed = _NUMERIC[specifier]
        return _format_number(args.next_int(), spec.length, signed, radix)
    return ""


def format_string(format: str, *args: Any) -> str:
    """Format ``args`` by ``format`` and return the text that printf would write.

    Flags, width and precision are parsed but do not change the output.
    Integers are taken at the width of their type: 16 bits by default and
    for ``h``/``hh``, 32 bits for ``l`` and 64 bits for ``ll``.
    """
    text = _until_nul(format)
    arguments = _Arguments(args)
    pieces = []
    pos = 0
    for match in _DIRECTIVE.finditer(text):
        pieces.append(text[pos:match.start()])
        pieces.append(_convert(_parse(match, arguments), arguments))
        pos = match.end()
    pieces.append(text[pos:])
    return "".join(pieces)


def putc(c: str | int, out: TextIO | None = None) -> None:
    """Write one character to ``out`` (standard output by default)."""
    Teletype(out).write_char(c, 0)


def puts(s: str, out: TextIO | None = None) -> None:
    """Write ``s`` up to its first NUL character, with no newline added."""
    teletype = Teletype(out)
    for char in _until_nul(s):
        teletype.write_char(char, 0)


def printf(format: str, *args: Any, out: TextIO | None = None) -> None:
    """Format ``args`` by ``format`` and write the result to ``out``."""
    teletype = Teletype(out)
    for char in format_string(format, *args):
        teletype.write_char(char, 0)