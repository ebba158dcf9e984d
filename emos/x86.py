"""Low-level machine services: 64-by-32-bit division and teletype output."""

from __future__ import annotations

import sys
from typing import TextIO

UINT8_MAX = 0xFF
UINT32_MAX = 0xFFFF_FFFF
UINT64_MAX = 0xFFFF_FFFF_FFFF_FFFF


def div64_32(dividend: int, divisor: int) -> tuple[int, int]:
    """Divide an unsigned 64-bit value by an unsigned 32-bit value.

    Returns ``(quotient, remainder)``. The quotient may need the full 64 bits.
    """
    if not 0 <= dividend <= UINT64_MAX:
        raise ValueError(f"dividend {dividend} does not fit in 64 unsigned bits")
    if not 0 <= divisor <= UINT32_MAX:
        raise ValueError(f"divisor {divisor} does not fit in 32 unsigned bits")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    return divmod(dividend, divisor)


class Teletype:
    """Character output device in teletype mode, writing to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write_char(self, c: str | int, page: int = 0) -> None:
        """Write one character (a one-character string or a byte value) on ``page``."""
        if not 0 <= page <= UINT8_MAX:
            raise ValueError(f"video page {page} is out of range")
        if isinstance(c, int):
            if not 0 <= c <= UINT8_MAX:
                raise ValueError(f"character code {c} is out of range")
            c = chr(c)
        elif not isinstance(c, str):
            raise TypeError(f"expected a character, got {type(c).__name__}")
        if len(c) != 1:
            raise ValueError("write_char takes exactly one character")
        self.stream.write(c)