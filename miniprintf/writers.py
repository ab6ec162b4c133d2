"""Text renderings of the single values a conversion produces."""

from __future__ import annotations

import operator

_INT_BITS = 32
_LONG_BITS = 64
_BYTE_BITS = 8


def _wrap_unsigned(value, bits: int) -> int:
    """Reduce an integer to an unsigned value of the given width."""
    return operator.index(value) & ((1 << bits) - 1)


def _wrap_signed(value, bits: int) -> int:
    """Reduce an integer to a two's-complement signed value of the given width."""
    unsigned = _wrap_unsigned(value, bits)
    if unsigned >> (bits - 1):
        return unsigned - (1 << bits)
    return unsigned


def format_char(c) -> str:
    """Render one character; integers are reduced to a single byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return c
    return chr(_wrap_unsigned(c, _BYTE_BITS))


def format_str(s) -> str:
    """Render a string, stopping at the first NUL; None renders as "(null)"."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s.partition("\0")[0]


def format_int(n) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_wrap_signed(n, _INT_BITS))


def format_unsigned(n) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_wrap_unsigned(n, _INT_BITS))


def format_hex(n, upper=False) -> str:
    """Render an unsigned 64-bit integer in hexadecimal without a prefix."""
    return format(_wrap_unsigned(n, _LONG_BITS), "X" if upper else "x")


def format_pointer(address) -> str:
    """Render an address as lowercase hexadecimal with a "0x" prefix."""
    if address is None:
        return "0x0"
    return "0x" + format_hex(address, False)