"""Formatting with the mandatory conversions: c s p d i u x X %."""

from __future__ import annotations

import re
import sys
from typing import Iterator

from miniprintf.writers import (
    format_char,
    format_hex,
    format_int,
    format_pointer,
    format_str,
    format_unsigned,
)

_PIECE = re.compile(r"%(.?)|[^%]+", re.DOTALL)


def _take(args: Iterator):
    """Return the next argument or raise when the arguments have run out."""
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_conversion(spec: str, args: Iterator) -> str:
    """Render one conversion, consuming its argument from the iterator."""
    if spec == "c":
        return format_char(_take(args))
    if spec == "s":
        return format_str(_take(args))
    if spec == "p":
        return format_pointer(_take(args))
    if spec in ("d", "i"):
        return format_int(_take(args))
    if spec == "u":
        return format_unsigned(_take(args))
    if spec == "x":
        return format_hex(_take(args) & 0xFFFFFFFF, False)
    if spec == "X":
        return format_hex(_take(args) & 0xFFFFFFFF, True)
    # "%%" and any unknown specifier both print the specifier itself.
    return spec


def sprintf(fmt: str, *args) -> str:
    """Return the formatted text; a lone trailing "%" ends the output."""
    remaining = iter(args)
    pieces = []
    for match in _PIECE.finditer(fmt):
        spec = match.group(1)
        if spec is None:
            pieces.append(match.group(0))
            continue
        if not spec:
            break
        pieces.append(format_conversion(spec, remaining))
    return "".join(pieces)


def printf(fmt: str, *args, file=None) -> int:
    """Write the formatted text to ``file`` (stdout by default) and return its length."""
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)