"""Formatting that also understands the "#", "+" and " " flags."""

from __future__ import annotations

import re
import sys
from typing import Iterator

from miniprintf.printf import _take, format_conversion
from miniprintf.writers import format_int, format_unsigned

_PIECE = re.compile(r"%(?:([#+ ])\1*)?(.?)|[^%]+", re.DOTALL)


def _flag_prefix(flag: str, spec: str, flag_args: Iterator) -> str:
    """Return what a flag adds in front of its conversion."""
    if flag in ("+", " ") and spec in ("d", "i"):
        if not format_int(_take(flag_args)).startswith("-"):
            return flag
        return ""
    if flag == "#" and spec in ("x", "X"):
        if format_unsigned(_take(flag_args)) != "0":
            return "0" + spec
        return ""
    return ""


def sprintf_flags(fmt: str, *args) -> str:
    """Return the formatted text, honouring a single repeated flag per conversion.

    Flag decisions read arguments through their own cursor, which starts at the
    first argument and advances only when a flag examines a value.
    """
    values = iter(args)
    flag_values = iter(args)
    pieces = []
    for match in _PIECE.finditer(fmt):
        text = match.group(0)
        if not text.startswith("%"):
            pieces.append(text)
            continue
        flag, spec = match.group(1), match.group(2)
        if flag:
            pieces.append(_flag_prefix(flag, spec, flag_values))
        if not spec:
            break
        pieces.append(format_conversion(spec, values))
    return "".join(pieces)


def printf_flags(fmt: str, *args, file=None) -> int:
    """Write the flag-aware formatted text and return its length."""
    text = sprintf_flags(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)