"""A reduced formatter that knows only the c, s and d conversions."""

from __future__ import annotations

import re
import sys
from typing import Iterator

from miniprintf.printf import _take
from miniprintf.writers import format_char, format_int, format_str

_PIECE = re.compile(r"%(.?)|[^%]+", re.DOTALL)


def _convert(spec: str, args: Iterator) -> str:
    if spec == "c":
        return format_char(_take(args))
    if spec == "s":
        value = _take(args)
        if value is None:
            raise TypeError("%s requires a string, got None")
        return format_str(value)
    if spec == "d":
        return format_int(_take(args))
    return ""


def sprintf_basic(fmt: str, *args) -> str:
    """Return the formatted text; any other specifier prints nothing."""
    remaining = iter(args)
    pieces = []
    for match in _PIECE.finditer(fmt):
        spec = match.group(1)
        if spec is None:
            pieces.append(match.group(0))
            continue
        if not spec:
            break
        pieces.append(_convert(spec, remaining))
    return "".join(pieces)


def printf_basic(fmt: str, *args, file=None) -> int:
    """Write the reduced formatted text and return its length."""
    text = sprintf_basic(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)


def main(argv=None) -> int:
    """Print a character with the standard formatter, then with the reduced one."""
    sys.stdout.write("%c" % "h")
    printf_basic("%c %d", "h", 122)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())