"""A small ``printf`` supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from typing import Any

from pipex.textutil import itoa

DECIMAL = "0123456789"
HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

_UINT_MOD = 1 << 32
_INT_MAX = (1 << 31) - 1
_POINTER_MOD = 1 << 64


def _as_int32(value: int) -> int:
    value %= _UINT_MOD
    return value - _UINT_MOD if value > _INT_MAX else value


def put_number_base(num: int, base: str) -> str:
    """Render ``num`` using the digits of ``base``; negatives get a leading '-'."""
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    radix = len(base)
    sign = ""
    if num < 0:
        sign = "-"
        num = -num
    digits = []
    while True:
        num, remainder = divmod(num, radix)
        digits.append(base[remainder])
        if num == 0:
            break
    return sign + "".join(reversed(digits))


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _format_pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + put_number_base(int(value) % _POINTER_MOD, HEX_LOWER)


def _convert(spec: str, args: list[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    if not args:
        raise ValueError(f"not enough arguments for %{spec}")
    value = args.pop(0)
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return itoa(_as_int32(int(value)))
    unsigned = int(value) % _UINT_MOD
    if spec == "u":
        return put_number_base(unsigned, DECIMAL)
    if spec == "x":
        return put_number_base(unsigned, HEX_LOWER)
    return put_number_base(unsigned, HEX_UPPER)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in ``fmt`` with ``args`` and return the text.

    An unknown conversion character is dropped together with its '%'.
    """
    pending = list(args)
    pieces = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, "")
        pieces.append(_convert(spec, pending))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)