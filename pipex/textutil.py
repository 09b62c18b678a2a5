"""String helpers used by the pipeline runner: splitting, trimming, comparing."""

from __future__ import annotations

from itertools import zip_longest

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1
_WHITESPACE = {chr(code) for code in range(9, 14)} | {" "}


def _to_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. The result wraps to a signed 32-bit int.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    digits = []
    for char in stripped:
        if not "0" <= char <= "9":
            break
        digits.append(char)
    value = int("".join(digits)) if digits else 0
    return _to_int32(sign * value)


def itoa(n: int) -> str:
    """Render an integer as a decimal string."""
    return f"{n:d}"


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``.

    A start past the end yields an empty string.
    """
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start > len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, the whole haystack for
    an empty needle, or ``None`` if there is no match.
    """
    _require_non_negative("length", length)
    if not needle:
        return haystack
    index = haystack[:length].find(needle)
    return None if index < 0 else haystack[index:]


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first mismatch."""
    _require_non_negative("n", n)
    for char_a, char_b in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return 0


def strcmp(a: str | None, b: str) -> int:
    """Compare two strings; a missing first string compares as greater (1)."""
    if a is None:
        return 1
    for char_a, char_b in zip_longest(a, b, fillvalue="\0"):
        if char_a != char_b:
            return ord(char_a) - ord(char_b)
    return 0