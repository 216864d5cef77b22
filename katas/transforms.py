"""String transformations: mirrors, weight ordering, passphrases and more."""

from __future__ import annotations

from collections.abc import Callable, Iterable

_ASCII_UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGITS = "0123456789"


def oper(f: Callable[[str], str], x: str) -> str:
    """Apply the transformation ``f`` to ``x``."""
    return f(x)


def vert_mirror(s: str) -> str:
    """Reverse every line of a newline-separated block of text."""
    return "\n".join(line[::-1] for line in s.split("\n"))


def hor_mirror(s: str) -> str:
    """Reverse the order of the lines of a newline-separated block of text."""
    return "\n".join(reversed(s.split("\n")))


def _weight_score(weight: str) -> int:
    return sum(ord(digit) - ord("0") for digit in weight)


def order_weight(text: str) -> str:
    """Sort weights by digit sum, breaking ties by string order."""
    weights = text.split()
    return " ".join(sorted(weights, key=lambda w: (_weight_score(w), w)))


def _pass_char(ch: str, index: int, shift: int) -> str:
    if ch in _ASCII_UPPER:
        ch = chr(ord("A") + (ord(ch) - ord("A") + shift) % 26)
    elif ch in _DIGITS:
        ch = chr(ord("9") - ord(ch) + ord("0"))
    if index % 2 == 1 and ch.isalpha():
        ch = ch.lower()
    return ch


def play_pass(s: str, n: int) -> str:
    """Encode a passphrase: shift letters, complement digits, alternate case, reverse."""
    encoded = (_pass_char(ch, i, n) for i, ch in enumerate(s.upper()))
    return "".join(encoded)[::-1]


def _sum_cubes_of_digits(chunk: str) -> int:
    return sum(int(ch) ** 3 for ch in chunk if ch in _DIGITS)


def revrot(s: str, n: int) -> str:
    """Cut ``s`` into chunks of ``n``; reverse chunks with an even cube sum, rotate the rest.

    A trailing chunk shorter than ``n`` is dropped.
    """
    size = abs(n)
    if size == 0:
        return ""
    chunks = (s[i:i + size] for i in range(0, len(s) - size + 1, size))
    return "".join(
        chunk[::-1] if _sum_cubes_of_digits(chunk) % 2 == 0 else chunk[1:] + chunk[:1]
        for chunk in chunks
    )


def in_array(array1: Iterable[str], array2: Iterable[str]) -> list[str]:
    """Sorted distinct strings of ``array1`` that occur inside some string of ``array2``."""
    targets = list(array2)
    return sorted({value for value in array1 if any(value in t for t in targets)})