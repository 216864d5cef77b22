"""Validators: IP addresses, binary multiples of three, hashes and braces."""

from __future__ import annotations

import hashlib
import ipaddress
import re

MULTIPLE_OF_3_REGEX = "^(1(01*0)*1|0)*$"
_MULTIPLE_OF_3 = re.compile(MULTIPLE_OF_3_REGEX)

_PAIRS = {"(": ")", "{": "}", "[": "]"}
_CLOSING = frozenset(_PAIRS.values())


def is_valid_ip(ip: str) -> bool:
    """True if ``ip`` is a valid IPv4 or IPv6 address."""
    if "%" in ip:
        return False
    try:
        ipaddress.ip_address(ip)
    except ValueError:
        return False
    return True


def is_multiple_of_3(binary: str) -> bool:
    """True if the binary string denotes a multiple of three."""
    return _MULTIPLE_OF_3.fullmatch(binary) is not None


def pass_hash(text: str) -> str:
    """Hex MD5 digest of ``text``."""
    return hashlib.md5(text.encode("utf-8")).hexdigest()


def alphanumeric(text: str) -> bool:
    """True if ``text`` is non-empty and has only letters and digits."""
    return bool(text) and all(ch.isalpha() or ch.isdecimal() for ch in text)


def valid_braces(text: str) -> bool:
    """True if all brackets in ``text`` are balanced and properly nested."""
    stack: list[str] = []
    for ch in text:
        if ch in _PAIRS:
            stack.append(_PAIRS[ch])
        elif ch in _CLOSING:
            if not stack or stack.pop() != ch:
                return False
    return not stack


def valid_braces_recursive(text: str) -> bool:
    """Bracket check that removes innermost pairs recursively."""
    if text == "":
        return True
    if len(text) < 2:
        return False

    valid = False
    for opening, closing in _PAIRS.items():
        last = text.rfind(opening)
        if last < 0:
            continue
        close = text.find(closing, last)
        if close < 0:
            continue
        valid = valid_braces_recursive(text[last + 1:close])
        if not valid:
            break
        valid = valid_braces_recursive(text[:last] + text[close + 1:])
        if not valid:
            break
    return valid