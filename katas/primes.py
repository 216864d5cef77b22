"""Prime puzzles: emirps and prime gaps."""

from __future__ import annotations

_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)


def is_prime(n: int) -> bool:
    """Deterministic primality test (exact well beyond 64-bit integers)."""
    if n < 0:
        raise ValueError(f"negative number: {n}")
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def reverse_int(n: int) -> int:
    """Reverse the decimal digits of ``n``; zero for non-positive input."""
    reversed_value = 0
    while n > 0:
        n, remainder = divmod(n, 10)
        reversed_value = reversed_value * 10 + remainder
    return reversed_value


def backwards_prime(start: int, stop: int) -> list[int]:
    """Primes in ``[start, stop]`` whose digit reversal is a different prime."""
    result = []
    for i in range(start, stop + 1):
        reversed_i = reverse_int(i)
        if i != reversed_i and is_prime(i) and is_prime(reversed_i):
            result.append(i)
    return result


def gap(g: int, m: int, n: int) -> list[int] | None:
    """First pair of successive primes in ``[m, n)`` that are ``g`` apart, or None."""
    prev = 0
    for curr in range(m, n):
        if not is_prime(curr):
            continue
        if curr - prev == g:
            return [prev, curr]
        prev = curr
    return None