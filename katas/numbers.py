"""Small number puzzles: digit sums, Fibonacci products, bit counts and more."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

DALMATIANS_HARDLY_ANY = "Hardly any"
DALMATIANS_MORE_THAN_HANDFUL = "More than a handful!"
DALMATIANS_101 = "101 DALMATIONS!!!"
DALMATIANS_LOTS_OF_DOGS = "Woah that's a lot of dogs!"

IS_STRONG = "STRONG!!!!"
NOT_STRONG = "Not Strong !!"


def how_many_dalmatians(number: int) -> str:
    """Describe a number of dalmatians."""
    if number <= 10:
        return DALMATIANS_HARDLY_ANY
    if number <= 50:
        return DALMATIANS_MORE_THAN_HANDFUL
    if number == 101:
        return DALMATIANS_101
    return DALMATIANS_LOTS_OF_DOGS


def _digits(n: int) -> list[int]:
    """Decimal digits of a positive number, least significant first; empty for n <= 0."""
    digits = []
    while n > 0:
        n, digit = divmod(n, 10)
        digits.append(digit)
    return digits


def digital_root(n: int) -> int:
    """Repeatedly sum the decimal digits until a single digit remains."""
    while n >= 10:
        n = sum(_digits(n))
    return n


def multiple_3_and_5(number: int) -> int:
    """Sum of all natural numbers below ``number`` divisible by 3 or 5."""
    return sum(i for i in range(number) if i % 3 == 0 or i % 5 == 0)


def positive_sum(numbers: Iterable[int]) -> int:
    """Sum of the positive values only."""
    return sum(value for value in numbers if value > 0)


def strong(n: int) -> str:
    """Tell whether the sum of the factorials of the digits of ``n`` equals ``n``."""
    total = sum(math.factorial(digit) for digit in _digits(n))
    return IS_STRONG if total == n else NOT_STRONG


def sum_even_fibonacci(limit: int) -> int:
    """Sum the even Fibonacci numbers, stepping while the last term is below ``limit``."""
    total, f1, f2 = 2, 1, 2
    while f2 < limit:
        f1, f2 = f2, f1 + f2
        if f2 % 2 == 0:
            total += f2
    return total


def product_fib(search_for: int) -> tuple[int, int, bool]:
    """Find consecutive Fibonacci numbers whose product reaches ``search_for``.

    Returns the pair and whether their product equals ``search_for`` exactly.
    """
    fib_one, fib_two = 0, 1
    while True:
        fib_one, fib_two = fib_two, fib_one + fib_two
        product = fib_one * fib_two
        if product >= search_for:
            return fib_one, fib_two, product == search_for


def _check_unsigned(value: int) -> None:
    if value < 0:
        raise ValueError(f"value must not be negative: {value}")


def count_bits(value: int) -> int:
    """Count the set bits via the binary representation."""
    _check_unsigned(value)
    return format(value, "b").count("1")


def count_bits_simpler(value: int) -> int:
    """Count the set bits directly."""
    _check_unsigned(value)
    return value.bit_count()


def equable_triangle(a: int, b: int, c: int) -> bool:
    """True when the triangle's area equals its perimeter (Heron's formula)."""
    p = a + b + c
    return 16 * p == (p - 2 * a) * (p - 2 * b) * (p - 2 * c)


def easy_line(n: int) -> str:
    """Sum of the squares of row ``n`` of Pascal's triangle, as a decimal string."""
    if n == 0:
        return "1"
    return str(math.comb(2 * n, n))


def two_sum(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """Indices of the first pair summing to ``target``, or ``(0, 0)`` if none."""
    for i, first in enumerate(numbers):
        for j in range(i + 1, len(numbers)):
            if first + numbers[j] == target:
                return i, j
    return 0, 0