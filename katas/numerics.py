"""Numerical approximations: parabola arc length and Simpson's rule."""

from __future__ import annotations

import itertools
import math


def len_curve(n: int) -> float:
    """Length of y = x**2 on [0, 1], approximated by ``n`` straight segments."""
    points = [(0.0, 0.0)]
    for i in range(1, n + 1):
        x = i / n
        points.append((x, x * x))
    return sum(
        math.hypot(x2 - x1, y2 - y1)
        for (x1, y1), (x2, y2) in itertools.pairwise(points)
    )


def len_curve_with_hypot(n: int) -> float:
    """Same approximation as :func:`len_curve` in closed form."""
    if n == 0:
        return math.nan
    total = sum(math.hypot(2 * i + 1, n) for i in range(n))
    return total / (n * n)


def simpson_integrand(x: float) -> float:
    """The integrand 1.5 * sin(x)**3."""
    return 1.5 * math.sin(x) ** 3


def simpson(n: int) -> float:
    """Integral of :func:`simpson_integrand` over [0, pi] with ``n`` subintervals."""
    if n <= 0:
        raise ValueError(f"n must be positive: {n}")
    b = math.pi
    h = b / n
    halves = n // 2
    result = 2 * sum(simpson_integrand(2 * i * h) for i in range(1, halves))
    result += 4 * sum(simpson_integrand((2 * i - 1) * h) for i in range(1, halves + 1))
    result += simpson_integrand(b)
    return result * b / (3 * n)