import math

import pytest

from katas.numerics import len_curve, len_curve_with_hypot, simpson, simpson_integrand

CURVE_CASES = [
    (1, 1.4142133562),
    (2, 1.4604048132),
    (10, 1.478197397),
    (40, 1.478896272),
    (200, 1.478940994),
]


@pytest.mark.parametrize("n, expected", CURVE_CASES)
def test_len_curve(n, expected):
    assert len_curve(n) == pytest.approx(expected, rel=1e-6)


@pytest.mark.parametrize("n, expected", CURVE_CASES)
def test_len_curve_with_hypot(n, expected):
    assert len_curve_with_hypot(n) == pytest.approx(expected, rel=1e-6)


def test_len_curve_zero_segments():
    assert len_curve(0) == 0.0
    assert math.isnan(len_curve_with_hypot(0))


@pytest.mark.parametrize(
    "n, expected",
    [
        (290, 1.9999999986),
        (72, 1.9999996367),
        (252, 1.9999999975),
        (40, 1.9999961668),
    ],
)
def test_simpson(n, expected):
    assert simpson(n) == pytest.approx(expected, rel=1e-10)


def test_simpson_rejects_non_positive():
    with pytest.raises(ValueError):
        simpson(0)


@pytest.mark.parametrize(
    "x, expected",
    [(0.0, 0.0), (math.pi / 2, 1.5), (math.pi, 0.0)],
)
def test_simpson_integrand(x, expected):
    assert simpson_integrand(x) == pytest.approx(expected, rel=1e-10, abs=1e-10)