import math

import pytest

from calc import apply_function, SCIENTIFIC_FUNCTIONS
from core import DomainError, DivisionByZeroError


@pytest.mark.parametrize("name, value, expected", [
    ('sqrt', 16, 4),
    ('square', -3, 9),
    ('cube', 2, 8),
    ('inverse', 4, 0.25),
    ('percent', 50, 0.5),
    ('exp', 0, 1),
    ('log', 100, 2),
    ('ln', 1, 0),
    ('factorial', 5, 120),
    ('factorial', 0, 1),
    ('abs', -3, 3),
    ('floor', 2.7, 2),
    ('floor', -2.5, -3),
    ('negate', 5, -5),
])
def test_quick_functions(name, value, expected):
    assert apply_function(name, value) == expected


def test_trigonometry_in_degrees_and_radians():
    assert apply_function('sin', 30) == 0.5
    assert apply_function('asin', 0.5) == 30
    assert apply_function('atan', 1) == 45
    assert apply_function('acos', 0.5, degrees=False) == pytest.approx(math.pi / 3, abs=1e-8)
    assert apply_function('cos', math.pi, degrees=False) == -1


def test_hypotenuse_with_unit_side():
    assert apply_function('hyp', 3) == pytest.approx(math.sqrt(10), abs=1e-8)


def test_factorial_upper_bound_is_accepted():
    assert apply_function('factorial', 10) == 3628800
    assert apply_function('factorial', 100) == pytest.approx(math.factorial(100), rel=1e-12)


@pytest.mark.parametrize("name, value", [
    ('sqrt', -4),
    ('log', 0),
    ('ln', -1),
    ('asin', 2),
    ('acos', -1.5),
    ('factorial', -1),
    ('factorial', 101),
    ('factorial', 2.5),
    ('hyp', 0),
])
def test_domain_errors(name, value):
    with pytest.raises(DomainError):
        apply_function(name, value)


def test_inverse_of_zero():
    with pytest.raises(DivisionByZeroError):
        apply_function('inverse', 0)


def test_unknown_function():
    with pytest.raises(ValueError):
        apply_function('gamma', 1)


def test_every_function_accepts_angle_mode():
    for name in SCIENTIFIC_FUNCTIONS:
        apply_function(name, 1, degrees=False)
