"""
Property-based tests for the Calculator.
"""

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from calclib.config import Settings
from calclib.core.calculator import Calculator
from calclib.errors import DivisionByZeroError

calc = Calculator(settings=Settings(_env_file=None, trace_operations=False))
ints = st.integers(min_value=-(2**63), max_value=2**63 - 1)


@given(ints, ints)
def test_total_commutes(a, b):
    assert calc.total(a, b) == calc.total(b, a)


@given(ints, ints)
def test_subtract_antisymmetric(a, b):
    assert calc.subtract(a, b) == -calc.subtract(b, a)


@given(ints, ints)
def test_multiply_commutes(a, b):
    assert calc.multiply(a, b) == calc.multiply(b, a)


@given(ints, ints)
def test_divide_undoes_multiply(a, b):
    assume(b != 0)
    assert calc.divide(calc.multiply(a, b), b) == a


@given(ints, ints)
def test_divide_truncates(a, b):
    assume(b != 0)
    q = calc.divide(a, b)
    # |q * b| never exceeds |a| and the remainder has the dividend's sign
    assert abs(q * b) <= abs(a)
    r = a - q * b
    assert r == 0 or (r > 0) == (a > 0)
    assert abs(r) < abs(b)


@given(ints)
def test_divide_by_zero_always_raises(a):
    with pytest.raises(DivisionByZeroError):
        calc.divide(a, 0)
