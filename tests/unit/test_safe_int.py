"""Tests for the checked integer wrapper."""

import pytest

from swap_router.safe_int import DivisionByZero, S, SafeInt, Underflow


class TestSafeIntArithmetic:
    def test_basic_operations(self):
        assert (S(7) + S(3)).value == 10
        assert (S(7) - 3).value == 4
        assert (S(7) * S(3)).value == 21
        assert (S(7) // S(3)).value == 2

    def test_ceiling_div(self):
        assert S(7).ceiling_div(3).value == 3
        assert S(6).ceiling_div(3).value == 2
        assert S(0).ceiling_div(3).value == 0

    def test_underflow_raises(self):
        with pytest.raises(Underflow):
            S(3) - S(4)

    def test_division_by_zero_raises(self):
        with pytest.raises(DivisionByZero):
            S(3) // 0
        with pytest.raises(DivisionByZero):
            S(3).ceiling_div(S(0))

    def test_errors_are_arithmetic_errors(self):
        with pytest.raises(ArithmeticError):
            S(1) // 0


class TestSafeIntConstruction:
    def test_rejects_non_int(self):
        with pytest.raises(TypeError):
            SafeInt(1.5)  # type: ignore[arg-type]

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            SafeInt(True)

    def test_copy_and_compare(self):
        a = S(5)
        b = SafeInt(a)
        assert a == b
        assert a == 5
        assert a < 6 and a <= 5 and a > 4 and a >= 5
        assert int(a) == 5
        assert not S(0)
