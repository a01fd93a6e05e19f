"""
Тесты для Exact Rationals

Проверяет:
1. Строгое приведение к Fraction (float/bool отвергаются)
2. Обращение с FieldDivisionByZero
3. Распознавание рациональных квадратов
4. Валидацию натуральных чисел
"""

from decimal import Decimal
from fractions import Fraction

import pytest

from src.core.algebra.rational import (
    RATIONAL_ONE,
    RATIONAL_ZERO,
    FieldDivisionByZero,
    is_rational_square,
    rational_inverse,
    to_rational,
    validate_natural,
)


class TestToRational:
    """Тесты to_rational"""

    def test_int(self) -> None:
        assert to_rational(3) == Fraction(3)
        assert isinstance(to_rational(3), Fraction)

    def test_fraction_passthrough(self) -> None:
        value = Fraction(2, 3)
        assert to_rational(value) is value

    def test_strings(self) -> None:
        assert to_rational("6/8") == Fraction(3, 4)
        assert to_rational("-2") == Fraction(-2)
        assert to_rational("0.25") == Fraction(1, 4)
        assert to_rational(" 1/2 ") == Fraction(1, 2)

    def test_reduced_form(self) -> None:
        r = to_rational("10/4")
        assert (r.numerator, r.denominator) == (5, 2)

    def test_float_rejected(self) -> None:
        with pytest.raises(TypeError, match="Floating point"):
            to_rational(0.5)

    def test_bool_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_rational(True)

    def test_decimal_rejected(self) -> None:
        with pytest.raises(TypeError):
            to_rational(Decimal("1.5"))

    def test_garbage_string(self) -> None:
        with pytest.raises(ValueError):
            to_rational("not a number")

    def test_constants(self) -> None:
        assert RATIONAL_ZERO == 0
        assert RATIONAL_ONE == 1


class TestRationalInverse:
    """Тесты rational_inverse"""

    def test_inverse(self) -> None:
        assert rational_inverse(Fraction(2, 3)) == Fraction(3, 2)
        assert rational_inverse(Fraction(-5)) == Fraction(-1, 5)

    def test_zero_raises(self) -> None:
        with pytest.raises(FieldDivisionByZero):
            rational_inverse(Fraction(0))

    def test_division_by_zero_is_zero_division_error(self) -> None:
        with pytest.raises(ZeroDivisionError):
            rational_inverse(RATIONAL_ZERO)


class TestIsRationalSquare:
    """Тесты is_rational_square"""

    @pytest.mark.parametrize("value", [0, 1, 4, 9, Fraction(9, 4), "16/25", 144])
    def test_squares(self, value) -> None:
        assert is_rational_square(value) is True

    @pytest.mark.parametrize("value", [2, 3, 5, -1, -4, Fraction(1, 2), "7/3", Fraction(4, 3)])
    def test_non_squares(self, value) -> None:
        assert is_rational_square(value) is False


class TestValidateNatural:
    """Тесты validate_natural"""

    def test_valid(self) -> None:
        assert validate_natural(0, "n") == 0
        assert validate_natural(42, "n") == 42

    def test_negative(self) -> None:
        with pytest.raises(ValueError, match="n must be non-negative"):
            validate_natural(-1, "n")

    def test_wrong_types(self) -> None:
        with pytest.raises(TypeError):
            validate_natural(1.0, "n")
        with pytest.raises(TypeError):
            validate_natural(True, "n")
        with pytest.raises(TypeError):
            validate_natural("3", "n")
