"""
Exact Rationals — точная рациональная арифметика

Тонкий адаптер над fractions.Fraction: несократимая дробь с целочисленным
числителем и положительным знаменателем, неизменяемая, точное сравнение.

Модуль добавляет только то, что нужно расширению поля ℚ[√d]:
- Строгое приведение входов к Fraction (float запрещён)
- Обращение с явной ошибкой FieldDivisionByZero
- Проверка "является ли рациональное число квадратом"
- Валидация натуральных показателей/индексов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Никакой float не попадает в арифметику (TypeError на входе)
2. Деление на ноль никогда не возвращает sentinel (только исключение)
"""

import math
from fractions import Fraction
from typing import Final, Union

RationalLike = Union[int, Fraction, str]

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

RATIONAL_ZERO: Final[Fraction] = Fraction(0)
RATIONAL_ONE: Final[Fraction] = Fraction(1)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FieldDivisionByZero(ZeroDivisionError):
    """
    Попытка обратить аддитивный ноль (в ℚ или в ℚ[√d]).

    Ноль не имеет мультипликативного обратного ни в одном поле, поэтому
    ошибка всегда фатальна для текущего вычисления.
    """
    pass


# =============================================================================
# ПРИВЕДЕНИЕ И ПРОВЕРКИ
# =============================================================================


def to_rational(value: RationalLike) -> Fraction:
    """
    Приведение значения к точному рациональному числу.

    Args:
        value: int, Fraction или строка вида "3/4", "-2", "0.25"

    Returns:
        Fraction в несократимом виде

    Raises:
        TypeError: Для bool, float, Decimal и прочих типов
        ValueError: Если строку нельзя разобрать как рациональное число

    Examples:
        >>> to_rational(3)
        Fraction(3, 1)
        >>> to_rational("6/8")
        Fraction(3, 4)
        >>> to_rational(0.5)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        TypeError: ...
    """
    if isinstance(value, bool):
        raise TypeError(f"bool is not a rational number: {value!r}")

    if isinstance(value, Fraction):
        return value

    if isinstance(value, int):
        return Fraction(value)

    if isinstance(value, str):
        return Fraction(value.strip())

    raise TypeError(
        f"Expected int, Fraction or str, got {type(value).__name__}: {value!r}. "
        f"Floating point values are not accepted in exact arithmetic."
    )


def rational_inverse(value: Fraction) -> Fraction:
    """
    Мультипликативное обратное 1/value.

    Raises:
        FieldDivisionByZero: Если value == 0
    """
    if value == 0:
        raise FieldDivisionByZero("Rational zero has no multiplicative inverse")
    return 1 / value


def _is_perfect_square(n: int) -> bool:
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def is_rational_square(value: RationalLike) -> bool:
    """
    Проверка, является ли value квадратом рационального числа.

    Для несократимой p/q: value = r² ⇔ p ≥ 0 и p, q — полные квадраты.

    Examples:
        >>> is_rational_square(4)
        True
        >>> is_rational_square(Fraction(9, 4))
        True
        >>> is_rational_square(5)
        False
        >>> is_rational_square(-1)
        False
    """
    r = to_rational(value)
    return _is_perfect_square(r.numerator) and _is_perfect_square(r.denominator)


def validate_natural(value: int, name: str) -> int:
    """
    Валидация натурального числа (включая 0).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    return value
