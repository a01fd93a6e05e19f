"""
Fibonacci Closed Form — формула Бине в точной арифметике ℚ[√5]

Вычисляет n-е число Фибоначчи через золотое сечение φ = (1 + √5)/2
без float и без линейной рекурсии:

    F(n) = (φ^n − (1 − φ)^n) / √5

Степени считаются повторным возведением в квадрат (O(log n) умножений),
результат проецируется из ℚ[√5] обратно в ℚ и далее в ℕ.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Иррациональная компонента (φ^n − (1 − φ)^n) / √5 равна нулю для всех n
2. Рациональная компонента — неотрицательное целое (знаменатель 1)
3. Нарушение п.1 или п.2 → FibonacciInvariantViolation (дефект арифметики,
   не восстанавливаемая ошибка)
"""

import logging
from typing import Final

from src.core.algebra.exponentiation import power
from src.core.algebra.quadratic_field import (
    IrrationalComponentError,
    QuadraticElement,
    QuadraticField,
)
from src.core.algebra.rational import validate_natural

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ ℚ[√5]
# =============================================================================

FIBONACCI_RADICAND: Final[int] = 5

Q_SQRT5: Final[QuadraticField] = QuadraticField(d=FIBONACCI_RADICAND)

# √5 = (0, 1)
SQRT5: Final[QuadraticElement] = Q_SQRT5.sqrt_d()

# φ = (1 + √5) / 2 = (1/2, 1/2)
PHI: Final[QuadraticElement] = Q_SQRT5.element("1/2", "1/2")

# 1 − φ = (1 − √5) / 2 = (1/2, −1/2)
PHI_CONJUGATE: Final[QuadraticElement] = Q_SQRT5.one() - PHI

# 1/√5 = (0, 1/5)
_INV_SQRT5: Final[QuadraticElement] = SQRT5.invert()


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FibonacciInvariantViolation(Exception):
    """
    Результат формулы Бине не является натуральным числом.

    Означает дефект в арифметике поля: математически значение всегда
    рационально и целое. Повторный вызов воспроизведёт ту же ошибку.
    """
    pass


# =============================================================================
# CLOSED FORM
# =============================================================================


def fibonacci_extended_value(n: int) -> QuadraticElement:
    """
    Значение (φ^n − (1 − φ)^n) / √5 в ℚ[√5].

    Args:
        n: Индекс (натуральное число)

    Returns:
        Элемент ℚ[√5] с нулевой иррациональной компонентой (F(n), 0)

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0
    """
    validate_natural(n, "n")
    difference = power(PHI, n) - power(PHI_CONJUGATE, n)
    return difference * _INV_SQRT5


def fibonacci(n: int) -> int:
    """
    n-е число Фибоначчи по формуле Бине.

    Args:
        n: Индекс (натуральное число)

    Returns:
        F(n) как int ≥ 0

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0
        FibonacciInvariantViolation: Если результат не натуральное число

    Examples:
        >>> fibonacci(0)
        0
        >>> fibonacci(10)
        55
        >>> fibonacci(20)
        6765
    """
    value = fibonacci_extended_value(n)

    try:
        r = Q_SQRT5.project(value)
    except IrrationalComponentError as e:
        logger.error("Closed form for n=%d left irrational component %s", n, value.irrational)
        raise FibonacciInvariantViolation(
            f"fibonacci({n}): extended value {value} is not rational"
        ) from e

    if r.denominator != 1 or r < 0:
        logger.error("Closed form for n=%d produced non-natural value %s", n, r)
        raise FibonacciInvariantViolation(
            f"fibonacci({n}): projected value {r} is not a natural number"
        )

    logger.debug("fibonacci(%d) = %d", n, r.numerator)
    return abs(r.numerator)


def fibonacci_sequence(count: int) -> list[int]:
    """
    Первые count чисел Фибоначчи: [F(0), F(1), ..., F(count − 1)].

    Raises:
        TypeError: Если count не int
        ValueError: Если count < 0
    """
    validate_natural(count, "count")
    return [fibonacci(n) for n in range(count)]
