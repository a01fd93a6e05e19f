"""
Fast Exponentiation — возведение в натуральную степень повторным возведением в квадрат

Вычисляет x^n для элемента поля x и натурального n за O(log n) умножений
в поле вместо O(n) у линейного алгоритма.

Алгоритм (halving recurrence):
    power(x, 0)        = one
    n = 2·n' + parity  (halve)
    power(x, n)        = p · p        если n чётно,  p = power(x, n')
    power(x, n)        = p · p · x    если n нечётно

Рекурсия структурная: n' < n для любого n > 0, база n = 0.
Глубина рекурсии = bit_length(n).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. power(x, n) == power_linear(x, n) для любых x и n (покомпонентно)
2. Число умножений power ≤ 2 · bit_length(n)

Модуль duck-typed: x должен иметь x.field.one() и оператор *.
"""

from typing import Any, NamedTuple

from src.core.algebra.rational import validate_natural


class ExponentiationStats(NamedTuple):
    """Результат возведения в степень с числом выполненных умножений в поле."""

    result: Any
    multiplications: int


# =============================================================================
# HALVING
# =============================================================================


def halve(n: int) -> tuple[int, bool]:
    """
    Разложение n = n' + n' (+ 1).

    Args:
        n: Натуральное число

    Returns:
        (n', is_odd): n = 2·n' + int(is_odd)

    Examples:
        >>> halve(10)
        (5, False)
        >>> halve(7)
        (3, True)
        >>> halve(1)
        (0, True)
    """
    validate_natural(n, "n")
    return n // 2, n % 2 == 1


# =============================================================================
# POWER
# =============================================================================


def _power_counted(x: Any, n: int) -> ExponentiationStats:
    if n == 0:
        return ExponentiationStats(x.field.one(), 0)

    half, is_odd = halve(n)
    # half < n: рекурсия завершается
    p, count = _power_counted(x, half)
    result = p * p
    count += 1

    if is_odd:
        result = result * x
        count += 1

    return ExponentiationStats(result, count)


def power_with_stats(x: Any, n: int) -> ExponentiationStats:
    """
    Возведение в степень повторным возведением в квадрат с подсчётом умножений.

    Args:
        x: Элемент поля
        n: Натуральный показатель

    Returns:
        ExponentiationStats(result=x^n, multiplications=число умножений)

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0
    """
    validate_natural(n, "exponent")
    return _power_counted(x, n)


def power(x: Any, n: int) -> Any:
    """
    x^n за O(log n) умножений в поле.

    Examples:
        >>> Q2 = QuadraticField(d=2)  # doctest: +SKIP
        >>> power(Q2.embed(2), 10) == Q2.embed(1024)  # doctest: +SKIP
        True
    """
    return power_with_stats(x, n).result


def power_linear(x: Any, n: int) -> Any:
    """
    Эталонное линейное возведение в степень: x · x · … · x (n множителей).

    power_linear(x, 0) = one, power_linear(x, k + 1) = x · power_linear(x, k).
    Используется как спецификация, против которой проверяется power.

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0
    """
    validate_natural(n, "exponent")

    result = x.field.one()
    remaining = n
    while remaining > 0:
        result = x * result
        remaining -= 1

    return result
