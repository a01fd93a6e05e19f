"""
Reference Oracle — наивная рекурсивная последовательность Фибоначчи

Экспоненциальное время. Используется только как эталон для сверки
с формулой Бине на малых n, никогда на горячем пути.
"""

from typing import Final

from src.core.algebra.rational import validate_natural

# Верхняя граница индекса для эталона (≈ 30 млн вызовов при n = 35)
REFERENCE_MAX_N: Final[int] = 35


def fibonacci_rec(n: int) -> int:
    """
    F(0) = 0, F(1) = 1, F(n + 2) = F(n + 1) + F(n).

    Raises:
        TypeError: Если n не int
        ValueError: Если n < 0 или n > REFERENCE_MAX_N
    """
    validate_natural(n, "n")
    if n > REFERENCE_MAX_N:
        raise ValueError(
            f"fibonacci_rec is an exponential-time oracle; n={n} exceeds "
            f"REFERENCE_MAX_N={REFERENCE_MAX_N}"
        )
    return _fibonacci_rec(n)


def _fibonacci_rec(n: int) -> int:
    if n < 2:
        return n
    return _fibonacci_rec(n - 1) + _fibonacci_rec(n - 2)
