"""
Core algebra modules

Точная арифметика: рациональные числа, квадратичные расширения ℚ[√d]
и быстрое возведение в степень.
"""

# Exact Rationals
from src.core.algebra.rational import (
    RATIONAL_ONE,
    RATIONAL_ZERO,
    FieldDivisionByZero,
    is_rational_square,
    rational_inverse,
    to_rational,
    validate_natural,
)

# Fast Exponentiation
from src.core.algebra.exponentiation import (
    ExponentiationStats,
    halve,
    power,
    power_linear,
    power_with_stats,
)

# Quadratic Field Extension
from src.core.algebra.quadratic_field import (
    FieldMismatchError,
    IrrationalComponentError,
    QuadraticElement,
    QuadraticField,
)

__all__ = [
    # Exact Rationals — Constants
    "RATIONAL_ONE",
    "RATIONAL_ZERO",
    # Exact Rationals — Exceptions
    "FieldDivisionByZero",
    # Exact Rationals — Functions
    "is_rational_square",
    "rational_inverse",
    "to_rational",
    "validate_natural",
    # Fast Exponentiation
    "ExponentiationStats",
    "halve",
    "power",
    "power_linear",
    "power_with_stats",
    # Quadratic Field Extension — Exceptions
    "FieldMismatchError",
    "IrrationalComponentError",
    # Quadratic Field Extension — Types
    "QuadraticElement",
    "QuadraticField",
]
