"""
Fibonacci via closed form over ℚ[√5]

Формула Бине в точной арифметике, эталонная рекурсия и сверка двух путей.
"""

from src.core.fibonacci.closed_form import (
    FIBONACCI_RADICAND,
    PHI,
    PHI_CONJUGATE,
    Q_SQRT5,
    SQRT5,
    FibonacciInvariantViolation,
    fibonacci,
    fibonacci_extended_value,
    fibonacci_sequence,
)
from src.core.fibonacci.reference import REFERENCE_MAX_N, fibonacci_rec
from src.core.fibonacci.verification import (
    CheckKind,
    EquivalenceMismatch,
    EquivalenceReport,
    VerificationConfig,
    default_power_bases,
    run_all_checks,
    verify_closed_form,
    verify_irrational_vanishing,
    verify_power_equivalence,
)

__all__ = [
    # Closed form — Constants
    "FIBONACCI_RADICAND",
    "PHI",
    "PHI_CONJUGATE",
    "Q_SQRT5",
    "SQRT5",
    # Closed form — Exceptions
    "FibonacciInvariantViolation",
    # Closed form — Functions
    "fibonacci",
    "fibonacci_extended_value",
    "fibonacci_sequence",
    # Reference oracle
    "REFERENCE_MAX_N",
    "fibonacci_rec",
    # Verification
    "CheckKind",
    "EquivalenceMismatch",
    "EquivalenceReport",
    "VerificationConfig",
    "default_power_bases",
    "run_all_checks",
    "verify_closed_form",
    "verify_irrational_vanishing",
    "verify_power_equivalence",
]
