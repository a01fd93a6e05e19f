"""
Equivalence Verification — сверка двух путей вычисления

Проверки корректности, выраженные как исполняемые проверки на ограниченных
диапазонах n:

1. closed_form_vs_recursive: fibonacci(n) == fibonacci_rec(n), n ∈ [0, max_n]
2. squaring_vs_linear:      power(x, n) == power_linear(x, n), n ∈ [0, max_n]
3. irrational_vanishing:    irrational((φ^n − (1 − φ)^n) / √5) == 0, n ∈ [0, max_n]

Расхождения собираются в EquivalenceReport (и логируются как warning),
а не бросаются. Ошибки арифметики (FieldDivisionByZero,
FibonacciInvariantViolation) пробрасываются вызывающему.

Отчёт сериализуется через model_dump(mode="json") и соответствует
контракту contracts/schema/equivalence_report.json.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Optional

from pydantic import BaseModel, Field

from src.core.algebra.exponentiation import power, power_linear
from src.core.algebra.quadratic_field import QuadraticElement
from src.core.algebra.rational import validate_natural
from src.core.fibonacci.closed_form import (
    PHI,
    PHI_CONJUGATE,
    Q_SQRT5,
    SQRT5,
    fibonacci,
    fibonacci_extended_value,
)
from src.core.fibonacci.reference import REFERENCE_MAX_N, fibonacci_rec

logger = logging.getLogger(__name__)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

FIBONACCI_MAX_N_DEFAULT: Final[int] = 25
EXPONENT_MAX_N_DEFAULT: Final[int] = 30
VANISHING_MAX_N_DEFAULT: Final[int] = 30


@dataclass(frozen=True)
class VerificationConfig:
    """Границы диапазонов n для каждой проверки."""

    fibonacci_max_n: int = FIBONACCI_MAX_N_DEFAULT
    exponent_max_n: int = EXPONENT_MAX_N_DEFAULT
    vanishing_max_n: int = VANISHING_MAX_N_DEFAULT


class CheckKind(str, Enum):
    """Вид проверки эквивалентности"""

    CLOSED_FORM_VS_RECURSIVE = "closed_form_vs_recursive"
    SQUARING_VS_LINEAR = "squaring_vs_linear"
    IRRATIONAL_VANISHING = "irrational_vanishing"


# =============================================================================
# REPORT MODELS
# =============================================================================


class EquivalenceMismatch(BaseModel):
    """Одно расхождение: значение n, ожидаемый и фактический результат."""

    n: int = Field(..., ge=0, description="Индекс/показатель")
    expected: str = Field(..., description="Ожидаемое значение (эталон)")
    actual: str = Field(..., description="Фактическое значение")

    model_config = {"frozen": True}


class EquivalenceReport(BaseModel):
    """
    Отчёт одной проверки эквивалентности.

    Immutable модель (frozen=True).
    """

    kind: CheckKind = Field(..., description="Вид проверки")
    max_n: int = Field(..., ge=0, description="Проверенный диапазон [0, max_n]")
    checked: int = Field(..., ge=0, description="Число проверенных значений n")
    base: Optional[str] = Field(None, description="Основание степени (для squaring_vs_linear)")
    mismatches: list[EquivalenceMismatch] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def passed(self) -> bool:
        return not self.mismatches


def _report(
    kind: CheckKind,
    max_n: int,
    mismatches: list[EquivalenceMismatch],
    base: Optional[str] = None,
) -> EquivalenceReport:
    for m in mismatches:
        logger.warning(
            "%s mismatch at n=%d: expected %s, got %s", kind.value, m.n, m.expected, m.actual
        )
    return EquivalenceReport(
        kind=kind, max_n=max_n, checked=max_n + 1, base=base, mismatches=mismatches
    )


# =============================================================================
# CHECKS
# =============================================================================


def verify_closed_form(max_n: int = FIBONACCI_MAX_N_DEFAULT) -> EquivalenceReport:
    """
    fibonacci(n) == fibonacci_rec(n) для n ∈ [0, max_n].

    Raises:
        ValueError: Если max_n < 0 или max_n > REFERENCE_MAX_N
    """
    validate_natural(max_n, "max_n")
    if max_n > REFERENCE_MAX_N:
        raise ValueError(f"max_n={max_n} exceeds REFERENCE_MAX_N={REFERENCE_MAX_N}")

    mismatches = []
    for n in range(max_n + 1):
        expected = fibonacci_rec(n)
        actual = fibonacci(n)
        if actual != expected:
            mismatches.append(EquivalenceMismatch(n=n, expected=str(expected), actual=str(actual)))

    return _report(CheckKind.CLOSED_FORM_VS_RECURSIVE, max_n, mismatches)


def verify_power_equivalence(
    base: QuadraticElement,
    max_n: int = EXPONENT_MAX_N_DEFAULT,
) -> EquivalenceReport:
    """power(base, n) == power_linear(base, n) для n ∈ [0, max_n]."""
    validate_natural(max_n, "max_n")

    mismatches = []
    for n in range(max_n + 1):
        expected = power_linear(base, n)
        actual = power(base, n)
        if actual != expected:
            mismatches.append(EquivalenceMismatch(n=n, expected=str(expected), actual=str(actual)))

    return _report(CheckKind.SQUARING_VS_LINEAR, max_n, mismatches, base=str(base))


def verify_irrational_vanishing(max_n: int = VANISHING_MAX_N_DEFAULT) -> EquivalenceReport:
    """Иррациональная компонента (φ^n − (1 − φ)^n) / √5 равна нулю для n ∈ [0, max_n]."""
    validate_natural(max_n, "max_n")

    mismatches = []
    for n in range(max_n + 1):
        value = fibonacci_extended_value(n)
        if not value.is_rational():
            mismatches.append(EquivalenceMismatch(n=n, expected="0", actual=str(value.irrational)))

    return _report(CheckKind.IRRATIONAL_VANISHING, max_n, mismatches)


def default_power_bases() -> list[QuadraticElement]:
    """Основания по умолчанию: φ, 1 − φ, √5, 2."""
    return [PHI, PHI_CONJUGATE, SQRT5, Q_SQRT5.embed(2)]


def run_all_checks(
    config: Optional[VerificationConfig] = None,
    bases: Optional[Iterable[QuadraticElement]] = None,
) -> list[EquivalenceReport]:
    """
    Все проверки эквивалентности.

    Args:
        config: Границы диапазонов (default: VerificationConfig())
        bases: Основания для squaring_vs_linear (default: default_power_bases())

    Returns:
        Отчёты: closed_form_vs_recursive, squaring_vs_linear по каждому
        основанию, irrational_vanishing
    """
    config = config or VerificationConfig()
    bases = default_power_bases() if bases is None else list(bases)

    reports = [verify_closed_form(config.fibonacci_max_n)]
    reports.extend(verify_power_equivalence(b, config.exponent_max_n) for b in bases)
    reports.append(verify_irrational_vanishing(config.vanishing_max_n))

    failed = [r for r in reports if not r.passed]
    if failed:
        logger.warning("%d of %d equivalence checks failed", len(failed), len(reports))
    else:
        logger.info("All %d equivalence checks passed", len(reports))

    return reports
