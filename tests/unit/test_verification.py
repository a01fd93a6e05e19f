"""
Тесты для Equivalence Verification

Проверяет:
1. Все проверки проходят на корректной арифметике
2. Расхождения собираются в отчёт и логируются
3. Отчёты неизменяемы
4. Валидация границ диапазонов
"""

import logging

import pytest
from pydantic import ValidationError

from src.core.algebra.quadratic_field import QuadraticField
from src.core.fibonacci import verification
from src.core.fibonacci.closed_form import PHI, Q_SQRT5
from src.core.fibonacci.reference import REFERENCE_MAX_N
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


class TestVerificationConfig:
    """Конфигурация по умолчанию"""

    def test_defaults(self) -> None:
        config = VerificationConfig()
        assert config.fibonacci_max_n == 25
        assert config.exponent_max_n == 30
        assert config.vanishing_max_n == 30

    def test_frozen(self) -> None:
        config = VerificationConfig()
        with pytest.raises(AttributeError):
            config.fibonacci_max_n = 10


class TestChecksPass:
    """Корректная арифметика проходит все проверки"""

    def test_closed_form(self) -> None:
        report = verify_closed_form(25)
        assert report.kind == CheckKind.CLOSED_FORM_VS_RECURSIVE
        assert report.passed
        assert report.checked == 26
        assert report.base is None

    def test_power_equivalence(self) -> None:
        report = verify_power_equivalence(PHI, 30)
        assert report.kind == CheckKind.SQUARING_VS_LINEAR
        assert report.passed
        assert report.checked == 31
        assert report.base == str(PHI)

    def test_power_equivalence_other_field(self) -> None:
        Q7 = QuadraticField(d=7)
        assert verify_power_equivalence(Q7.element(2, -1), 20).passed

    def test_irrational_vanishing(self) -> None:
        report = verify_irrational_vanishing(30)
        assert report.kind == CheckKind.IRRATIONAL_VANISHING
        assert report.passed

    def test_run_all(self, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="src.core.fibonacci.verification"):
            reports = run_all_checks()
        assert len(reports) == 2 + len(default_power_bases())
        assert all(r.passed for r in reports)
        assert "equivalence checks passed" in caplog.text

    def test_run_all_custom(self) -> None:
        config = VerificationConfig(fibonacci_max_n=5, exponent_max_n=5, vanishing_max_n=5)
        reports = run_all_checks(config, bases=[Q_SQRT5.embed(3)])
        assert [r.kind for r in reports] == [
            CheckKind.CLOSED_FORM_VS_RECURSIVE,
            CheckKind.SQUARING_VS_LINEAR,
            CheckKind.IRRATIONAL_VANISHING,
        ]
        assert all(r.max_n == 5 for r in reports)


class TestMismatches:
    """Расхождения собираются, а не бросаются"""

    def test_closed_form_mismatch(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(verification, "fibonacci", lambda n: 0)
        with caplog.at_level(logging.WARNING, logger="src.core.fibonacci.verification"):
            report = verify_closed_form(5)
        assert not report.passed
        # F(0) = 0 совпадает, F(1..5) нет
        assert [m.n for m in report.mismatches] == [1, 2, 3, 4, 5]
        assert report.mismatches[0] == EquivalenceMismatch(n=1, expected="1", actual="0")
        assert "closed_form_vs_recursive mismatch at n=1" in caplog.text

    def test_power_mismatch(self, monkeypatch) -> None:
        monkeypatch.setattr(verification, "power", lambda x, n: x.field.zero())
        report = verify_power_equivalence(Q_SQRT5.embed(2), 3)
        assert [m.n for m in report.mismatches] == [0, 1, 2, 3]

    def test_vanishing_mismatch(self, monkeypatch) -> None:
        monkeypatch.setattr(
            verification, "fibonacci_extended_value", lambda n: Q_SQRT5.element(n, 1)
        )
        report = verify_irrational_vanishing(2)
        assert len(report.mismatches) == 3
        assert report.mismatches[0].actual == "1"

    def test_run_all_reports_failures(self, monkeypatch, caplog) -> None:
        monkeypatch.setattr(verification, "fibonacci", lambda n: -1)
        with caplog.at_level(logging.WARNING, logger="src.core.fibonacci.verification"):
            reports = run_all_checks(VerificationConfig(3, 3, 3))
        assert sum(not r.passed for r in reports) == 1
        assert "1 of" in caplog.text


class TestValidation:
    """Границы диапазонов"""

    def test_negative_max_n(self) -> None:
        with pytest.raises(ValueError):
            verify_closed_form(-1)
        with pytest.raises(ValueError):
            verify_power_equivalence(PHI, -1)
        with pytest.raises(ValueError):
            verify_irrational_vanishing(-1)

    def test_oracle_bound(self) -> None:
        with pytest.raises(ValueError, match="REFERENCE_MAX_N"):
            verify_closed_form(REFERENCE_MAX_N + 1)


class TestReportModel:
    """EquivalenceReport / EquivalenceMismatch"""

    def test_frozen(self) -> None:
        report = verify_irrational_vanishing(1)
        with pytest.raises(ValidationError):
            report.max_n = 5

    def test_negative_n_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EquivalenceMismatch(n=-1, expected="0", actual="0")

    def test_invalid_kind(self) -> None:
        with pytest.raises(ValidationError):
            EquivalenceReport(kind="unknown", max_n=1, checked=2)

    def test_passed_property(self) -> None:
        ok = EquivalenceReport(kind=CheckKind.IRRATIONAL_VANISHING, max_n=0, checked=1)
        assert ok.passed
        bad = EquivalenceReport(
            kind="irrational_vanishing",
            max_n=0,
            checked=1,
            mismatches=[EquivalenceMismatch(n=0, expected="0", actual="1")],
        )
        assert not bad.passed

    def test_json_dump(self) -> None:
        data = verify_closed_form(3).model_dump(mode="json")
        assert data == {
            "kind": "closed_form_vs_recursive",
            "max_n": 3,
            "checked": 4,
            "base": None,
            "mismatches": [],
        }
