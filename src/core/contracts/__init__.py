"""
Contract Validation Module

Модуль для валидации JSON контрактов отчётов проверки эквивалентности.
"""

from .validators import (
    ContractValidator,
    EquivalenceReportValidator,
    SchemaLoader,
    validate_equivalence_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "EquivalenceReportValidator",
    # Functions
    "validate_equivalence_report",
]
