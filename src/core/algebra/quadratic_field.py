"""
Quadratic Field Extension — точная арифметика в ℚ[√d]

Элемент поля — пара рациональных коэффициентов (a, b), представляющая
число a + b·√d для фиксированного радиканда d.

Радиканд d — конфигурационное значение QuadraticField, а не константа
модуля: одно и то же поле проверяется на аксиомах для разных d, а код
Фибоначчи фиксирует d = 5.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. d не является квадратом рационального числа (иначе ℚ[√d] не поле)
2. Элементы равны ⇔ равны обе компоненты (никакой нормализации пар)
3. Вложение r ↦ (r, 0) — гомоморфизм полей (сохраняет 0, 1, +, ×)
4. norm(x) = a² − d·b² ≠ 0 для любого ненулевого x (следствие п.1)
5. Обращение нуля → FieldDivisionByZero, проекция иррационального
   элемента → IrrationalComponentError; sentinel-значения не возвращаются

ФОРМУЛЫ:
    (a1 + b1√d) + (a2 + b2√d) = (a1 + a2) + (b1 + b2)√d
    (a1 + b1√d) · (a2 + b2√d) = (a1a2 + d·b1b2) + (a1b2 + a2b1)√d
    1 / (a + b√d)             = (a − b√d) / (a² − d·b²)
"""

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator

from src.core.algebra.exponentiation import power
from src.core.algebra.rational import (
    RATIONAL_ONE,
    RATIONAL_ZERO,
    FieldDivisionByZero,
    RationalLike,
    is_rational_square,
    rational_inverse,
    to_rational,
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class IrrationalComponentError(ArithmeticError):
    """
    Проекция в ℚ невозможна: иррациональная компонента элемента не равна нулю.
    """
    pass


class FieldMismatchError(ValueError):
    """Операция над элементами разных расширений (разные d)."""
    pass


# =============================================================================
# FIELD
# =============================================================================


class QuadraticField(BaseModel):
    """
    Расширение поля рациональных чисел квадратным корнем ℚ[√d].

    Immutable модель (frozen=True); радиканд валидируется при создании.

    Examples:
        >>> Q5 = QuadraticField(d=5)
        >>> phi = Q5.element(Fraction(1, 2), Fraction(1, 2))
        >>> phi * phi == phi + Q5.one()
        True
        >>> QuadraticField(d=4)  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        pydantic_core.ValidationError: ...
    """

    d: Fraction

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    @field_validator("d", mode="before")
    @classmethod
    def coerce_radicand(cls, v: Any) -> Fraction:
        try:
            return to_rational(v)
        except TypeError as e:
            raise ValueError(str(e)) from e

    @field_validator("d")
    @classmethod
    def validate_non_square(cls, v: Fraction) -> Fraction:
        """
        Радиканд не должен быть квадратом рационального числа.

        Иначе a² = d·b² имеет ненулевые решения и у таких элементов нет
        обратного.
        """
        if is_rational_square(v):
            raise ValueError(f"radicand d={v} is a rational square; Q[sqrt(d)] would not be a field")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    def element(self, rational: RationalLike, irrational: RationalLike = 0) -> "QuadraticElement":
        """Элемент rational + irrational·√d."""
        return QuadraticElement(self, to_rational(rational), to_rational(irrational))

    def embed(self, value: RationalLike) -> "QuadraticElement":
        """Вложение ℚ → ℚ[√d]: r ↦ (r, 0)."""
        return QuadraticElement(self, to_rational(value), RATIONAL_ZERO)

    def zero(self) -> "QuadraticElement":
        return QuadraticElement(self, RATIONAL_ZERO, RATIONAL_ZERO)

    def one(self) -> "QuadraticElement":
        return QuadraticElement(self, RATIONAL_ONE, RATIONAL_ZERO)

    def sqrt_d(self) -> "QuadraticElement":
        """Точный √d = (0, 1)."""
        return QuadraticElement(self, RATIONAL_ZERO, RATIONAL_ONE)

    # -------------------------------------------------------------------------
    # Операции поля
    # -------------------------------------------------------------------------

    def _check(self, *elements: "QuadraticElement") -> None:
        for x in elements:
            if x.field is not self and x.field != self:
                raise FieldMismatchError(
                    f"Element of Q[sqrt({x.field.d})] used in Q[sqrt({self.d})]"
                )

    def add(self, x: "QuadraticElement", y: "QuadraticElement") -> "QuadraticElement":
        self._check(x, y)
        return QuadraticElement(self, x.rational + y.rational, x.irrational + y.irrational)

    def negate(self, x: "QuadraticElement") -> "QuadraticElement":
        self._check(x)
        return QuadraticElement(self, -x.rational, -x.irrational)

    def subtract(self, x: "QuadraticElement", y: "QuadraticElement") -> "QuadraticElement":
        return self.add(x, self.negate(y))

    def multiply(self, x: "QuadraticElement", y: "QuadraticElement") -> "QuadraticElement":
        """
        Умножение в ℚ[√d].

        (a1 + b1√d)(a2 + b2√d) = (a1a2 + d·b1b2) + (a1b2 + a2b1)√d
        """
        self._check(x, y)
        a1, b1 = x.rational, x.irrational
        a2, b2 = y.rational, y.irrational
        return QuadraticElement(self, a1 * a2 + self.d * b1 * b2, a1 * b2 + a2 * b1)

    def conjugate(self, x: "QuadraticElement") -> "QuadraticElement":
        """Сопряжение a + b√d ↦ a − b√d."""
        self._check(x)
        return QuadraticElement(self, x.rational, -x.irrational)

    def norm(self, x: "QuadraticElement") -> Fraction:
        """Норма N(x) = x · conj(x) = a² − d·b² (рациональное число)."""
        self._check(x)
        return x.rational * x.rational - self.d * x.irrational * x.irrational

    def trace(self, x: "QuadraticElement") -> Fraction:
        """След Tr(x) = x + conj(x) = 2a."""
        self._check(x)
        return 2 * x.rational

    def invert(self, x: "QuadraticElement") -> "QuadraticElement":
        """
        Мультипликативное обратное через сопряжённое.

        1 / (a + b√d) = (a − b√d) / (a² − d·b²)

        Raises:
            FieldDivisionByZero: Для x = (0, 0)
        """
        self._check(x)
        if x.is_zero():
            raise FieldDivisionByZero(f"Zero of Q[sqrt({self.d})] has no multiplicative inverse")

        # norm != 0 для ненулевого x, т.к. d не квадрат
        inv_norm = rational_inverse(self.norm(x))
        return QuadraticElement(self, x.rational * inv_norm, -x.irrational * inv_norm)

    def divide(self, x: "QuadraticElement", y: "QuadraticElement") -> "QuadraticElement":
        return self.multiply(x, self.invert(y))

    # -------------------------------------------------------------------------
    # Проекция обратно в ℚ
    # -------------------------------------------------------------------------

    def try_project(self, x: "QuadraticElement") -> Optional[Fraction]:
        """Рациональная компонента, если иррациональная равна нулю, иначе None."""
        self._check(x)
        if x.irrational != 0:
            return None
        return x.rational

    def project(self, x: "QuadraticElement") -> Fraction:
        """
        Проекция элемента с нулевой иррациональной компонентой в ℚ.

        Raises:
            IrrationalComponentError: Если irrational != 0
        """
        value = self.try_project(x)
        if value is None:
            raise IrrationalComponentError(
                f"Cannot project {x} to Q: irrational component is {x.irrational}, expected 0"
            )
        return value


# =============================================================================
# ELEMENT
# =============================================================================

Operand = Union["QuadraticElement", int, Fraction]


@dataclass(frozen=True)
class QuadraticElement:
    """
    Элемент rational + irrational·√d поля field.

    Value type: неизменяемый, хешируемый, равенство покомпонентное.
    Операторы + − × / ** делегируют в QuadraticField; int и Fraction
    операнды вкладываются через embed.
    """

    field: QuadraticField
    rational: Fraction
    irrational: Fraction

    def _coerce(self, other: Any) -> Optional["QuadraticElement"]:
        if isinstance(other, QuadraticElement):
            return other
        if isinstance(other, (int, Fraction)) and not isinstance(other, bool):
            return self.field.embed(other)
        return None

    def __add__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.add(self, y)

    def __radd__(self, other: Operand) -> "QuadraticElement":
        return self.__add__(other)

    def __neg__(self) -> "QuadraticElement":
        return self.field.negate(self)

    def __sub__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.subtract(self, y)

    def __rsub__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.subtract(y, self)

    def __mul__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.multiply(self, y)

    def __rmul__(self, other: Operand) -> "QuadraticElement":
        return self.__mul__(other)

    def __truediv__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.divide(self, y)

    def __rtruediv__(self, other: Operand) -> "QuadraticElement":
        y = self._coerce(other)
        if y is None:
            return NotImplemented
        return self.field.divide(y, self)

    def __pow__(self, exponent: int) -> "QuadraticElement":
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            return power(self.invert(), -exponent)
        return power(self, exponent)

    def is_zero(self) -> bool:
        return self.rational == 0 and self.irrational == 0

    def is_rational(self) -> bool:
        return self.irrational == 0

    def conjugate(self) -> "QuadraticElement":
        return self.field.conjugate(self)

    def norm(self) -> Fraction:
        return self.field.norm(self)

    def trace(self) -> Fraction:
        return self.field.trace(self)

    def invert(self) -> "QuadraticElement":
        return self.field.invert(self)

    def project(self) -> Fraction:
        return self.field.project(self)

    def __str__(self) -> str:
        return f"{self.rational} + {self.irrational}*sqrt({self.field.d})"

    def __repr__(self) -> str:
        return f"QuadraticElement({self})"
