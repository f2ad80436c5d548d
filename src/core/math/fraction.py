"""
Fraction — Точная рациональная арифметика

Неизменяемая дробь над целыми произвольной точности (Python int).
Основа Lagrange-вычислителя: все промежуточные значения точные, без float.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator > 0 (знак всегда в числителе)
2. gcd(|numerator|, denominator) == 1 (всегда несократимая)
3. Нулевой знаменатель → ZeroDenominatorError при конструировании
4. Каждая операция возвращает новый экземпляр, мутаций нет

ФОРМУЛЫ:
    a/b + c/d = (a·d + c·b) / (b·d)
    a/b · c/d = (a·c) / (b·d)
    a/b ÷ c/d = (a·d) / (b·c)
    -(a/b)    = (-a) / b
"""

import math
from dataclasses import dataclass
from typing import Union

from src.core.errors import (
    KIND_NON_INTEGER_RESULT,
    KIND_ZERO_DENOMINATOR,
    ReconstructionError,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class ZeroDenominatorError(ReconstructionError, ZeroDivisionError):
    """Попытка построить дробь (или разделить) с нулевым знаменателем."""

    kind = KIND_ZERO_DENOMINATOR


class NonIntegerResultError(ReconstructionError, ArithmeticError):
    """
    Дробь не сводится к целому числу.

    Означает, что набор точек не согласован с многочленом с целым
    свободным членом (или выбран неверный k). Результат никогда не
    округляется и не усекается.
    """

    kind = KIND_NON_INTEGER_RESULT

    def __init__(self, value: "Fraction") -> None:
        self.value = value
        super().__init__(f"Result is not an integer: {value}")


# =============================================================================
# FRACTION
# =============================================================================


@dataclass(frozen=True)
class Fraction:
    """
    Несократимая дробь numerator/denominator.

    Конструктор нормализует знак и сокращает на gcd, поэтому сравнение
    через dataclass __eq__ совпадает с равенством рациональных чисел.

    Examples:
        >>> Fraction(6, -4)
        Fraction(numerator=-3, denominator=2)
        >>> Fraction(0, 5)
        Fraction(numerator=0, denominator=1)
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        num, den = self.numerator, self.denominator
        if den == 0:
            raise ZeroDenominatorError("Zero denominator")
        if den < 0:
            num, den = -num, -den
        # gcd(0, den) == den, поэтому ноль нормализуется в 0/1
        g = math.gcd(num, den)
        object.__setattr__(self, "numerator", num // g)
        object.__setattr__(self, "denominator", den // g)

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        """Дробь value/1."""
        return cls(value, 1)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Fraction") -> "Fraction":
        """(a/b) + (c/d) = (a·d + c·b) / (b·d)."""
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def sub(self, other: "Fraction") -> "Fraction":
        """(a/b) - (c/d) = (a/b) + (-(c/d))."""
        return self.add(other.neg())

    def mul(self, other: "Fraction") -> "Fraction":
        """(a/b) · (c/d) = (a·c) / (b·d)."""
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def div(self, other: "Fraction") -> "Fraction":
        """
        (a/b) ÷ (c/d) = (a·d) / (b·c).

        Raises:
            ZeroDenominatorError: если c == 0 (делитель равен нулю)
        """
        return Fraction(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
        )

    def neg(self) -> "Fraction":
        """-(a/b) = (-a)/b."""
        return Fraction(-self.numerator, self.denominator)

    # -------------------------------------------------------------------------
    # Извлечение результата
    # -------------------------------------------------------------------------

    def is_integer(self) -> bool:
        return self.denominator == 1

    def to_int_exact(self) -> int:
        """
        Точное целое значение дроби.

        Returns:
            numerator, если denominator == 1

        Raises:
            NonIntegerResultError: если дробь не целая
        """
        if self.denominator != 1:
            raise NonIntegerResultError(self)
        return self.numerator

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.sub(other)

    def __rsub__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.sub(self)

    def __mul__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return self.div(other)

    def __rtruediv__(self, other: Union["Fraction", int]) -> "Fraction":
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other.div(self)

    def __neg__(self) -> "Fraction":
        return self.neg()

    def __str__(self) -> str:
        if self.denominator == 1:
            return str(self.numerator)
        return f"{self.numerator}/{self.denominator}"


def _coerce(value: object):
    """Приведение операнда к Fraction (Fraction или int), иначе None."""
    if isinstance(value, Fraction):
        return value
    # bool — подкласс int, но как операнд дроби не допускается
    if isinstance(value, int) and not isinstance(value, bool):
        return Fraction.from_int(value)
    return None
