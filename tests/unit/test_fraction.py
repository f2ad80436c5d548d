"""
Тесты для модуля Fraction

Проверяет:
1. Нормализацию знака и сокращение при конструировании
2. Отказ при нулевом знаменателе
3. Сложение, умножение, деление, отрицание
4. Алгебраические законы (коммутативность, ассоциативность, div/mul)
5. Точное извлечение целого
6. Операторную форму и неизменяемость
"""

import dataclasses
import math
import random
from fractions import Fraction as ReferenceFraction

import pytest

from src.core.errors import ReconstructionError
from src.core.math.fraction import Fraction, NonIntegerResultError, ZeroDenominatorError


@pytest.fixture
def rng() -> random.Random:
    """Детерминированный RNG для воспроизводимых тестов"""
    return random.Random(42)


def _random_fraction(rng: random.Random, nonzero: bool = False) -> Fraction:
    while True:
        num = rng.randint(-10**30, 10**30)
        den = rng.choice([-1, 1]) * rng.randint(1, 10**20)
        if num != 0 or not nonzero:
            return Fraction(num, den)


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


class TestConstruction:
    """Тесты нормализации при создании дроби"""

    def test_reduces_to_lowest_terms(self) -> None:
        """6/4 сокращается до 3/2"""
        f = Fraction(6, 4)
        assert f.numerator == 3
        assert f.denominator == 2

    def test_negative_denominator_moves_sign(self) -> None:
        """Знак знаменателя переносится в числитель"""
        f = Fraction(6, -4)
        assert f.numerator == -3
        assert f.denominator == 2

    def test_both_negative_is_positive(self) -> None:
        f = Fraction(-5, -10)
        assert (f.numerator, f.denominator) == (1, 2)

    def test_zero_numerator_normalized(self) -> None:
        """0/n нормализуется в 0/1"""
        f = Fraction(0, -17)
        assert (f.numerator, f.denominator) == (0, 1)

    def test_default_denominator(self) -> None:
        assert Fraction(7) == Fraction(7, 1)
        assert Fraction.from_int(-9) == Fraction(-9, 1)

    def test_zero_denominator_raises(self) -> None:
        with pytest.raises(ZeroDenominatorError, match="Zero denominator"):
            Fraction(1, 0)

    def test_zero_over_zero_raises(self) -> None:
        with pytest.raises(ZeroDenominatorError):
            Fraction(0, 0)

    def test_zero_denominator_error_hierarchy(self) -> None:
        """ZeroDenominatorError — ReconstructionError и ZeroDivisionError"""
        with pytest.raises(ZeroDivisionError) as exc_info:
            Fraction(3, 0)
        assert isinstance(exc_info.value, ReconstructionError)
        assert exc_info.value.kind == "ZeroDenominator"

    def test_invariants_over_grid(self) -> None:
        """denominator > 0, gcd == 1, значение совпадает с исходным"""
        for num in range(-12, 13):
            for den in range(-7, 8):
                if den == 0:
                    continue
                f = Fraction(num, den)
                assert f.denominator > 0
                assert math.gcd(abs(f.numerator), f.denominator) == 1
                assert ReferenceFraction(f.numerator, f.denominator) == ReferenceFraction(num, den)

    def test_large_values_exact(self) -> None:
        """Значения за пределами 64 бит сокращаются точно"""
        f = Fraction(10**40, 10**20)
        assert f == Fraction(10**20)
        g = Fraction(2**200 + 2, 2**130)
        assert g.denominator == 2**129
        assert g.numerator == 2**199 + 1


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


class TestArithmetic:
    """Конкретные арифметические примеры"""

    def test_add(self) -> None:
        assert Fraction(1, 2).add(Fraction(1, 3)) == Fraction(5, 6)

    def test_add_to_integer(self) -> None:
        assert Fraction(1, 2).add(Fraction(1, 2)) == Fraction(1)

    def test_sub(self) -> None:
        assert Fraction(1, 2).sub(Fraction(1, 3)) == Fraction(1, 6)

    def test_mul(self) -> None:
        assert Fraction(2, 3).mul(Fraction(3, 4)) == Fraction(1, 2)

    def test_mul_signs(self) -> None:
        assert Fraction(-2, 3).mul(Fraction(3, -4)) == Fraction(1, 2)

    def test_div(self) -> None:
        assert Fraction(1, 2).div(Fraction(1, 4)) == Fraction(2)

    def test_div_by_negative(self) -> None:
        f = Fraction(1, 2).div(Fraction(-3, 5))
        assert (f.numerator, f.denominator) == (-5, 6)

    def test_div_by_zero_raises(self) -> None:
        """Деление на дробь с нулевым числителем → ZeroDenominatorError"""
        with pytest.raises(ZeroDenominatorError):
            Fraction(1, 2).div(Fraction(0, 5))

    def test_neg(self) -> None:
        assert Fraction(3, 7).neg() == Fraction(-3, 7)
        assert Fraction(0).neg() == Fraction(0)

    def test_operations_return_new_instances(self) -> None:
        a = Fraction(1, 2)
        b = Fraction(1, 3)
        a.add(b)
        a.mul(b)
        a.neg()
        assert a == Fraction(1, 2)
        assert b == Fraction(1, 3)


class TestAlgebraicLaws:
    """Законы арифметики на случайных дробях с большими компонентами"""

    def test_commutativity_add(self, rng: random.Random) -> None:
        for _ in range(30):
            a, b = _random_fraction(rng), _random_fraction(rng)
            assert a.add(b) == b.add(a)

    def test_commutativity_mul(self, rng: random.Random) -> None:
        for _ in range(30):
            a, b = _random_fraction(rng), _random_fraction(rng)
            assert a.mul(b) == b.mul(a)

    def test_associativity_add(self, rng: random.Random) -> None:
        for _ in range(30):
            a, b, c = [_random_fraction(rng) for _ in range(3)]
            assert a.add(b).add(c) == a.add(b.add(c))

    def test_associativity_mul(self, rng: random.Random) -> None:
        for _ in range(30):
            a, b, c = [_random_fraction(rng) for _ in range(3)]
            assert a.mul(b).mul(c) == a.mul(b.mul(c))

    def test_div_then_mul_roundtrip(self, rng: random.Random) -> None:
        """a.div(b).mul(b) == a для любого ненулевого b"""
        for _ in range(30):
            a = _random_fraction(rng)
            b = _random_fraction(rng, nonzero=True)
            assert a.div(b).mul(b) == a

    def test_additive_inverse(self, rng: random.Random) -> None:
        for _ in range(30):
            a = _random_fraction(rng)
            assert a.add(a.neg()) == Fraction(0)

    def test_matches_reference_rationals(self, rng: random.Random) -> None:
        """Результаты совпадают с fractions.Fraction стандартной библиотеки"""
        for _ in range(30):
            a, b = _random_fraction(rng), _random_fraction(rng, nonzero=True)
            ra = ReferenceFraction(a.numerator, a.denominator)
            rb = ReferenceFraction(b.numerator, b.denominator)
            for ours, ref in [(a.add(b), ra + rb), (a.mul(b), ra * rb), (a.div(b), ra / rb)]:
                assert (ours.numerator, ours.denominator) == (ref.numerator, ref.denominator)


# =============================================================================
# ИЗВЛЕЧЕНИЕ ЦЕЛОГО
# =============================================================================


class TestToIntExact:
    """Тесты точного извлечения целого"""

    def test_integer_fraction(self) -> None:
        assert Fraction(10, 5).to_int_exact() == 2
        assert Fraction(-10, 5).to_int_exact() == -2
        assert Fraction(0, 3).to_int_exact() == 0

    def test_large_integer(self) -> None:
        assert Fraction(3 * 10**50, 3).to_int_exact() == 10**50

    def test_non_integer_raises(self) -> None:
        """7/2 не округляется и не усекается"""
        with pytest.raises(NonIntegerResultError) as exc_info:
            Fraction(7, 2).to_int_exact()
        assert exc_info.value.value == Fraction(7, 2)
        assert exc_info.value.kind == "NonIntegerResult"
        assert "7/2" in str(exc_info.value)

    def test_is_integer(self) -> None:
        assert Fraction(4, 2).is_integer()
        assert not Fraction(1, 3).is_integer()


# =============================================================================
# ОПЕРАТОРЫ И НЕИЗМЕНЯЕМОСТЬ
# =============================================================================


class TestOperators:
    """Операторная форма поверх add/sub/mul/div/neg"""

    def test_fraction_operands(self) -> None:
        a, b = Fraction(1, 2), Fraction(1, 3)
        assert a + b == Fraction(5, 6)
        assert a - b == Fraction(1, 6)
        assert a * b == Fraction(1, 6)
        assert a / b == Fraction(3, 2)
        assert -a == Fraction(-1, 2)

    def test_int_operands(self) -> None:
        assert Fraction(1, 2) + 1 == Fraction(3, 2)
        assert 1 + Fraction(1, 2) == Fraction(3, 2)
        assert 1 - Fraction(1, 2) == Fraction(1, 2)
        assert 3 * Fraction(1, 3) == Fraction(1)
        assert 2 / Fraction(1, 3) == Fraction(6)

    def test_float_operand_rejected(self) -> None:
        """float никогда не смешивается с точной арифметикой"""
        with pytest.raises(TypeError):
            Fraction(1, 2) + 0.5

    def test_division_by_zero_operator(self) -> None:
        with pytest.raises(ZeroDenominatorError):
            Fraction(1, 2) / 0

    def test_str(self) -> None:
        assert str(Fraction(4, 2)) == "2"
        assert str(Fraction(-3, 6)) == "-1/2"

    def test_frozen(self) -> None:
        f = Fraction(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            f.numerator = 5  # type: ignore[misc]

    def test_hashable_and_equal_after_reduction(self) -> None:
        assert hash(Fraction(2, 4)) == hash(Fraction(1, 2))
        assert len({Fraction(2, 4), Fraction(1, 2), Fraction(-1, -2)}) == 1
