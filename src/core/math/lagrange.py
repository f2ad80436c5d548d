"""
Lagrange — Точное вычисление свободного члена f(0)

Для k точек (x_i, y_i) с попарно различными x существует единственный
многочлен f степени <= k-1, проходящий через все точки. Его значение в нуле:

    f(0) = Σ_i y_i · L_i(0)
    L_i(0) = Π_{j≠i} (-x_j) / Π_{j≠i} (x_i - x_j)

Все вычисления выполняются в Fraction над Python int. Итоговая сумма обязана
быть целым числом; иначе NonIntegerResultError (результат не округляется).

Вычисление чистое и детерминированное: слагаемые накапливаются в порядке
входной последовательности.
"""

from typing import Iterable, List, Sequence, Tuple

from src.core.errors import MalformedInputError
from src.core.math.fraction import Fraction

Point = Tuple[int, int]


def _distinct_points(points: Iterable[Point]) -> List[Point]:
    """
    Удаление повторов точек с сохранением порядка.

    Полностью совпадающая точка (x, y) отбрасывается; одинаковый x с
    разными y означает противоречивый набор.

    Raises:
        MalformedInputError: если для одного x заданы разные y
    """
    seen = {}
    distinct = []
    for x, y in points:
        if x in seen:
            if seen[x] != y:
                raise MalformedInputError(
                    f"Conflicting samples for x={x}: {seen[x]} != {y}"
                )
            continue
        seen[x] = y
        distinct.append((x, y))
    return distinct


def lagrange_basis_at_zero(xs: Sequence[int], i: int) -> Fraction:
    """
    Базисный коэффициент Лагранжа L_i(0).

    Args:
        xs: x-координаты (попарно различные)
        i: индекс базисного многочлена

    Returns:
        Π_{j≠i} (-x_j) / Π_{j≠i} (x_i - x_j) как несократимая дробь
    """
    xi = xs[i]
    num = 1
    den = 1
    for j, xj in enumerate(xs):
        if j == i:
            continue
        num *= -xj          # (0 - x_j)
        den *= xi - xj      # (x_i - x_j)
    return Fraction(num, den)


def constant_term_fraction(points: Iterable[Point]) -> Fraction:
    """
    Значение интерполяционного многочлена в нуле как точная дробь.

    Args:
        points: Последовательность (x, y); SamplePoint подходит напрямую

    Returns:
        f(0) в виде Fraction (может быть нецелым)

    Raises:
        MalformedInputError: пустой набор или противоречивые точки
    """
    pts = _distinct_points(points)
    if not pts:
        raise MalformedInputError("Need at least one point")

    xs = [x for x, _ in pts]
    total = Fraction(0, 1)
    for i, (_, yi) in enumerate(pts):
        # y_i · L_i(0)
        total = total.add(Fraction.from_int(yi).mul(lagrange_basis_at_zero(xs, i)))
    return total


def constant_term(points: Iterable[Point]) -> int:
    """
    Свободный член f(0) как точное целое.

    Для k=1 возвращает y_0 независимо от x_0 (пустые произведения равны 1).

    Raises:
        MalformedInputError: пустой набор или противоречивые точки
        NonIntegerResultError: если f(0) не является целым

    Examples:
        >>> constant_term([(1, 4), (2, 7), (3, 12)])
        3
        >>> constant_term([(5, 42)])
        42
    """
    return constant_term_fraction(points).to_int_exact()
