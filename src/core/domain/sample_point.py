"""
SamplePoint — Точка выборки многочлена и выбор набора точек

SamplePoint — неизменяемая пара (x, y) целых произвольной точности.
NamedTuple, поэтому точка распаковывается как `x, y = point` и напрямую
передаётся в Lagrange-вычислитель.

Набор точек для интерполяции: все декодированные точки сортируются по
возрастанию x, берутся первые k.
"""

from typing import Iterable, NamedTuple, Tuple

from src.core.errors import MalformedInputError


class SamplePoint(NamedTuple):
    """Точка (x, y) на неизвестном многочлене."""

    x: int
    y: int


def select_point_set(points: Iterable[SamplePoint], k: int) -> Tuple[SamplePoint, ...]:
    """
    Детерминированный выбор k точек для интерполяции.

    Args:
        points: Все доступные точки (порядок не важен)
        k: Количество точек (1 <= k <= len(points))

    Returns:
        Первые k точек по возрастанию x

    Raises:
        MalformedInputError: если k вне [1, len(points)]
    """
    ordered = sorted(points, key=lambda p: p.x)
    if k < 1 or k > len(ordered):
        raise MalformedInputError(f"Invalid k={k} for n={len(ordered)}")
    return tuple(ordered[:k])
