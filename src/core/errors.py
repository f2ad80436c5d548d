"""
Базовые исключения восстановления свободного члена.

Каждое исключение несёт `kind` — имя категории ошибки, которое оркестратор
использует для диагностики (MalformedInput, UnsupportedBase, InvalidDigit,
ZeroDenominator, NonIntegerResult).

Конкретные классы объявлены в модулях, которые их выбрасывают; здесь только
общий базовый класс и ошибка структуры входного документа.
"""

from typing import Final

# =============================================================================
# ERROR KINDS
# =============================================================================

KIND_MALFORMED_INPUT: Final[str] = "MalformedInput"
KIND_UNSUPPORTED_BASE: Final[str] = "UnsupportedBase"
KIND_INVALID_DIGIT: Final[str] = "InvalidDigit"
KIND_ZERO_DENOMINATOR: Final[str] = "ZeroDenominator"
KIND_NON_INTEGER_RESULT: Final[str] = "NonIntegerResult"


class ReconstructionError(Exception):
    """Базовый класс всех ошибок восстановления."""

    kind: str = "ReconstructionError"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MalformedInputError(ReconstructionError, ValueError):
    """
    Структурная ошибка входных данных.

    Пустой ввод, невалидный JSON, нарушение схемы документа, несовпадение
    количества точек с `n`, недопустимый `k`, пустой или противоречивый
    набор точек.
    """

    kind = KIND_MALFORMED_INPUT
