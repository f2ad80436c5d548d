"""
Recovery Pipeline — восстановление свободного члена из входного документа

Порядок шагов:
1. Разбор текста как JSON (пустой ввод / невалидный JSON → MalformedInput)
2. Проверка контракта share_document (jsonschema) и построение ShareDocument
3. Декодирование всех точек (UnsupportedBase / InvalidDigit)
4. Проверка количества точек против n
5. Выбор k точек с наименьшими x (недопустимый k → MalformedInput)
6. Lagrange в нуле (ZeroDenominator / NonIntegerResult)

recover()/recover_text() выбрасывают ReconstructionError; evaluate()
возвращает ReconstructionOutcome и ошибок восстановления не выбрасывает.
"""

import json
import sys
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.core.contracts import ShareDocumentValidator
from src.core.domain import SamplePoint, ShareDocument, select_point_set
from src.core.errors import MalformedInputError, ReconstructionError
from src.core.math import constant_term
from src.recovery.observer import RecoveryObserver, StructlogRecoveryObserver


def _lift_int_str_limit() -> None:
    """Снятие лимита преобразования int <-> str (Python 3.11+, 3.10.7+).

    Координаты, значения и результат не ограничены по разрядности; без
    этого json.loads, int(x) и str(value) выбрасывают ValueError на
    числах длиннее 4300 цифр.
    """
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


@dataclass(frozen=True)
class ReconstructionOutcome:
    """Результат восстановления: либо целое, либо категория ошибки."""

    success: bool
    constant_term: Optional[int]

    # Диагностика (только при ошибке)
    error_kind: Optional[str]
    details: str

    @classmethod
    def ok(cls, value: int) -> "ReconstructionOutcome":
        return cls(success=True, constant_term=value, error_kind=None, details="")

    @classmethod
    def failure(cls, error: ReconstructionError) -> "ReconstructionOutcome":
        return cls(
            success=False,
            constant_term=None,
            error_kind=error.kind,
            details=str(error),
        )


class SecretRecovery:
    """Конвейер: текст документа → свободный член f(0).

    Экземпляр не хранит состояния между вызовами и может переиспользоваться.
    """

    def __init__(
        self,
        observer: Optional[RecoveryObserver] = None,
        validator: Optional[ShareDocumentValidator] = None,
    ):
        """
        Args:
            observer: получатель событий (default: StructlogRecoveryObserver)
            validator: валидатор контракта (default: создается автоматически)
        """
        self.observer = observer or StructlogRecoveryObserver()
        self.validator = validator or ShareDocumentValidator()

    # -------------------------------------------------------------------------
    # Шаги
    # -------------------------------------------------------------------------

    def parse_text(self, text: str) -> Dict[str, Any]:
        """
        Разбор JSON текста документа.

        Raises:
            MalformedInputError: пустой ввод, невалидный JSON, корень не объект
        """
        _lift_int_str_limit()
        text = text.strip()
        if not text:
            raise MalformedInputError("No input")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Invalid JSON: {e.msg} at line {e.lineno}") from e
        if not isinstance(data, dict):
            raise MalformedInputError(
                f"Invalid JSON: expected an object, got {type(data).__name__}"
            )
        return data

    def load_document(self, data: Dict[str, Any]) -> ShareDocument:
        """
        Проверка контракта и построение модели документа.

        Raises:
            MalformedInputError: документ не соответствует схеме или модели
        """
        self.validator.check(data)
        document = ShareDocument.from_json_object(data)
        self.observer.document_loaded(
            n=document.keys.n, k=document.keys.k, point_count=document.point_count
        )
        return document

    def decode_points(self, document: ShareDocument) -> List[SamplePoint]:
        """
        Декодирование точек в порядке документа.

        Raises:
            UnsupportedBaseError, InvalidDigitError
        """
        points = document.decode_points()
        for (_, share), point in zip(document.shares.items(), points):
            self.observer.point_decoded(
                x=point.x, base=share.base, digit_count=len(share.value.removeprefix("-"))
            )
        return points

    # -------------------------------------------------------------------------
    # Полный прогон
    # -------------------------------------------------------------------------

    def recover(self, data: Dict[str, Any]) -> int:
        """
        Восстановление свободного члена из разобранного документа.

        Args:
            data: Корневой JSON объект документа

        Returns:
            f(0) как целое произвольной точности

        Raises:
            ReconstructionError: любая ошибка восстановления (см. kind)
        """
        _lift_int_str_limit()
        document = self.load_document(data)
        points = self.decode_points(document)

        n, k = document.keys.n, document.keys.k
        if len(points) != n:
            raise MalformedInputError(f"Expected n={n} points, found {len(points)}")

        subset = select_point_set(points, k)
        self.observer.points_selected(k=k, xs=[p.x for p in subset])

        result = constant_term(subset)
        self.observer.recovery_completed(result)
        return result

    def recover_text(self, text: str) -> int:
        """Восстановление свободного члена из JSON текста."""
        return self.recover(self.parse_text(text))

    def evaluate(self, text: str) -> ReconstructionOutcome:
        """
        Восстановление с явным результатом вместо исключения.

        Returns:
            ReconstructionOutcome.ok(value) или ReconstructionOutcome.failure(error)
        """
        try:
            value = self.recover_text(text)
        except ReconstructionError as e:
            self.observer.recovery_failed(error_kind=e.kind, reason=str(e))
            return ReconstructionOutcome.failure(e)
        return ReconstructionOutcome.ok(value)
