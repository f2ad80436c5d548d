"""
Observer — события конвейера восстановления

RecoveryObserver — порт (Protocol), через который конвейер сообщает о
своих шагах. StructlogRecoveryObserver — рабочая реализация, пишущая
события в structlog; в тестах используется записывающий fake.
"""

from typing import List, Protocol

import structlog


class RecoveryObserver(Protocol):
    """Порт событий восстановления свободного члена."""

    def document_loaded(self, n: int, k: int, point_count: int) -> None: ...

    def point_decoded(self, x: int, base: int, digit_count: int) -> None: ...

    def points_selected(self, k: int, xs: List[int]) -> None: ...

    def recovery_completed(self, constant_term: int) -> None: ...

    def recovery_failed(self, error_kind: str, reason: str) -> None: ...


class StructlogRecoveryObserver:
    """Пишет события восстановления в structlog.

    Не наследует RecoveryObserver (структурная типизация через Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def document_loaded(self, n: int, k: int, point_count: int) -> None:
        self._log.info("recovery.document_loaded", n=n, k=k, point_count=point_count)

    def point_decoded(self, x: int, base: int, digit_count: int) -> None:
        self._log.debug("recovery.point_decoded", x=x, base=base, digit_count=digit_count)

    def points_selected(self, k: int, xs: List[int]) -> None:
        self._log.info("recovery.points_selected", k=k, xs=[str(x) for x in xs])

    def recovery_completed(self, constant_term: int) -> None:
        # Результат может быть очень большим: логируем только его размер
        self._log.info(
            "recovery.completed",
            decimal_digits=len(str(abs(constant_term))),
            negative=constant_term < 0,
        )

    def recovery_failed(self, error_kind: str, reason: str) -> None:
        self._log.warning("recovery.failed", error_kind=error_kind, reason=reason)
