"""Recovery — восстановление свободного члена из входного документа.

- Конвейер: JSON → контракт → декодирование → выбор k точек → Lagrange
- Явный результат ReconstructionOutcome вместо исключения на границе
- События конвейера через RecoveryObserver (structlog)
"""

from .observer import RecoveryObserver, StructlogRecoveryObserver
from .pipeline import ReconstructionOutcome, SecretRecovery

__all__ = [
    "RecoveryObserver",
    "StructlogRecoveryObserver",
    "ReconstructionOutcome",
    "SecretRecovery",
]
