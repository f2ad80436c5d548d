"""
Contract Validation Module

Модуль для валидации JSON контрактов входных документов.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    ShareDocumentValidator,
    validate_share_document,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ShareDocumentValidator",
    # Functions
    "validate_share_document",
]
