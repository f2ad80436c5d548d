"""
JSON Schema Contract Validators

Модуль для валидации входного документа согласно формальному JSON Schema
контракту. Использует библиотеку jsonschema для проверки соответствия
данных схеме.

Схемы:
- share_document.json (параметры n, k и закодированные точки)
"""

import json
from pathlib import Path
from typing import Any, Dict, Final

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from src.core.errors import MalformedInputError

SHARE_DOCUMENT_SCHEMA: Final[str] = "share_document"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Автоматически находит схемы в contracts/schema/ относительно корня проекта.
    """

    def __init__(self, schema_dir: Path = None):
        # Корень проекта — 4 уровня вверх от этого файла
        self._schema_dir = schema_dir or (
            Path(__file__).parent.parent.parent.parent / "contracts" / "schema"
        )
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'share_document')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader = None):
        """
        Args:
            schema_name: Имя схемы для валидации
            loader: Загрузчик схем (default: глобальный)
        """
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class ShareDocumentValidator(ContractValidator):
    """Валидатор входного документа с закодированными точками."""

    def __init__(self, loader: SchemaLoader = None):
        super().__init__(SHARE_DOCUMENT_SCHEMA, loader)

    def check(self, data: Dict[str, Any]) -> None:
        """
        Валидация с переводом ошибки схемы в MalformedInputError.

        Из всех ошибок выбирается первая по пути в документе, чтобы
        диагностика была детерминированной.

        Raises:
            MalformedInputError: Если документ не соответствует схеме
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        if not errors:
            return
        first = errors[0]
        location = "/".join(str(part) for part in first.absolute_path) or "<root>"
        raise MalformedInputError(
            f"Document violates schema at '{location}': {first.message}"
        ) from first


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_share_document(data: Dict[str, Any]) -> None:
    """
    Валидация входного документа.

    Raises:
        MalformedInputError: Если данные не соответствуют схеме
    """
    ShareDocumentValidator().check(data)
