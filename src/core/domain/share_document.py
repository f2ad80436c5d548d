"""
ShareDocument — Модель входного документа с закодированными точками

Immutable Pydantic модели входного JSON документа.
Полная совместимость с JSON Schema (contracts/schema/share_document.json).

Формат документа:
    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Каждый член объекта, кроме "keys", — закодированная точка: имя члена —
x-координата в десятичной записи, value — y в системе счисления base.
"""

import re
from typing import Any, Dict, Final, List, Mapping

from pydantic import BaseModel, Field, ValidationError, field_validator

from src.core.domain.sample_point import SamplePoint
from src.core.errors import MalformedInputError
from src.core.math.base_decoding import decode_base

# =============================================================================
# КОНСТАНТЫ ФОРМАТА
# =============================================================================

# Имя служебного члена документа с параметрами n и k
KEYS_FIELD: Final[str] = "keys"

# Допустимая запись x-координаты (десятичное целое со знаком)
X_KEY_PATTERN: Final[re.Pattern] = re.compile(r"^-?[0-9]+$")


# =============================================================================
# NESTED MODELS
# =============================================================================


class ShareKeys(BaseModel):
    """Параметры документа: n — всего точек, k — точек для интерполяции."""

    n: int = Field(..., description="Общее количество точек в документе")
    k: int = Field(..., description="Количество точек для интерполяции")

    model_config = {"frozen": True}


class EncodedShare(BaseModel):
    """
    Закодированное значение y.

    base принимается как JSON integer или строка цифр ("16"); value — как
    строка или JSON integer (приводится к строке).
    """

    base: int = Field(..., description="Основание системы счисления (2..62)")
    value: str = Field(..., description="Цифры значения y в основании base")

    model_config = {"frozen": True}

    @field_validator("value", mode="before")
    @classmethod
    def stringify_value(cls, v: Any) -> Any:
        """JSON integer → строка десятичных цифр"""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    def decode(self) -> int:
        """
        Декодирование значения y.

        Raises:
            UnsupportedBaseError: если base вне [2, 62]
            InvalidDigitError: если value содержит недопустимую цифру
        """
        return decode_base(self.value, self.base)


# =============================================================================
# SHARE DOCUMENT MODEL
# =============================================================================


class ShareDocument(BaseModel):
    """
    Входной документ: параметры и закодированные точки.

    Immutable модель (frozen=True). Порядок shares совпадает с порядком
    членов исходного JSON объекта.
    """

    keys: ShareKeys = Field(..., description="Параметры n и k")
    shares: Dict[str, EncodedShare] = Field(
        default_factory=dict, description="x-координата → закодированное значение"
    )

    model_config = {"frozen": True}

    @field_validator("shares")
    @classmethod
    def validate_x_keys(cls, v: Dict[str, EncodedShare]) -> Dict[str, EncodedShare]:
        """Каждый ключ — десятичное целое"""
        for x_key in v:
            if not X_KEY_PATTERN.match(x_key):
                raise ValueError(f"x-coordinate must be a decimal integer, got {x_key!r}")
        return v

    @classmethod
    def from_json_object(cls, data: Mapping[str, Any]) -> "ShareDocument":
        """
        Построение модели из разобранного JSON объекта.

        Args:
            data: Корневой объект документа

        Returns:
            ShareDocument

        Raises:
            MalformedInputError: если структура не соответствует модели
        """
        shares = {key: value for key, value in data.items() if key != KEYS_FIELD}
        try:
            return cls.model_validate({"keys": data.get(KEYS_FIELD), "shares": shares})
        except ValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            raise MalformedInputError(
                f"Invalid document at '{location}': {first['msg']}"
            ) from e

    @property
    def point_count(self) -> int:
        return len(self.shares)

    def decode_points(self) -> List[SamplePoint]:
        """
        Декодирование всех точек в порядке документа.

        Raises:
            UnsupportedBaseError: если base точки вне [2, 62]
            InvalidDigitError: если значение точки содержит недопустимую цифру
        """
        return [
            SamplePoint(int(x_key), share.decode())
            for x_key, share in self.shares.items()
        ]
