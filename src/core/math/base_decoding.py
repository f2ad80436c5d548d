"""
Base-N Decoding — Декодирование цифровых строк в основаниях 2..62

Алфавит цифр фиксирован и определяет значения цифр для оснований > 10:
    '0'-'9' → 0..9, 'A'-'Z' → 10..35, 'a'-'z' → 36..61

Правила декодирования:
- Необязательный ведущий '-' означает отрицательное значение
- Каждый символ ищется в алфавите с учётом регистра; только если символ
  не найден, выполняется повторный поиск по char.upper(); затем значение
  цифры должно быть < base
- Пустая строка цифр (после снятия знака) декодируется в 0
- Накопление слева направо: value = value * base + digit

ИЗВЕСТНАЯ ТОЛЕРАНТНОСТЬ К РЕГИСТРУ:
Строчные ASCII-буквы всегда есть в алфавите (36..61), поэтому повторный
поиск для них не выполняется: "ff" в base 16 — недопустимые цифры, а для
base > 36 'a' декодируется как 36, даже если вызывающий имел в виду 'A' (10).
Fallback срабатывает только для символов вне алфавита (например, 'ı' → 'I').
Поведение сохранено намеренно.
"""

from types import MappingProxyType
from typing import Final, Mapping, Optional

from src.core.errors import (
    KIND_INVALID_DIGIT,
    KIND_UNSUPPORTED_BASE,
    ReconstructionError,
)

# =============================================================================
# АЛФАВИТ И ГРАНИЦЫ ОСНОВАНИЙ
# =============================================================================

DIGIT_ALPHABET: Final[str] = (
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
)

# Обратное отображение символ → значение цифры (только чтение)
DIGIT_VALUES: Final[Mapping[str, int]] = MappingProxyType(
    {ch: idx for idx, ch in enumerate(DIGIT_ALPHABET)}
)

MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = len(DIGIT_ALPHABET)  # 62

NEGATIVE_SIGN: Final[str] = "-"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedBaseError(ReconstructionError, ValueError):
    """Основание вне диапазона [MIN_BASE, MAX_BASE]."""

    kind = KIND_UNSUPPORTED_BASE

    def __init__(self, base: int) -> None:
        self.base = base
        super().__init__(f"Unsupported base: {base}")


class InvalidDigitError(ReconstructionError, ValueError):
    """Символ не является цифрой для данного основания (с учётом upper-fallback)."""

    kind = KIND_INVALID_DIGIT

    def __init__(self, char: str, base: int) -> None:
        self.char = char
        self.base = base
        super().__init__(f"Invalid digit '{char}' for base {base}")


# =============================================================================
# ДЕКОДИРОВАНИЕ / КОДИРОВАНИЕ
# =============================================================================


def validate_base(base: int) -> int:
    """
    Проверка основания.

    Raises:
        UnsupportedBaseError: если base < 2 или base > 62
    """
    if base < MIN_BASE or base > MAX_BASE:
        raise UnsupportedBaseError(base)
    return base


def _digit_value(char: str, base: int) -> Optional[int]:
    value = DIGIT_VALUES.get(char)
    if value is None:
        value = DIGIT_VALUES.get(char.upper())
    if value is None or value >= base:
        return None
    return value


def decode_base(digits: str, base: int) -> int:
    """
    Декодирование знаковой строки цифр в целое произвольной точности.

    Args:
        digits: Строка цифр, возможно с ведущим '-'
        base: Основание системы счисления (2..62)

    Returns:
        Декодированное целое (Python int, без ограничения разрядности)

    Raises:
        UnsupportedBaseError: если base вне [2, 62]
        InvalidDigitError: если символ не является цифрой для base

    Examples:
        >>> decode_base("111", 2)
        7
        >>> decode_base("-zz", 62)
        -3843
        >>> decode_base("", 10)
        0
    """
    validate_base(base)

    negative = digits.startswith(NEGATIVE_SIGN)
    if negative:
        digits = digits[1:]

    value = 0
    for char in digits:
        digit = _digit_value(char, base)
        if digit is None:
            raise InvalidDigitError(char, base)
        value = value * base + digit

    return -value if negative else value


def encode_base(value: int, base: int) -> str:
    """
    Кодирование целого в строку цифр (обратная операция к decode_base).

    Каноническая форма: без ведущих нулей, "0" для нуля, '-' для
    отрицательных значений.

    Raises:
        UnsupportedBaseError: если base вне [2, 62]

    Examples:
        >>> encode_base(39, 4)
        '213'
        >>> encode_base(-3843, 62)
        '-zz'
    """
    validate_base(base)

    if value == 0:
        return DIGIT_ALPHABET[0]

    magnitude = abs(value)
    chars = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        chars.append(DIGIT_ALPHABET[digit])

    if value < 0:
        chars.append(NEGATIVE_SIGN)
    return "".join(reversed(chars))
