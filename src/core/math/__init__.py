"""
Core math modules

Точная арифметика над целыми произвольной точности: дроби, декодирование
цифровых строк в основаниях 2..62, интерполяция Лагранжа в нуле.
"""

# Fraction
from src.core.math.fraction import (
    Fraction,
    NonIntegerResultError,
    ZeroDenominatorError,
)

# Base-N Decoding
from src.core.math.base_decoding import (
    DIGIT_ALPHABET,
    DIGIT_VALUES,
    MAX_BASE,
    MIN_BASE,
    InvalidDigitError,
    UnsupportedBaseError,
    decode_base,
    encode_base,
    validate_base,
)

# Lagrange
from src.core.math.lagrange import (
    constant_term,
    constant_term_fraction,
    lagrange_basis_at_zero,
)

__all__ = [
    # Fraction — Types
    "Fraction",
    # Fraction — Exceptions
    "NonIntegerResultError",
    "ZeroDenominatorError",
    # Base-N Decoding — Constants
    "DIGIT_ALPHABET",
    "DIGIT_VALUES",
    "MAX_BASE",
    "MIN_BASE",
    # Base-N Decoding — Exceptions
    "InvalidDigitError",
    "UnsupportedBaseError",
    # Base-N Decoding — Functions
    "decode_base",
    "encode_base",
    "validate_base",
    # Lagrange — Functions
    "constant_term",
    "constant_term_fraction",
    "lagrange_basis_at_zero",
]
