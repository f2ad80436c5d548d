"""
Domain models and value objects.

Contains sample points, point-set selection and the input document models.
"""

from src.core.domain.sample_point import SamplePoint, select_point_set
from src.core.domain.share_document import (
    KEYS_FIELD,
    EncodedShare,
    ShareDocument,
    ShareKeys,
)

__all__ = [
    # Sample points
    "SamplePoint",
    "select_point_set",
    # Share document
    "KEYS_FIELD",
    "EncodedShare",
    "ShareDocument",
    "ShareKeys",
]
