"""
Validation package for graphwalk.

This package provides schema validation of settings documents.
"""

from .base import ValidationResult
from .schema import SchemaValidator

__all__ = [
    "ValidationResult",
    "SchemaValidator",
]
