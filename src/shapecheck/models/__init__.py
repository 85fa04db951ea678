"""Pydantic domain models for ShapeCheck."""

from shapecheck.models.errors import (
    FieldError,
    SchemaError,
    SchemaLoadResult,
    SourceSpan,
    ValidationErrorKind,
    ValidationResult,
)

__all__ = [
    "FieldError",
    "SchemaError",
    "SchemaLoadResult",
    "SourceSpan",
    "ValidationErrorKind",
    "ValidationResult",
]
