"""ShapeCheck: fail-fast validation of decoded nested data against declarative schemas."""

from shapecheck.engine import validate, validate_or_raise
from shapecheck.models.errors import FieldError, ValidationErrorKind, ValidationResult
from shapecheck.validators import (
    IntegerValidator,
    MappingValidator,
    ParserContext,
    StringValidator,
    ValidationFailure,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    "FieldError",
    "IntegerValidator",
    "MappingValidator",
    "ParserContext",
    "StringValidator",
    "ValidationErrorKind",
    "ValidationFailure",
    "ValidationResult",
    "Validator",
    "__version__",
    "validate",
    "validate_or_raise",
]
