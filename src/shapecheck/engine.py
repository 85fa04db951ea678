"""Top-level validation entry points."""

from __future__ import annotations

from typing import Any

from shapecheck.models.errors import ValidationResult
from shapecheck.validators.base import ParserContext, ValidationFailure, Validator


def validate(validator: Validator, value: Any) -> ValidationResult:
    """Validate ``value`` against ``validator`` starting from the root path.

    Evaluation is fail-fast: the first failure anywhere in the tree is the
    one reported, and no partial value is returned alongside it.
    """
    try:
        parsed = validator.evaluate(value, ParserContext.root())
    except ValidationFailure as exc:
        return ValidationResult(valid=False, error=exc.error)
    return ValidationResult(valid=True, value=parsed)


def validate_or_raise(validator: Validator, value: Any) -> Any:
    """Like :func:`validate` but returns the parsed value or raises ``ValidationFailure``."""
    return validator.evaluate(value, ParserContext.root())
