"""String leaf validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapecheck.models.errors import ValidationErrorKind
from shapecheck.validators.base import ParserContext, ValidationFailure, Validator


@dataclass(frozen=True, kw_only=True)
class StringValidator(Validator):
    """Accepts ``str`` values, optionally with a minimum length in code points."""

    min_length: int | None = None

    @property
    def kind(self) -> str:
        return "string"

    def evaluate(self, value: Any, context: ParserContext) -> str | None:
        if value is None:
            self._check_none(context)
            return None

        if not isinstance(value, str):
            raise ValidationFailure(ValidationErrorKind.WRONG_TYPE, context.path)

        if self.min_length is not None and len(value) < self.min_length:
            raise ValidationFailure(ValidationErrorKind.INVALID, context.path)

        return value
