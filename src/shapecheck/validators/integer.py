"""Integer leaf validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from shapecheck.models.errors import ValidationErrorKind
from shapecheck.validators.base import ParserContext, ValidationFailure, Validator


@dataclass(frozen=True, kw_only=True)
class IntegerValidator(Validator):
    """Accepts ``int`` values within inclusive bounds.

    ``bool`` is a subclass of ``int`` in Python but is a distinct kind in
    decoded data, so it is rejected as WRONG_TYPE.
    """

    min_value: int | None = None
    max_value: int | None = None

    @property
    def kind(self) -> str:
        return "integer"

    def evaluate(self, value: Any, context: ParserContext) -> int | None:
        if value is None:
            self._check_none(context)
            return None

        if not isinstance(value, int) or isinstance(value, bool):
            raise ValidationFailure(ValidationErrorKind.WRONG_TYPE, context.path)

        if self.min_value is not None and value < self.min_value:
            raise ValidationFailure(ValidationErrorKind.INVALID, context.path)

        if self.max_value is not None and value > self.max_value:
            raise ValidationFailure(ValidationErrorKind.INVALID, context.path)

        return value
