"""Mapping composite validator: recursive descent over a fixed field schema."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from shapecheck.models.errors import ValidationErrorKind
from shapecheck.validators.base import ParserContext, ValidationFailure, Validator


@dataclass(frozen=True, kw_only=True)
class MappingValidator(Validator):
    """Validates a string-keyed mapping field by field, in schema order.

    The output holds exactly the schema keys. Extra input keys are dropped,
    and an optional field that is absent from the input maps to ``None``
    without its validator being called.
    """

    schema: Mapping[str, Validator] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Snapshot the caller's dict so later edits to it cannot leak in.
        object.__setattr__(self, "schema", MappingProxyType(dict(self.schema)))

    @property
    def kind(self) -> str:
        return "mapping"

    def evaluate(self, value: Any, context: ParserContext) -> dict[str, Any] | None:
        if value is None:
            self._check_none(context)
            return None

        if not isinstance(value, Mapping) or not all(isinstance(k, str) for k in value):
            raise ValidationFailure(ValidationErrorKind.WRONG_TYPE, context.path)

        output: dict[str, Any] = {}
        for name, child in self.schema.items():
            child_context = context.child(name)
            if name not in value:
                if child.is_optional():
                    output[name] = None
                    continue
                raise ValidationFailure(ValidationErrorKind.MISSING_ATTR, child_context.path)
            output[name] = child.evaluate(value[name], child_context)

        return output
