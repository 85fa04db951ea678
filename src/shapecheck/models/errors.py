"""Structured error models with path and YAML source position tracking."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class ValidationErrorKind(StrEnum):
    INVALID = "invalid"
    WRONG_TYPE = "wrong_type"
    MISSING_ATTR = "missing_attr"
    INVALID_NONE = "invalid_none"


class SourceSpan(BaseModel):
    """Points to exact location in YAML source for error reporting."""

    file: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.column}"


class FieldError(BaseModel):
    """The single failure produced by a validation call: what went wrong and where."""

    model_config = ConfigDict(frozen=True)

    kind: ValidationErrorKind
    path: tuple[str, ...] = ()

    def location(self, separator: str = ".") -> str:
        """Render the path for display; the root renders as an empty string."""
        return separator.join(self.path)

    def message(self, separator: str = ".") -> str:
        return f"Error: {self.kind.value}, Path: {self.location(separator)}"


class ValidationResult(BaseModel):
    """Result of validating one value against a validator tree."""

    valid: bool
    value: Any = None
    error: FieldError | None = None


class SchemaError(BaseModel):
    """A structured schema-definition error with optional source position."""

    code: str
    message: str
    path: str | None = None
    span: SourceSpan | None = None


class SchemaLoadResult(BaseModel):
    """Result of building a validator tree from a schema document."""

    valid: bool
    errors: list[SchemaError] = []
