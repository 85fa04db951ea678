"""Validator capability, traversal context and the fail-fast error signal."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from shapecheck.models.errors import FieldError, ValidationErrorKind

Path = tuple[str, ...]


def extend(path: Path, segment: str) -> Path:
    """Return a new path with ``segment`` appended; ``path`` is left untouched."""
    return (*path, segment)


def render_path(path: Path, separator: str = ".") -> str:
    return separator.join(path)


@dataclass(frozen=True, kw_only=True)
class ParserContext:
    """Position of the value currently being evaluated."""

    path: Path = ()

    @classmethod
    def root(cls) -> ParserContext:
        return cls(path=())

    def child(self, segment: str) -> ParserContext:
        return ParserContext(path=extend(self.path, segment))


class ValidationFailure(Exception):
    """Raised at the point a check fails; carries the structured error upward unchanged."""

    def __init__(self, kind: ValidationErrorKind, path: Path) -> None:
        self.error = FieldError(kind=kind, path=path)
        super().__init__(self.error.message())

    @property
    def kind(self) -> ValidationErrorKind:
        return self.error.kind

    @property
    def path(self) -> Path:
        return self.error.path


@dataclass(frozen=True, kw_only=True)
class Validator(ABC):
    """Abstract base for all schema nodes.

    ``optional`` governs whether the field holding this node may be absent
    from its parent mapping; ``allow_none`` governs whether a present value
    may be null. The two are independent.
    """

    optional: bool = False
    allow_none: bool = False

    @property
    @abstractmethod
    def kind(self) -> str: ...

    @abstractmethod
    def evaluate(self, value: Any, context: ParserContext) -> Any:
        """Return the validated value or raise ``ValidationFailure``."""

    def is_optional(self) -> bool:
        return self.optional

    def _check_none(self, context: ParserContext) -> None:
        """Handle a null value: accepted when ``allow_none``, else INVALID_NONE."""
        if not self.allow_none:
            raise ValidationFailure(ValidationErrorKind.INVALID_NONE, context.path)
