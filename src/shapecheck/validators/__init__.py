"""Validator node kinds and the traversal context they share."""

from shapecheck.validators.base import (
    ParserContext,
    Path,
    ValidationFailure,
    Validator,
    extend,
    render_path,
)
from shapecheck.validators.integer import IntegerValidator
from shapecheck.validators.mapping import MappingValidator
from shapecheck.validators.string import StringValidator

__all__ = [
    "IntegerValidator",
    "MappingValidator",
    "ParserContext",
    "Path",
    "StringValidator",
    "ValidationFailure",
    "Validator",
    "extend",
    "render_path",
]
