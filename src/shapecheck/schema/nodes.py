"""Declarative node definitions: the document form of each validator kind."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from shapecheck.schema.registry import NodeKindRegistry
from shapecheck.validators import (
    IntegerValidator,
    MappingValidator,
    StringValidator,
    Validator,
)


class NodeDefinition(BaseModel):
    """Fields shared by every node kind.

    Subclasses set ``type`` to a literal default; the registry keys on it.
    """

    model_config = ConfigDict(populate_by_name=True, extra="forbid", strict=True)

    type: str
    optional: bool = False
    allow_none: bool = Field(False, alias="allowNone")

    def child_definitions(self) -> dict[str, Any]:
        """Raw definitions of nested nodes, keyed by field name."""
        return {}

    def check_bounds(self) -> str | None:
        """Return a message when the node's constraints contradict each other."""
        return None

    def to_validator(self, children: dict[str, Validator]) -> Validator:
        raise NotImplementedError

    @classmethod
    def from_validator(cls, validator: Any, children: dict[str, Any]) -> NodeDefinition:
        raise NotImplementedError

    @classmethod
    def children_of(cls, validator: Any) -> dict[str, Validator]:
        return {}


@NodeKindRegistry.register
class StringNode(NodeDefinition):
    type: Literal["string"] = "string"
    min_length: int | None = Field(None, alias="minLength", ge=0)

    def to_validator(self, children: dict[str, Validator]) -> StringValidator:
        return StringValidator(
            optional=self.optional,
            allow_none=self.allow_none,
            min_length=self.min_length,
        )

    @classmethod
    def from_validator(cls, validator: StringValidator, children: dict[str, Any]) -> StringNode:
        return cls(
            optional=validator.optional,
            allow_none=validator.allow_none,
            min_length=validator.min_length,
        )


@NodeKindRegistry.register
class IntegerNode(NodeDefinition):
    type: Literal["integer"] = "integer"
    min_value: int | None = Field(None, alias="minValue")
    max_value: int | None = Field(None, alias="maxValue")

    def check_bounds(self) -> str | None:
        if (
            self.min_value is not None
            and self.max_value is not None
            and self.min_value > self.max_value
        ):
            return f"minValue ({self.min_value}) is greater than maxValue ({self.max_value})"
        return None

    def to_validator(self, children: dict[str, Validator]) -> IntegerValidator:
        return IntegerValidator(
            optional=self.optional,
            allow_none=self.allow_none,
            min_value=self.min_value,
            max_value=self.max_value,
        )

    @classmethod
    def from_validator(cls, validator: IntegerValidator, children: dict[str, Any]) -> IntegerNode:
        return cls(
            optional=validator.optional,
            allow_none=validator.allow_none,
            min_value=validator.min_value,
            max_value=validator.max_value,
        )


@NodeKindRegistry.register
class MappingNode(NodeDefinition):
    type: Literal["mapping"] = "mapping"
    field_definitions: dict[str, Any] = Field(default_factory=dict, alias="fields")

    def child_definitions(self) -> dict[str, Any]:
        return self.field_definitions

    def to_validator(self, children: dict[str, Validator]) -> MappingValidator:
        return MappingValidator(
            schema=children,
            optional=self.optional,
            allow_none=self.allow_none,
        )

    @classmethod
    def from_validator(cls, validator: MappingValidator, children: dict[str, Any]) -> MappingNode:
        return cls(
            optional=validator.optional,
            allow_none=validator.allow_none,
            field_definitions=children,
        )

    @classmethod
    def children_of(cls, validator: MappingValidator) -> dict[str, Validator]:
        return dict(validator.schema)
