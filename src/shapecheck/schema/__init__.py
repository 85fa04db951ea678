"""Declarative schema documents and the builder that turns them into validators."""

# Import node definitions to trigger registration
import shapecheck.schema.nodes as _nodes  # noqa: F401
from shapecheck.schema.builder import SchemaBuilder, SchemaDefinitionError, describe
from shapecheck.schema.registry import NodeKindRegistry, UnknownNodeKindError

__all__ = [
    "NodeKindRegistry",
    "SchemaBuilder",
    "SchemaDefinitionError",
    "UnknownNodeKindError",
    "describe",
]
