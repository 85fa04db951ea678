"""Node-kind registry: maps schema ``type`` names to node definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shapecheck.schema.nodes import NodeDefinition


class UnknownNodeKindError(Exception):
    """Raised when a schema document names a node type that is not registered."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.kind_name = name
        self.available = available
        super().__init__(f"Unknown node type '{name}'. Available: {', '.join(available)}")


class NodeKindRegistry:
    """Registry of node definition classes, keyed by their ``type`` literal."""

    _kinds: dict[str, type[NodeDefinition]] = {}

    @classmethod
    def register(cls, node_class: type[NodeDefinition]) -> type[NodeDefinition]:
        """Register a node definition class. Can be used as a decorator."""
        name = node_class.model_fields["type"].default
        cls._kinds[name] = node_class
        return node_class

    @classmethod
    def get(cls, name: str) -> type[NodeDefinition]:
        if name not in cls._kinds:
            raise UnknownNodeKindError(name, available=cls.available())
        return cls._kinds[name]

    @classmethod
    def available(cls) -> list[str]:
        """List registered node type names."""
        return sorted(cls._kinds.keys())

    @classmethod
    def reset(cls) -> None:
        """Clear all registered node kinds (for testing)."""
        cls._kinds.clear()
