"""Builds validator trees from declarative schema documents."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from shapecheck.models.errors import SchemaError, SchemaLoadResult
from shapecheck.parser.loader import SourceMap
from shapecheck.schema.registry import NodeKindRegistry, UnknownNodeKindError
from shapecheck.validators import Validator

logger = logging.getLogger(__name__)


class SchemaDefinitionError(Exception):
    """Raised by ``build_or_raise`` when a schema document has errors."""

    def __init__(self, errors: list[SchemaError]) -> None:
        self.errors = errors
        summary = "; ".join(f"{e.path or '<root>'}: {e.message}" for e in errors)
        super().__init__(f"Invalid schema ({len(errors)} error(s)): {summary}")


class SchemaBuilder:
    """Turns a raw schema document into a validator tree.

    Unlike validation itself, building collects every definition error so a
    schema author sees all problems at once.
    """

    def build(
        self,
        raw: Any,
        source_map: SourceMap | None = None,
    ) -> tuple[Validator | None, SchemaLoadResult]:
        """Build the validator tree for ``raw``.

        Returns (validator, result). The validator is ``None`` when the
        result has errors.
        """
        errors: list[SchemaError] = []
        validator = self._build_node(raw, (), source_map, errors)
        if errors:
            logger.info("Schema has %d definition error(s)", len(errors))
            return None, SchemaLoadResult(valid=False, errors=errors)
        return validator, SchemaLoadResult(valid=True)

    def build_or_raise(self, raw: Any, source_map: SourceMap | None = None) -> Validator:
        validator, result = self.build(raw, source_map)
        if validator is None:
            raise SchemaDefinitionError(result.errors)
        return validator

    def _build_node(
        self,
        raw: Any,
        path: tuple[str, ...],
        source_map: SourceMap | None,
        errors: list[SchemaError],
    ) -> Validator | None:
        def _error(code: str, message: str) -> None:
            errors.append(
                SchemaError(
                    code=code,
                    message=message,
                    path=".".join(path) or None,
                    span=source_map.nearest(path) if source_map else None,
                )
            )

        if not isinstance(raw, dict):
            _error("INVALID_NODE_DEFINITION", "Node definition must be a mapping")
            return None

        kind = raw.get("type")
        if not isinstance(kind, str):
            _error("UNKNOWN_NODE_TYPE", "Node definition is missing a string 'type'")
            return None
        try:
            node_class = NodeKindRegistry.get(kind)
        except UnknownNodeKindError as exc:
            _error("UNKNOWN_NODE_TYPE", str(exc))
            return None

        if "fields" in raw and not isinstance(raw["fields"], dict):
            _error("FIELDS_NOT_MAPPING", "'fields' must be a mapping of field name to node")
            return None

        try:
            node = node_class.model_validate(raw)
        except ValidationError as exc:
            details = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
            )
            _error("INVALID_NODE_DEFINITION", f"Invalid '{kind}' node: {details}")
            return None

        bounds_message = node.check_bounds()
        if bounds_message is not None:
            _error("INCONSISTENT_BOUNDS", bounds_message)

        children: dict[str, Validator] = {}
        failed = bounds_message is not None
        for name, child_raw in node.child_definitions().items():
            child = self._build_node(child_raw, (*path, "fields", name), source_map, errors)
            if child is None:
                failed = True
            else:
                children[name] = child

        if failed:
            return None
        return node.to_validator(children)


def describe(validator: Validator) -> dict[str, Any]:
    """Serialize a validator tree back into its schema document form."""
    node_class = NodeKindRegistry.get(validator.kind)
    children = {name: describe(child) for name, child in node_class.children_of(validator).items()}
    node = node_class.from_validator(validator, children)
    return node.model_dump(by_alias=True, exclude_none=True)
