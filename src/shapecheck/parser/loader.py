"""YAML loader with position tracking for rich error reporting."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap, CommentedSeq
from ruamel.yaml.events import (
    AliasEvent,
    CollectionEndEvent,
    CollectionStartEvent,
    NodeEvent,
)

from shapecheck.models.errors import SourceSpan

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Safety limits
# ---------------------------------------------------------------------------

_MAX_DOCUMENT_SIZE = 5_000_000  # 5M characters
_MAX_NODE_COUNT = 50_000
_MAX_DEPTH = 20


class YAMLSafetyError(Exception):
    """Raised when YAML input violates safety constraints.

    Distinct from parse errors: these indicate potentially malicious input
    (e.g., billion-laughs anchors, excessive nesting, oversized documents).
    """


@dataclass
class SourceMap:
    """Maps value paths to their source positions for error reporting."""

    _positions: dict[tuple[str, ...], SourceSpan] = field(default_factory=dict)

    def add(self, path: tuple[str, ...], span: SourceSpan) -> None:
        self._positions[path] = span

    def get(self, path: tuple[str, ...]) -> SourceSpan | None:
        return self._positions.get(path)

    def nearest(self, path: tuple[str, ...]) -> SourceSpan | None:
        """Position of ``path`` or of its closest recorded ancestor.

        A field that is missing from the input has no position of its own,
        so the enclosing mapping is reported instead.
        """
        for depth in range(len(path), -1, -1):
            span = self._positions.get(path[:depth])
            if span is not None:
                return span
        return None

    @property
    def paths(self) -> list[tuple[str, ...]]:
        return list(self._positions.keys())


class TrackedLoader:
    """YAML loader that tracks source positions for error reporting.

    Uses ruamel.yaml which preserves line/column info on every parsed node.
    The decoded value is returned as plain Python data: ``None``, ``str``,
    ``int``, ``float``, ``bool``, ``dict`` or ``list``.
    """

    def __init__(
        self,
        max_document_size: int = _MAX_DOCUMENT_SIZE,
        max_node_count: int = _MAX_NODE_COUNT,
        max_depth: int = _MAX_DEPTH,
    ) -> None:
        self._yaml = YAML()
        self._max_document_size = max_document_size
        self._max_node_count = max_node_count
        self._max_depth = max_depth

    # -- safety checks -------------------------------------------------------

    def _check_yaml_safety(self, content: str) -> None:
        """Pre-parse safety checks on raw YAML text.

        Raises ``YAMLSafetyError`` if the content exceeds the maximum document
        size, uses anchors/aliases, or nests collections too deeply. Runs on
        parser events, before anything is composed.
        """
        if len(content) > self._max_document_size:
            raise YAMLSafetyError(
                f"YAML document exceeds maximum size "
                f"({len(content):,} chars > {self._max_document_size:,} limit)"
            )
        open_collections = 0
        for event in self._yaml.parse(content):
            if isinstance(event, AliasEvent) or (
                isinstance(event, NodeEvent) and event.anchor is not None
            ):
                raise YAMLSafetyError("YAML anchors/aliases are not supported")
            if isinstance(event, CollectionStartEvent):
                open_collections += 1
                if open_collections > self._max_depth + 1:
                    raise YAMLSafetyError(
                        f"YAML document exceeds maximum nesting depth ({self._max_depth})"
                    )
            elif isinstance(event, CollectionEndEvent):
                open_collections -= 1

    def _check_structure(self, data: Any) -> None:
        """Post-parse: reject documents with too many nodes or nested too deeply."""
        count = 0
        stack: list[tuple[Any, int]] = [(data, 0)]
        while stack:
            node, depth = stack.pop()
            count += 1
            if count > self._max_node_count:
                raise YAMLSafetyError(
                    f"YAML document exceeds maximum node count ({self._max_node_count:,})"
                )
            if depth > self._max_depth:
                raise YAMLSafetyError(
                    f"YAML document exceeds maximum nesting depth ({self._max_depth})"
                )
            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

    # -- public loading API --------------------------------------------------

    def load(self, path: Path) -> tuple[Any, SourceMap]:
        """Load a YAML file and return the decoded value + source position map."""
        with path.open("r", encoding="utf-8") as handle:
            content = handle.read()
        return self.load_string(content, filename=str(path))

    def load_string(self, content: str, filename: str = "<string>") -> tuple[Any, SourceMap]:
        """Load YAML from a string."""
        try:
            self._check_yaml_safety(content)
            data = self._yaml.load(content)
        except RecursionError as exc:
            raise YAMLSafetyError("YAML document is nested too deeply to parse") from exc
        source_map = SourceMap()
        if data is None:
            return None, source_map
        self._check_structure(data)
        self._extract_positions(data, filename, (), source_map)
        logger.debug("Loaded %s (%d positions)", filename, len(source_map.paths))
        return self._to_plain_value(data), source_map

    def _extract_positions(
        self,
        data: Any,
        filename: str,
        prefix: tuple[str, ...],
        source_map: SourceMap,
    ) -> None:
        """Recursively extract source positions from ruamel.yaml nodes."""
        if isinstance(data, CommentedMap):
            if not prefix:
                try:
                    source_map.add(
                        prefix,
                        SourceSpan(file=filename, line=data.lc.line + 1, column=data.lc.col + 1),
                    )
                except (AttributeError, TypeError):
                    pass
            for key in data:
                key_path = (*prefix, str(key))
                try:
                    key_positions = data.lc.key(key)
                    if key_positions:
                        line, col = key_positions
                        source_map.add(
                            key_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    # Fallback: use the map's own position
                    try:
                        source_map.add(
                            key_path,
                            SourceSpan(
                                file=filename, line=data.lc.line + 1, column=data.lc.col + 1
                            ),
                        )
                    except (AttributeError, TypeError):
                        pass
                self._extract_positions(data[key], filename, key_path, source_map)
        elif isinstance(data, CommentedSeq):
            for i, item in enumerate(data):
                item_path = (*prefix, str(i))
                try:
                    item_pos = data.lc.item(i)
                    if item_pos:
                        line, col = item_pos
                        source_map.add(
                            item_path,
                            SourceSpan(file=filename, line=line + 1, column=col + 1),
                        )
                except (AttributeError, KeyError, TypeError):
                    pass
                self._extract_positions(item, filename, item_path, source_map)

    def _to_plain_value(self, data: Any) -> Any:
        """Convert ruamel.yaml containers and scalar subclasses to plain Python values."""
        if isinstance(data, dict):
            return {
                self._to_plain_value(k): self._to_plain_value(v) for k, v in data.items()
            }
        if isinstance(data, list):
            return [self._to_plain_value(item) for item in data]
        if isinstance(data, bool):
            return bool(data)
        if isinstance(data, int):
            return int(data)
        if isinstance(data, float):
            return float(data)
        if isinstance(data, str):
            return str(data)
        return data
