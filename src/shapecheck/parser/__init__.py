"""YAML decoding with line fidelity for ShapeCheck."""

from shapecheck.parser.loader import SourceMap, TrackedLoader, YAMLSafetyError

__all__ = [
    "SourceMap",
    "TrackedLoader",
    "YAMLSafetyError",
]
