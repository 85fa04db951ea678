"""Command-line entry point: validate YAML data files against YAML schema documents."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ruamel.yaml.error import YAMLError

from shapecheck import __version__
from shapecheck.engine import validate
from shapecheck.parser.loader import TrackedLoader, YAMLSafetyError
from shapecheck.schema import SchemaBuilder, describe
from shapecheck.settings import Settings
from shapecheck.validators import Validator

logger = logging.getLogger("shapecheck.cli")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_USAGE = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shapecheck",
        description="Validate decoded YAML data against a declarative schema",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate a data file against a schema file")
    check.add_argument("schema", help="Schema YAML file")
    check.add_argument("data", help="Data YAML file")
    check.add_argument("--separator", default=None, help="Path separator for error locations")
    check.add_argument("--json", action="store_true", help="Print the full result as JSON")

    desc = sub.add_parser("describe", help="Print the normalized schema as JSON")
    desc.add_argument("schema", help="Schema YAML file")
    return parser


def _load_schema(loader: TrackedLoader, path: Path) -> Validator | None:
    raw, source_map = loader.load(path)
    validator, result = SchemaBuilder().build(raw, source_map)
    for err in result.errors:
        location = f"{err.span}: " if err.span else ""
        print(f"{location}{err.code} at {err.path or '<root>'}: {err.message}", file=sys.stderr)
    return validator


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the CLI and return the process exit code."""
    if settings is None:
        settings = Settings()
    args = _build_parser().parse_args(argv)
    loader = TrackedLoader(
        max_document_size=settings.max_document_size,
        max_node_count=settings.max_node_count,
        max_depth=settings.max_depth,
    )

    try:
        validator = _load_schema(loader, Path(args.schema))
        if validator is None:
            return EXIT_USAGE
        if args.command == "describe":
            print(json.dumps(describe(validator), indent=2))
            return EXIT_OK
        data, source_map = loader.load(Path(args.data))
    except (OSError, YAMLError, YAMLSafetyError) as exc:
        logger.error("Failed to load input: %s", exc)
        return EXIT_USAGE

    result = validate(validator, data)
    if args.json:
        print(result.model_dump_json(indent=2))
        return EXIT_OK if result.valid else EXIT_INVALID

    if result.error is None:
        print(json.dumps(result.value, indent=2, default=str))
        return EXIT_OK

    separator = args.separator if args.separator is not None else settings.path_separator
    span = source_map.nearest(result.error.path)
    suffix = f" ({span})" if span else ""
    print(f"{result.error.message(separator)}{suffix}", file=sys.stderr)
    return EXIT_INVALID


def main() -> None:
    """Run the CLI using settings from environment / .env file."""
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())
    logger.debug("ShapeCheck v%s", __version__)
    sys.exit(run(settings=settings))


if __name__ == "__main__":
    main()
