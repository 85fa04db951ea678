"""End-to-end tests for the shapecheck command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from shapecheck.cli import EXIT_INVALID, EXIT_OK, EXIT_USAGE, run
from shapecheck.settings import Settings
from tests.conftest import SAMPLE_DATA_YAML, SAMPLE_DOCUMENT, SAMPLE_SCHEMA_YAML


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    path = tmp_path / "schema.yaml"
    path.write_text(SAMPLE_SCHEMA_YAML, encoding="utf-8")
    return path


def _write(tmp_path: Path, name: str, content: str) -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


class TestCheck:
    def test_valid_data(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(tmp_path, "data.yaml", SAMPLE_DATA_YAML)
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == SAMPLE_DOCUMENT

    def test_absent_optional_fields_printed_as_null(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(tmp_path, "data.yaml", "title: Title\n")
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_OK
        assert json.loads(capsys.readouterr().out) == {
            "title": "Title",
            "folder_id": None,
            "owner_id": None,
            "description": None,
            "organization": None,
        }

    def test_invalid_data_reports_path_and_position(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(
            tmp_path, "data.yaml", "title: Title\norganization:\n  id: 3\n  title: X\n"
        )
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_INVALID
        err = capsys.readouterr().err
        assert "Error: invalid, Path: organization.title" in err
        assert f"{data}:4:3" in err

    def test_missing_field_points_at_parent(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(tmp_path, "data.yaml", "title: Title\norganization:\n  id: 3\n")
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_INVALID
        err = capsys.readouterr().err
        assert "missing_attr, Path: organization.title" in err
        assert f"{data}:2:1" in err

    def test_custom_separator(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(tmp_path, "data.yaml", "title: Title\norganization:\n  id: '3'\n")
        code = run(
            ["check", str(schema_file), str(data), "--separator", "/"], settings=settings
        )
        assert code == EXIT_INVALID
        assert "Path: organization/id" in capsys.readouterr().err

    def test_json_output(
        self,
        tmp_path: Path,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        data = _write(tmp_path, "data.yaml", "title: ~\n")
        code = run(["check", str(schema_file), str(data), "--json"], settings=settings)
        assert code == EXIT_INVALID
        payload = json.loads(capsys.readouterr().out)
        assert payload["valid"] is False
        assert payload["error"] == {"kind": "invalid_none", "path": ["title"]}

    def test_bad_schema(
        self,
        tmp_path: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        schema = _write(tmp_path, "schema.yaml", "type: mapping\nfields:\n  a:\n    type: x\n")
        data = _write(tmp_path, "data.yaml", "a: 1\n")
        code = run(["check", str(schema), str(data)], settings=settings)
        assert code == EXIT_USAGE
        assert "UNKNOWN_NODE_TYPE at fields.a" in capsys.readouterr().err

    def test_missing_data_file(
        self, tmp_path: Path, schema_file: Path, settings: Settings
    ) -> None:
        code = run(["check", str(schema_file), str(tmp_path / "nope.yaml")], settings=settings)
        assert code == EXIT_USAGE

    def test_unsafe_data_file(
        self, tmp_path: Path, schema_file: Path, settings: Settings
    ) -> None:
        data = _write(tmp_path, "data.yaml", "title: &t Title\ndescription: *t\n")
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_USAGE

    def test_deeply_nested_data_file(
        self, tmp_path: Path, schema_file: Path, settings: Settings
    ) -> None:
        data = _write(tmp_path, "data.yaml", "[" * 3000 + "]" * 3000 + "\n")
        code = run(["check", str(schema_file), str(data)], settings=settings)
        assert code == EXIT_USAGE


class TestDescribe:
    def test_describe(
        self,
        schema_file: Path,
        settings: Settings,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        code = run(["describe", str(schema_file)], settings=settings)
        assert code == EXIT_OK
        described = json.loads(capsys.readouterr().out)
        assert described["type"] == "mapping"
        assert described["fields"]["folder_id"] == {
            "type": "integer",
            "optional": True,
            "allowNone": True,
            "minValue": 1,
            "maxValue": 10,
        }
