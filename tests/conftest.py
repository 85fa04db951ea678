"""Shared test fixtures for ShapeCheck."""

from __future__ import annotations

import pytest

from shapecheck.parser.loader import TrackedLoader
from shapecheck.schema import SchemaBuilder
from shapecheck.validators import (
    IntegerValidator,
    MappingValidator,
    ParserContext,
    StringValidator,
)


@pytest.fixture
def loader() -> TrackedLoader:
    return TrackedLoader()


@pytest.fixture
def builder() -> SchemaBuilder:
    return SchemaBuilder()


@pytest.fixture
def context() -> ParserContext:
    return ParserContext.root()


@pytest.fixture
def document_validator() -> MappingValidator:
    """The document schema used across engine tests: a title, two ids and an organization."""
    return MappingValidator(
        schema={
            "title": StringValidator(min_length=2),
            "folder_id": IntegerValidator(
                optional=True, allow_none=True, min_value=1, max_value=10
            ),
            "owner_id": IntegerValidator(optional=True, allow_none=True),
            "description": StringValidator(optional=True, allow_none=True),
            "organization": MappingValidator(
                optional=True,
                allow_none=True,
                schema={
                    "id": IntegerValidator(),
                    "title": StringValidator(min_length=2),
                },
            ),
        }
    )


SAMPLE_DOCUMENT = {
    "title": "Title",
    "owner_id": 3,
    "folder_id": 1,
    "description": "",
    "organization": {
        "id": 3,
        "title": "My Organization",
    },
}


SAMPLE_SCHEMA_YAML = """\
type: mapping
fields:
  title:
    type: string
    minLength: 2
  folder_id:
    type: integer
    optional: true
    allowNone: true
    minValue: 1
    maxValue: 10
  owner_id:
    type: integer
    optional: true
    allowNone: true
  description:
    type: string
    optional: true
    allowNone: true
  organization:
    type: mapping
    optional: true
    allowNone: true
    fields:
      id:
        type: integer
      title:
        type: string
        minLength: 2
"""


SAMPLE_DATA_YAML = """\
title: Title
owner_id: 3
folder_id: 1
description: ''
organization:
  id: 3
  title: My Organization
"""
