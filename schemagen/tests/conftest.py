"""Shared fixtures for the struct generator tests."""

from __future__ import annotations

from typing import Any

import pytest

from schemagen.struct_codegen.catalog import Column, TableRef
from schemagen.struct_codegen.config import GenerateSettings

FOO = TableRef("public", "foo")


def make_column(
    name: str,
    sql_type: str,
    nullable: bool = False,
    is_array: bool = False,
    table: TableRef = FOO,
) -> Column:
    return Column(
        name=name,
        sql_type=sql_type,
        table=table,
        nullable=nullable,
        is_array=is_array,
    )


@pytest.fixture
def raw_settings() -> dict[str, Any]:
    return {
        "version": "1",
        "packages": [
            {"name": "db"},
            {
                "name": "prepared",
                "queries": "testdata/ondeck/query",
                "emit_prepared_queries": True,
            },
            {
                "name": "ondeck",
                "queries": "testdata/ondeck/query",
                "emit_json_tags": True,
            },
            {
                "name": "test_override",
                "emit_json_tags": True,
                "overrides": [
                    {"go_type": "example.com/pkg.CustomType", "column": "foo.retyped"},
                    {
                        "go_type": "github.com/lib/pq.StringArray",
                        "column": "foo.languages",
                        "array": True,
                    },
                ],
            },
        ],
        "overrides": [],
    }


@pytest.fixture
def settings(raw_settings) -> GenerateSettings:
    return GenerateSettings.from_dict(raw_settings)
