"""Struct and enum definitions handed to the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from ..shared import enum_value_name, field_name
from .catalog import Column
from .config import GenerateSettings
from .type_mapping import map_column_type

JSON_TAG: str = "json"


@dataclass(frozen=True, slots=True)
class FieldDefinition:
    """A generated struct field."""

    name: str
    type: str
    tags: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class StructDefinition:
    """A generated struct; fields mirror the input column order."""

    name: str
    fields: tuple[FieldDefinition, ...]


@dataclass(frozen=True, slots=True)
class EnumDefinition:
    """A generated enum type and its (label, identifier) constants."""

    name: str
    constants: tuple[tuple[str, str], ...]


def _column_name(column: Column, position: int) -> str:
    """Name unnamed expression columns by their 1-based position."""
    return column.name or f"column_{position}"


def build_struct(
    struct_name: str,
    columns: Sequence[Column],
    settings: GenerateSettings,
    package_name: str,
    enum_types: Mapping[str, str] | None = None,
) -> StructDefinition:
    """Build a struct definition from an ordered list of columns.

    Repeated field names get a ``_N`` suffix (N starting at 2) on both the
    field name and the serialization tag, so ``count, count`` becomes
    ``Count`` / ``count`` and ``Count_2`` / ``count_2``.

    Raises:
        ConfigurationError: If the package is unknown.
        UnsupportedTypeError: If a column's type cannot be mapped.
    """
    package = settings.package(package_name)
    rules = settings.overrides_for(package_name)

    fields: list[FieldDefinition] = []
    seen: dict[str, int] = {}

    for position, column in enumerate(columns, start=1):
        tag_name = _column_name(column, position)
        name = field_name(tag_name)
        go_type = map_column_type(column, rules, enum_types, package_name)

        count = seen.get(name, 0)
        seen[name] = count + 1
        if count:
            tag_name = f"{tag_name}_{count + 1}"
            name = f"{name}_{count + 1}"

        tags = {JSON_TAG: tag_name} if package.emit_json_tags else {}
        fields.append(FieldDefinition(name=name, type=go_type, tags=tags))

    return StructDefinition(name=struct_name, fields=tuple(fields))


def enum_type_name(name: str) -> str:
    """Name the generated type for a catalog enum, ignoring its schema."""
    return field_name(name.rpartition(".")[2])


def build_enum(name: str, labels: Iterable[str]) -> EnumDefinition:
    """Build an enum definition, keeping label order."""
    return EnumDefinition(
        name=enum_type_name(name),
        constants=tuple((label, enum_value_name(label)) for label in labels),
    )
