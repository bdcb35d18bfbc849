"""Struct Generator - turns catalog columns into typed struct definitions."""

from .catalog import CatalogEnum, Column, ColumnRef, TableRef
from .config import GenerateSettings, PackageSettings, parse_settings
from .generator import Generator
from .imports import ImportSet, collect_imports
from .overrides import (
    ArrayColumnOverride,
    ColumnOverride,
    OverrideRule,
    TargetType,
    TypeDefault,
    parse_column_ref,
    parse_override,
    parse_target_type,
    resolve_column_override,
    resolve_type_default,
)
from .structs import (
    EnumDefinition,
    FieldDefinition,
    StructDefinition,
    build_enum,
    build_struct,
)
from .type_mapping import DEFAULT_GO_TYPES, map_column_type

__all__ = [
    # Catalog
    "CatalogEnum",
    "Column",
    "ColumnRef",
    "TableRef",
    # Settings
    "GenerateSettings",
    "PackageSettings",
    "parse_settings",
    # Overrides
    "ArrayColumnOverride",
    "ColumnOverride",
    "OverrideRule",
    "TargetType",
    "TypeDefault",
    "parse_column_ref",
    "parse_override",
    "parse_target_type",
    "resolve_column_override",
    "resolve_type_default",
    # Types
    "DEFAULT_GO_TYPES",
    "map_column_type",
    # Output
    "EnumDefinition",
    "FieldDefinition",
    "StructDefinition",
    "build_enum",
    "build_struct",
    "ImportSet",
    "collect_imports",
    "Generator",
]
