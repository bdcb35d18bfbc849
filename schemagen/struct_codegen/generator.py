"""
Struct Generator - builds struct and enum definitions for one package.

A ``Generator`` binds a package's resolved override rules, emission flags and
the catalog's enum types, then turns column lists into struct definitions.
It holds no mutable state after construction, so independent structs may be
built from several threads at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

from ..shared import struct_name_for_table
from .catalog import CatalogEnum, Column, TableRef
from .config import GenerateSettings, PackageSettings
from .imports import ImportSet, collect_imports
from .overrides import OverrideRule
from .structs import (
    EnumDefinition,
    StructDefinition,
    build_enum,
    build_struct,
    enum_type_name,
)


@dataclass(frozen=True)
class Generator:
    """Generation context for a single package."""

    settings: GenerateSettings
    package_name: str
    enums: Sequence[CatalogEnum] = ()
    package: PackageSettings = field(init=False)
    rules: tuple[OverrideRule, ...] = field(init=False)
    enum_types: Mapping[str, str] = field(init=False)

    def __post_init__(self) -> None:
        # Unknown packages fail here, before any column is processed
        object.__setattr__(self, "package", self.settings.package(self.package_name))
        object.__setattr__(self, "rules", self.settings.overrides_for(self.package_name))
        object.__setattr__(
            self,
            "enum_types",
            {enum.name: enum_type_name(enum.name) for enum in self.enums},
        )

    def build_struct(self, struct_name: str, columns: Sequence[Column]) -> StructDefinition:
        return build_struct(
            struct_name,
            columns,
            self.settings,
            self.package_name,
            self.enum_types,
        )

    def build_enums(self) -> list[EnumDefinition]:
        return [build_enum(enum.name, enum.labels) for enum in self.enums]

    def build_models(
        self,
        tables: Iterable[tuple[TableRef, Sequence[Column]]],
    ) -> list[StructDefinition]:
        """Build one model struct per table, in input order."""
        return [
            self.build_struct(struct_name_for_table(table.name), columns)
            for table, columns in tables
        ]

    def imports(self, structs: Iterable[StructDefinition]) -> ImportSet:
        return collect_imports(structs, self.rules)
