"""Catalog records consumed by the generator."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SCHEMA = "public"


@dataclass(frozen=True, slots=True)
class TableRef:
    """Fully-qualified relation reference."""

    schema: str
    name: str

    def __str__(self) -> str:
        return f"{self.schema}.{self.name}"


@dataclass(frozen=True, slots=True)
class ColumnRef:
    """Fully-qualified column reference (``schema.table.column``)."""

    schema: str
    table: str
    column: str

    def __str__(self) -> str:
        return f"{self.schema}.{self.table}.{self.column}"


@dataclass(frozen=True, slots=True)
class Column:
    """A database column as reported by the catalog."""

    name: str
    sql_type: str
    table: TableRef
    nullable: bool = True
    is_array: bool = False

    @property
    def ref(self) -> ColumnRef:
        return ColumnRef(self.table.schema, self.table.name, self.name)


@dataclass(frozen=True, slots=True)
class CatalogEnum:
    """An enum type and its labels in declaration order."""

    name: str
    labels: tuple[str, ...]
