"""
Override rules: parsing raw declarations and matching them against columns.

A rule is one of three shapes:

- ``TypeDefault`` replaces the built-in mapping for one SQL type and
  nullability.
- ``ColumnOverride`` pins the type of one scalar column.
- ``ArrayColumnOverride`` pins the type of one array column.

Column-scoped rules are consulted before type-scoped ones, and rule lists are
searched in order, so earlier rules shadow later ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence, Union

from ..shared import ConfigurationError
from .catalog import DEFAULT_SCHEMA, Column, ColumnRef

_FORMAT_HINT = "expected 'package.Type', e.g. 'github.com/segmentio/ksuid.KSUID'"


@dataclass(frozen=True, slots=True)
class TargetType:
    """A generated type name and the import path that provides it."""

    import_path: str
    type_name: str

    @property
    def is_pointer(self) -> bool:
        return self.type_name.startswith("*")


@dataclass(frozen=True, slots=True)
class TypeDefault:
    sql_type: str
    nullable: bool
    target: TargetType


@dataclass(frozen=True, slots=True)
class ColumnOverride:
    column: ColumnRef
    target: TargetType


@dataclass(frozen=True, slots=True)
class ArrayColumnOverride:
    column: ColumnRef
    target: TargetType


OverrideRule = Union[TypeDefault, ColumnOverride, ArrayColumnOverride]


def parse_target_type(raw: str, package: str | None = None) -> TargetType:
    """Split ``import/path/pkg.Type`` into its import path and ``pkg.Type``.

    A leading ``*`` is kept on the type name. A ``go-`` prefix or ``-go``
    suffix on the package segment is stripped, since neither is a valid
    package identifier.

    Raises:
        ConfigurationError: If the value has no package qualifier.
    """
    value = raw.strip()
    pointer = value.startswith("*")
    if pointer:
        value = value[1:]

    last_dot = value.rfind(".")
    if last_dot == -1:
        raise ConfigurationError(f"not the proper format, {_FORMAT_HINT}", package, raw)

    import_path = value[:last_dot]
    pkg_name, _, name = value[value.rfind("/") + 1 :].rpartition(".")
    pkg_name = pkg_name.removeprefix("go-").removesuffix("-go")
    if not import_path or not pkg_name or not name:
        raise ConfigurationError(f"not the proper format, {_FORMAT_HINT}", package, raw)

    type_name = f"{pkg_name}.{name}"
    if pointer:
        type_name = f"*{type_name}"
    return TargetType(import_path=import_path, type_name=type_name)


def parse_column_ref(raw: str, package: str | None = None) -> ColumnRef:
    """Parse ``table.column`` or ``schema.table.column``.

    Raises:
        ConfigurationError: If the reference has any other shape.
    """
    parts = raw.split(".")
    if any(not part for part in parts):
        raise ConfigurationError(f"column reference '{raw}' has an empty part", package)
    if len(parts) == 2:
        return ColumnRef(DEFAULT_SCHEMA, parts[0], parts[1])
    if len(parts) == 3:
        return ColumnRef(parts[0], parts[1], parts[2])
    raise ConfigurationError(
        f"column reference '{raw}' must be 'table.column' or 'schema.table.column'",
        package,
    )


def parse_override(raw: Mapping[str, Any], package: str | None = None) -> OverrideRule:
    """Build a rule from one raw override entry.

    Raises:
        ConfigurationError: If the entry is malformed.
    """
    if not isinstance(raw, Mapping):
        raise ConfigurationError("override entries must be mappings", package)

    go_type = raw.get("go_type")
    if not isinstance(go_type, str) or not go_type:
        raise ConfigurationError("override is missing required 'go_type'", package)

    column = raw.get("column")
    sql_type = raw.get("postgres_type")
    if column and sql_type:
        raise ConfigurationError(
            f"specifies both 'column' ({column!r}) and 'postgres_type' ({sql_type!r})",
            package,
            go_type,
        )
    if not column and not sql_type:
        raise ConfigurationError(
            "must specify one of either 'column' or 'postgres_type'", package, go_type
        )

    target = parse_target_type(go_type, package)
    if column:
        if "null" in raw:
            raise ConfigurationError(
                "'null' only applies to 'postgres_type' overrides", package, go_type
            )
        ref = parse_column_ref(str(column), package)
        if raw.get("array", False):
            return ArrayColumnOverride(column=ref, target=target)
        return ColumnOverride(column=ref, target=target)

    if "array" in raw:
        raise ConfigurationError(
            "'array' only applies to 'column' overrides", package, go_type
        )
    return TypeDefault(
        sql_type=str(sql_type),
        nullable=bool(raw.get("null", False)),
        target=target,
    )


def resolve_column_override(
    column: Column,
    rules: Sequence[OverrideRule],
    package: str | None = None,
) -> Optional[TargetType]:
    """Find the column-scoped rule for ``column``.

    The rule's array shape must agree with the column. An array-scoped rule
    that names a scalar column is an error: the schema no longer matches the
    configuration.

    Raises:
        ConfigurationError: If only an array-scoped rule names a scalar column.
    """
    ref = column.ref
    shape_mismatch: ArrayColumnOverride | None = None
    for rule in rules:
        if isinstance(rule, TypeDefault) or rule.column != ref:
            continue
        if isinstance(rule, ArrayColumnOverride):
            if column.is_array:
                return rule.target
            shape_mismatch = shape_mismatch or rule
        elif not column.is_array:
            return rule.target

    if shape_mismatch is not None:
        raise ConfigurationError(
            f"array override targets scalar column '{ref}'",
            package,
            shape_mismatch.target.type_name,
        )
    return None


def resolve_type_default(
    sql_type: str,
    nullable: bool,
    rules: Sequence[OverrideRule],
) -> Optional[TargetType]:
    """Find the first type-scoped rule for a SQL type and nullability."""
    for rule in rules:
        if isinstance(rule, TypeDefault) and rule.sql_type == sql_type and rule.nullable == nullable:
            return rule.target
    return None
