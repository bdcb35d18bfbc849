"""
Column type resolution.

Built-in mappings pair every known SQL type name with a not-null type and a
nullable type. Nullable types can carry "no value" distinctly from the zero
value. SQL types missing from the table are rejected instead of guessed.
"""

from __future__ import annotations

from typing import Final, Mapping, Sequence

from ..shared import UnsupportedTypeError
from .catalog import Column
from .overrides import OverrideRule, resolve_column_override, resolve_type_default

_INT16: Final = ("int16", "sql.NullInt16")
_INT32: Final = ("int32", "sql.NullInt32")
_INT64: Final = ("int64", "sql.NullInt64")
_FLOAT32: Final = ("float32", "sql.NullFloat64")
_FLOAT64: Final = ("float64", "sql.NullFloat64")
_BOOL: Final = ("bool", "sql.NullBool")
_STRING: Final = ("string", "sql.NullString")
_BYTES: Final = ("[]byte", "[]byte")
_TIME: Final = ("time.Time", "sql.NullTime")
_JSON: Final = ("json.RawMessage", "json.RawMessage")
_UUID: Final = ("uuid.UUID", "uuid.NullUUID")

# SQL type name -> (not-null type, nullable type)
DEFAULT_GO_TYPES: Final[dict[str, tuple[str, str]]] = {
    # Numeric types
    "smallint": _INT16,
    "int2": _INT16,
    "pg_catalog.int2": _INT16,
    "smallserial": _INT16,
    "serial2": _INT16,
    "pg_catalog.serial2": _INT16,
    "integer": _INT32,
    "int": _INT32,
    "int4": _INT32,
    "pg_catalog.int4": _INT32,
    "serial": _INT32,
    "serial4": _INT32,
    "pg_catalog.serial4": _INT32,
    "bigint": _INT64,
    "int8": _INT64,
    "pg_catalog.int8": _INT64,
    "bigserial": _INT64,
    "serial8": _INT64,
    "pg_catalog.serial8": _INT64,
    "real": _FLOAT32,
    "float4": _FLOAT32,
    "pg_catalog.float4": _FLOAT32,
    "float": _FLOAT64,
    "double precision": _FLOAT64,
    "float8": _FLOAT64,
    "pg_catalog.float8": _FLOAT64,
    # There is no decimal type in the standard library; drivers return strings
    "numeric": _STRING,
    "decimal": _STRING,
    "pg_catalog.numeric": _STRING,
    # Boolean
    "bool": _BOOL,
    "boolean": _BOOL,
    "pg_catalog.bool": _BOOL,
    # Character types
    "text": _STRING,
    "string": _STRING,
    "varchar": _STRING,
    "pg_catalog.varchar": _STRING,
    "char": _STRING,
    "bpchar": _STRING,
    "pg_catalog.bpchar": _STRING,
    "citext": _STRING,
    # Binary
    "bytea": _BYTES,
    "blob": _BYTES,
    "pg_catalog.bytea": _BYTES,
    # Date/time types
    "date": _TIME,
    "pg_catalog.date": _TIME,
    "time": _TIME,
    "timetz": _TIME,
    "pg_catalog.time": _TIME,
    "pg_catalog.timetz": _TIME,
    "timestamp": _TIME,
    "timestamptz": _TIME,
    "pg_catalog.timestamp": _TIME,
    "pg_catalog.timestamptz": _TIME,
    # Documents and identifiers
    "json": _JSON,
    "jsonb": _JSON,
    "uuid": _UUID,
}


def map_column_type(
    column: Column,
    rules: Sequence[OverrideRule] = (),
    enum_types: Mapping[str, str] | None = None,
    package: str | None = None,
) -> str:
    """Resolve the generated type for a column.

    Args:
        column: Catalog column.
        rules: Effective override rules, most specific first.
        enum_types: Catalog enum name -> generated enum type name.
        package: Package being generated, for error context.

    Returns:
        The type name, import-qualified where it comes from another package.

    Raises:
        UnsupportedTypeError: If nothing maps the column's SQL type.
        ConfigurationError: If an array override names this scalar column.
    """
    # Column overrides are authoritative, nullability included
    target = resolve_column_override(column, rules, package)
    if target is not None:
        return target.type_name

    element = _element_type(column, rules, enum_types or {}, package)
    if column.is_array:
        return f"[]{element}"
    return element


def _element_type(
    column: Column,
    rules: Sequence[OverrideRule],
    enum_types: Mapping[str, str],
    package: str | None,
) -> str:
    # Array elements always use the not-null type
    nullable = column.nullable and not column.is_array

    target = resolve_type_default(column.sql_type, nullable, rules)
    if target is not None:
        return target.type_name

    if column.sql_type in enum_types:
        return enum_types[column.sql_type]

    pair = DEFAULT_GO_TYPES.get(column.sql_type)
    if pair is None:
        raise UnsupportedTypeError(column.sql_type, str(column.ref), package)

    not_null_type, nullable_type = pair
    return nullable_type if nullable else not_null_type
