"""Custom exceptions for the struct generator."""

from __future__ import annotations


class CodegenError(Exception):
    """Base exception for generation errors."""

    def __init__(self, message: str, package: str | None = None) -> None:
        self.package = package
        full_message = f"{message}" if not package else f"[{package}] {message}"
        super().__init__(full_message)


class ConfigurationError(CodegenError):
    """Raised when the settings document cannot be turned into rules."""

    def __init__(
        self,
        message: str,
        package: str | None = None,
        override: str | None = None,
    ) -> None:
        self.override = override
        if override:
            message = f"Override '{override}': {message}"
        super().__init__(message, package)


class UnsupportedTypeError(CodegenError):
    """Raised when a column's SQL type has no override and no built-in mapping."""

    def __init__(
        self,
        sql_type: str,
        column: str,
        package: str | None = None,
    ) -> None:
        self.sql_type = sql_type
        self.column = column
        super().__init__(
            f"No type mapping for '{sql_type}' (column '{column}')", package
        )
