"""Shared utilities for the struct generator."""

from .settings_loader import (
    SUPPORTED_VERSIONS,
    load_settings_document,
)
from .naming import (
    ENUM_WORD_SEPARATORS,
    enum_value_name,
    field_name,
    singularize,
    struct_name_for_table,
)
from .errors import (
    CodegenError,
    ConfigurationError,
    UnsupportedTypeError,
)

__all__ = [
    # Settings loading
    "SUPPORTED_VERSIONS",
    "load_settings_document",
    # Naming utilities
    "ENUM_WORD_SEPARATORS",
    "enum_value_name",
    "field_name",
    "singularize",
    "struct_name_for_table",
    # Errors
    "CodegenError",
    "ConfigurationError",
    "UnsupportedTypeError",
]
