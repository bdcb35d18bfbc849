"""Settings document deserialization."""

from __future__ import annotations

from typing import Any, TextIO

import yaml

from .errors import ConfigurationError

SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1"})


def load_settings_document(source: str | TextIO) -> dict[str, Any]:
    """Deserialize a raw settings document.

    Args:
        source: Document text, or an open text stream. JSON documents are
            accepted as well since JSON is a subset of YAML.

    Returns:
        The raw settings mapping.

    Raises:
        ConfigurationError: If the document cannot be parsed, is not a
            mapping, or declares an unsupported version.
    """
    try:
        data = yaml.safe_load(source)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid settings document: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Settings root must be a mapping")

    version = data.get("version")
    if version is None:
        raise ConfigurationError("Settings document is missing 'version'")
    if str(version) not in SUPPORTED_VERSIONS:
        raise ConfigurationError(f"Unsupported settings version '{version}'")

    return data
