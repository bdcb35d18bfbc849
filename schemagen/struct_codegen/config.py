"""Generation settings: packages, emission flags and their override rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, TextIO

from ..shared import ConfigurationError, load_settings_document
from .overrides import OverrideRule, parse_override


@dataclass(frozen=True, slots=True)
class PackageSettings:
    """One generation target."""

    name: str
    path: str | None = None
    queries: str | None = None
    schema: str | None = None
    emit_json_tags: bool = False
    emit_prepared_queries: bool = False
    overrides: tuple[OverrideRule, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> PackageSettings:
        if not isinstance(raw, Mapping):
            raise ConfigurationError("package entries must be mappings")

        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise ConfigurationError("package is missing required 'name'")

        raw_overrides = raw.get("overrides") or []
        if not isinstance(raw_overrides, list):
            raise ConfigurationError("'overrides' must be a list", name)

        return cls(
            name=name,
            path=raw.get("path"),
            queries=raw.get("queries"),
            schema=raw.get("schema"),
            emit_json_tags=bool(raw.get("emit_json_tags", False)),
            emit_prepared_queries=bool(raw.get("emit_prepared_queries", False)),
            overrides=tuple(parse_override(item, name) for item in raw_overrides),
        )


@dataclass(frozen=True)
class GenerateSettings:
    """Settings for a whole generation run.

    Built once and read many times; rule lists are tuples so they cannot be
    mutated after construction.

    Raises:
        ConfigurationError: If two packages share a name.
    """

    version: str = "1"
    packages: tuple[PackageSettings, ...] = ()
    overrides: tuple[OverrideRule, ...] = ()
    _package_map: dict[str, PackageSettings] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        package_map: dict[str, PackageSettings] = {}
        for package in self.packages:
            if package.name in package_map:
                raise ConfigurationError(
                    f"duplicate package name '{package.name}'", package.name
                )
            package_map[package.name] = package
        object.__setattr__(self, "_package_map", package_map)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> GenerateSettings:
        """Build settings from an already-deserialized settings document."""
        raw_packages = raw.get("packages") or []
        if not isinstance(raw_packages, list):
            raise ConfigurationError("'packages' must be a list")

        raw_overrides = raw.get("overrides") or []
        if not isinstance(raw_overrides, list):
            raise ConfigurationError("'overrides' must be a list")

        return cls(
            version=str(raw.get("version", "1")),
            packages=tuple(PackageSettings.from_dict(item) for item in raw_packages),
            overrides=tuple(parse_override(item) for item in raw_overrides),
        )

    def package(self, name: str) -> PackageSettings:
        try:
            return self._package_map[name]
        except KeyError:
            raise ConfigurationError(f"unknown package '{name}'") from None

    def overrides_for(self, name: str) -> tuple[OverrideRule, ...]:
        """Effective rules for a package: package-local first, then global."""
        return self.package(name).overrides + self.overrides


def parse_settings(source: str | TextIO) -> GenerateSettings:
    """Deserialize a settings document and build the settings it describes."""
    return GenerateSettings.from_dict(load_settings_document(source))
