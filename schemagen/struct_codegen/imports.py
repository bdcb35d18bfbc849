"""Import paths required by generated field types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Iterable, Sequence

from .overrides import OverrideRule
from .structs import StructDefinition

# Package qualifier -> import path for built-in mappings
BUILTIN_IMPORTS: Final[dict[str, str]] = {
    "sql": "database/sql",
    "time": "time",
    "json": "encoding/json",
    "uuid": "github.com/google/uuid",
}


@dataclass(frozen=True, slots=True)
class ImportSet:
    """Sorted standard-library and third-party import paths."""

    std: tuple[str, ...]
    packages: tuple[str, ...]


def _is_std(import_path: str) -> bool:
    # Third-party import paths start with a host name
    return "." not in import_path.split("/", 1)[0]


def _bare_type(type_name: str) -> str:
    return type_name.lstrip("[]*")


def collect_imports(
    structs: Iterable[StructDefinition],
    rules: Sequence[OverrideRule] = (),
) -> ImportSet:
    """Collect the imports needed by every field of ``structs``.

    Override targets win over built-in qualifiers when both name the same
    type.
    """
    override_paths = {
        _bare_type(rule.target.type_name): rule.target.import_path
        for rule in reversed(rules)
    }

    paths: set[str] = set()
    for struct in structs:
        for item in struct.fields:
            bare = _bare_type(item.type)
            if bare in override_paths:
                paths.add(override_paths[bare])
                continue
            qualifier, dot, _ = bare.partition(".")
            if dot and qualifier in BUILTIN_IMPORTS:
                paths.add(BUILTIN_IMPORTS[qualifier])

    return ImportSet(
        std=tuple(sorted(p for p in paths if _is_std(p))),
        packages=tuple(sorted(p for p in paths if not _is_std(p))),
    )
