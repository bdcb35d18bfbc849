"""Naming utilities for code generation."""

from __future__ import annotations

from functools import lru_cache

# Characters that end a word inside an enum label
ENUM_WORD_SEPARATORS: frozenset[str] = frozenset("-_:/")

# Common irregular plurals
_IRREGULAR_PLURALS: dict[str, str] = {
    "children": "child",
    "people": "person",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "geese": "goose",
    "teeth": "tooth",
    "feet": "foot",
    "data": "datum",
    "criteria": "criterion",
    "analyses": "analysis",
    "indices": "index",
    "appendices": "appendix",
    "matrices": "matrix",
    "vertices": "vertex",
}


@lru_cache(maxsize=1024)
def singularize(name: str) -> str:
    """Convert a plural word to singular form.

    Uses caching for repeated calls with the same input.
    """
    lower = name.lower()
    if lower in _IRREGULAR_PLURALS:
        # Preserve original case pattern
        singular = _IRREGULAR_PLURALS[lower]
        if name[0].isupper():
            return singular.capitalize()
        return singular

    # Apply rules in order of specificity
    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    if name.endswith("ses") and len(name) > 3:
        return name[:-2]
    if name.endswith("xes") and len(name) > 3:
        return name[:-2]
    if name.endswith("zes") and len(name) > 3:
        return name[:-2]
    if name.endswith("ches") and len(name) > 4:
        return name[:-2]
    if name.endswith("shes") and len(name) > 4:
        return name[:-2]
    if name.endswith("s") and not name.endswith("ss") and len(name) > 1:
        return name[:-1]
    return name


@lru_cache(maxsize=1024)
def field_name(value: str) -> str:
    """Convert a column or table name to an exported identifier.

    Segments are split on ``_``; only the first letter of each segment is
    upper-cased, the rest keeps its case. Empty segments are skipped.

    Examples:
        >>> field_name("byte_seq")
        'ByteSeq'
        >>> field_name("_user__id_")
        'UserId'
        >>> field_name("createdAt")
        'CreatedAt'
    """
    return "".join(part[:1].upper() + part[1:] for part in value.split("_") if part)


def _is_ident_char(char: str) -> bool:
    return char.isascii() and char.isalnum()


@lru_cache(maxsize=1024)
def enum_value_name(label: str) -> str:
    """Convert an enum label to an identifier.

    Separators (``-``, ``_``, ``:``, ``/``) are dropped and capitalize the
    next character. Other punctuation is dropped without starting a new word.
    The first emitted character is always upper-cased.

    Examples:
        >>> enum_value_name("foo-bar")
        'FooBar'
        >>> enum_value_name("foo@bar")
        'Foobar'
    """
    out: list[str] = []
    boundary = False
    for char in label:
        if char in ENUM_WORD_SEPARATORS:
            boundary = True
            continue
        if not _is_ident_char(char):
            continue
        if boundary or not out:
            char = char.upper()
        out.append(char)
        boundary = False
    return "".join(out)


@lru_cache(maxsize=1024)
def struct_name_for_table(relation: str) -> str:
    """Name the model struct for a table (``authors`` -> ``Author``)."""
    return field_name(singularize(relation))
