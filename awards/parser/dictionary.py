"""Location dictionary resolution.

The response carries one shared dictionary of locations, referenced by
key from every leg. Airports ("A") carry their own IATA code; terminals
("T") point at a parent airport and inherit its code.

Shape::

    pageBom.dictionaries.classNameDictionary  {"3": "CXLocation", ...}
    pageBom.dictionaries.values."3"           {key: {dictionaryKey, type, code, parent}}
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

from awards.errors import StructuralParseError

logger = logging.getLogger(__name__)

_LOCATION_CLASS = "CXLocation"
_AIRPORT = "A"
_TERMINAL = "T"


def _require_mapping(obj: Any, path: str) -> Mapping:
    if not isinstance(obj, Mapping):
        raise StructuralParseError(f"Expected an object at {path}, got {type(obj).__name__}")
    return obj


def dictionaries_section(response: Mapping) -> Mapping:
    """Return pageBom.dictionaries, or raise if absent."""
    page = _require_mapping(response, "<root>").get("pageBom")
    page = _require_mapping(page, "pageBom")
    return _require_mapping(page.get("dictionaries"), "pageBom.dictionaries")


def location_index(dictionaries: Mapping) -> str:
    """Find the values index holding location records."""
    class_names = _require_mapping(
        dictionaries.get("classNameDictionary"),
        "pageBom.dictionaries.classNameDictionary",
    )
    for idx, name in class_names.items():
        if name == _LOCATION_CLASS:
            return str(idx)
    raise StructuralParseError(f"No {_LOCATION_CLASS} entry in classNameDictionary")


def resolve_locations(response: Mapping) -> Mapping[str, str]:
    """Build the dictionary key -> airport code lookup for a response.

    Keys are normalized to strings. The returned mapping is read-only.

    Raises:
        StructuralParseError: If the dictionary section is missing or
            malformed, an airport has no code, or a terminal's parent is
            not an airport in the same value list.
    """
    dictionaries = dictionaries_section(response)
    idx = location_index(dictionaries)

    values = _require_mapping(dictionaries.get("values"), "pageBom.dictionaries.values")
    if idx not in values and idx.isdigit() and int(idx) in values:
        idx = int(idx)
    entries = _require_mapping(values.get(idx), f"pageBom.dictionaries.values.{idx}")

    by_key: dict[str, Mapping] = {}
    for entry in entries.values():
        if not isinstance(entry, Mapping) or entry.get("dictionaryKey") is None:
            logger.debug("Skipping malformed location entry: %r", entry)
            continue
        by_key[str(entry["dictionaryKey"])] = entry

    locations: dict[str, str] = {}

    # Airports
    for key, entry in by_key.items():
        if entry.get("type") != _AIRPORT:
            continue
        code = entry.get("code")
        if not code:
            raise StructuralParseError(f"Airport entry {key} has no code")
        locations[key] = str(code).upper()

    # Terminals
    for key, entry in by_key.items():
        if entry.get("type") != _TERMINAL:
            continue
        parent_key = entry.get("parent")
        parent = by_key.get(str(parent_key)) if parent_key is not None else None
        if parent is None or parent.get("type") != _AIRPORT:
            raise StructuralParseError(
                f"Terminal {key} references unknown parent airport {parent_key!r}"
            )
        locations[key] = locations[str(parent_key)]

    logger.debug("Resolved %d locations", len(locations))
    return MappingProxyType(locations)
