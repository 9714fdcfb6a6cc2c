"""Fare and aircraft reference catalogs.

Both catalogs are read-only lookups injected into the parser. The
defaults are loaded from fares.yaml and aircraft.yaml in the package
data directory; tests and callers may pass their own files or build a
catalog from model instances.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Union

import yaml
from pydantic import ValidationError

from awards.errors import CatalogError
from awards.models import AircraftType, FareDefinition

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"
DEFAULT_FARES_PATH = _DATA_DIR / "fares.yaml"
DEFAULT_AIRCRAFT_PATH = _DATA_DIR / "aircraft.yaml"


class FareCatalog(Protocol):
    """Lookup of fare definitions by two-character fare code."""

    def get(self, code: str) -> Optional[FareDefinition]: ...


class AircraftCatalog(Protocol):
    """Lookup of aircraft types by IATA equipment code."""

    def get(self, iata: str) -> Optional[AircraftType]: ...


def _read_yaml(path: Union[str, Path]) -> dict:
    path = Path(path)
    if not path.exists():
        raise CatalogError(f"Catalog file not found: {path}")
    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise CatalogError(f"YAML parse error in {path}: {exc}") from exc
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise CatalogError(f"Expected a YAML mapping in {path}, got {type(raw).__name__}")
    return raw


class StaticFareCatalog:
    """In-memory fare catalog."""

    def __init__(self, fares: Iterable[FareDefinition]) -> None:
        self._fares: dict[str, FareDefinition] = {f.code: f for f in fares}

    def get(self, code: str) -> Optional[FareDefinition]:
        return self._fares.get(code)

    def __iter__(self):
        return iter(self._fares.values())

    def __len__(self) -> int:
        return len(self._fares)

    @classmethod
    def from_yaml(cls, path: Union[str, Path] = DEFAULT_FARES_PATH) -> "StaticFareCatalog":
        """Load fares from a YAML mapping of code -> {cabin, saver, name}."""
        raw = _read_yaml(path)
        fares = []
        for code, entry in raw.items():
            try:
                fares.append(FareDefinition(code=str(code), **(entry or {})))
            except (TypeError, ValidationError) as exc:
                raise CatalogError(f"Invalid fare {code!r} in {path}: {exc}") from exc
        logger.debug("Loaded %d fares from %s", len(fares), path)
        return cls(fares)


class StaticAircraftCatalog:
    """In-memory aircraft type catalog."""

    def __init__(self, aircraft: Iterable[AircraftType]) -> None:
        self._aircraft: dict[str, AircraftType] = {a.iata: a for a in aircraft}

    def get(self, iata: str) -> Optional[AircraftType]:
        if iata is None:
            return None
        return self._aircraft.get(str(iata).upper())

    def __iter__(self):
        return iter(self._aircraft.values())

    def __len__(self) -> int:
        return len(self._aircraft)

    @classmethod
    def from_yaml(cls, path: Union[str, Path] = DEFAULT_AIRCRAFT_PATH) -> "StaticAircraftCatalog":
        """Load aircraft from a YAML mapping of IATA code -> {icao, name}."""
        raw = _read_yaml(path)
        aircraft = []
        for iata, entry in raw.items():
            try:
                aircraft.append(AircraftType(iata=str(iata), **(entry or {})))
            except (TypeError, ValidationError) as exc:
                raise CatalogError(f"Invalid aircraft {iata!r} in {path}: {exc}") from exc
        logger.debug("Loaded %d aircraft types from %s", len(aircraft), path)
        return cls(aircraft)


def load_fares(path: Optional[Union[str, Path]] = None) -> StaticFareCatalog:
    """Load a fare catalog, defaulting to the bundled fares.yaml."""
    return StaticFareCatalog.from_yaml(path or DEFAULT_FARES_PATH)


def load_aircraft(path: Optional[Union[str, Path]] = None) -> StaticAircraftCatalog:
    """Load an aircraft catalog, defaulting to the bundled aircraft.yaml."""
    return StaticAircraftCatalog.from_yaml(path or DEFAULT_AIRCRAFT_PATH)
