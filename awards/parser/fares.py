"""Resolve a flight's fare from the tag embedded in its identifier string.

Flight identifier strings end in ``..._<tier>_<cabin>``, for example
``CX888_HKGYVR_20261103_STD_BUS``. Tier and cabin map to one letter
each; cabin letter + tier letter is the fare code (``CS``).
"""

from __future__ import annotations

from awards.catalogs import FareCatalog
from awards.errors import FareResolutionError
from awards.models import FareDefinition

_SEPARATOR = "_"

TIER_IDS: dict[str, str] = {"STD": "S", "PT1": "1", "PT2A": "2"}
CABIN_IDS: dict[str, str] = {"ECO": "Y", "PEY": "W", "BUS": "C", "FIR": "F"}


def fare_code(flight_id: str) -> str:
    """Two-character fare code for a flight identifier string.

    Raises:
        FareResolutionError: If the tier or cabin tag is missing or unknown.
    """
    parts = str(flight_id).split(_SEPARATOR)
    if len(parts) < 2:
        raise FareResolutionError(f"Failed to parse fare from: {flight_id}")
    tier, cabin = parts[-2], parts[-1]
    if tier not in TIER_IDS or cabin not in CABIN_IDS:
        raise FareResolutionError(
            f"Failed to parse fare from: {flight_id} (tier={tier!r}, cabin={cabin!r})"
        )
    return CABIN_IDS[cabin] + TIER_IDS[tier]


def resolve_fare(flight_id: str, fares: FareCatalog) -> FareDefinition:
    """Look up the fare definition for a flight identifier string.

    Raises:
        FareResolutionError: If the tags are unknown or the fare code has
            no catalog entry.
    """
    code = fare_code(flight_id)
    fare = fares.get(code)
    if fare is None:
        raise FareResolutionError(f"Fare {code} not found for: {flight_id}")
    return fare
