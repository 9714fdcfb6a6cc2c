"""Build Segment values from raw leg records."""

from __future__ import annotations

import datetime
import logging
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from awards.catalogs import AircraftCatalog
from awards.errors import SegmentResolutionError
from awards.models import Segment

logger = logging.getLogger(__name__)


def parse_utc(value: Any, field: str = "date") -> datetime.datetime:
    """Parse a vendor timestamp as an aware UTC datetime.

    Accepts epoch milliseconds (int or digit string) and ISO-8601
    strings. Naive ISO values are taken to be UTC already.
    """
    if isinstance(value, bool) or value is None:
        raise SegmentResolutionError(f"Missing {field}")

    if isinstance(value, (int, float)):
        try:
            return datetime.datetime.fromtimestamp(value / 1000, tz=datetime.timezone.utc)
        except (OverflowError, OSError, ValueError):
            raise SegmentResolutionError(f"Out of range {field}: {value!r}")

    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return parse_utc(int(text), field)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.datetime.fromisoformat(text)
        except ValueError:
            raise SegmentResolutionError(f"Unparseable {field}: {value!r}")
        if dt.tzinfo is None:
            return dt.replace(tzinfo=datetime.timezone.utc)
        return dt.astimezone(datetime.timezone.utc)

    raise SegmentResolutionError(f"Unparseable {field}: {value!r}")


def days_between(departure: datetime.datetime, arrival: datetime.datetime) -> int:
    """Calendar days from the departure date to the arrival date."""
    return (arrival.date() - departure.date()).days


def find_aircraft(equipment: Optional[str], aircraft: AircraftCatalog) -> Optional[str]:
    """Map an IATA equipment code to its ICAO type, or pass it through."""
    if not equipment:
        return None
    result = aircraft.get(str(equipment))
    if result is None:
        logger.debug("Unknown equipment %s, passing through", equipment)
        return str(equipment)
    return result.icao


def _location(locations: Mapping[str, str], key: Any, field: str) -> str:
    code = locations.get(str(key)) if key is not None else None
    if code is None:
        raise SegmentResolutionError(f"Unknown {field} location key {key!r}")
    return code


def build_segment(
    leg: Mapping,
    locations: Mapping[str, str],
    aircraft: AircraftCatalog,
) -> Segment:
    """Convert one raw leg into a Segment.

    Raises:
        SegmentResolutionError: If an endpoint key is not in the location
            dictionary, a flight identifier or date is missing, or a
            field fails validation.
    """
    flight_id = leg.get("flightIdentifier")
    if not isinstance(flight_id, Mapping):
        raise SegmentResolutionError("Leg has no flightIdentifier")

    airline = flight_id.get("marketingAirline")
    number = flight_id.get("flightNumber")
    if not airline or number is None:
        raise SegmentResolutionError(f"Incomplete flightIdentifier: {dict(flight_id)!r}")
    airline = str(airline).upper()

    from_city = _location(locations, leg.get("originLocation"), "origin")
    to_city = _location(locations, leg.get("destinationLocation"), "destination")

    departure = parse_utc(flight_id.get("originDate") or leg.get("originDate"), "departure date")
    arrival = parse_utc(leg.get("destinationDate"), "arrival date")

    try:
        stops = int(leg.get("numberOfStops") or 0)
    except (TypeError, ValueError):
        raise SegmentResolutionError(f"Invalid numberOfStops: {leg.get('numberOfStops')!r}")

    try:
        return Segment(
            airline=airline,
            flight=f"{airline}{number}",
            aircraft=find_aircraft(leg.get("equipment"), aircraft),
            from_city=from_city,
            to_city=to_city,
            date=departure.date(),
            departure=departure,
            arrival=arrival,
            stops=stops,
            lag_days=days_between(departure, arrival),
        )
    except ValidationError as exc:
        raise SegmentResolutionError(f"Invalid segment {airline}{number}: {exc}") from exc
