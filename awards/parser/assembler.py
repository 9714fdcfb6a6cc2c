"""Assemble itineraries and award offers from an award search response.

Each raw flight is handled on its own. A flight is dropped when no cabin
is bookable, when its fare cabin is not bookable, or when one of its legs
or its fare tag cannot be resolved. Structural problems with the response
itself abort the whole parse.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from awards.catalogs import AircraftCatalog, FareCatalog, load_aircraft, load_fares
from awards.config import ParserConfig
from awards.errors import FareResolutionError, SegmentResolutionError, StructuralParseError
from awards.models import Award, Itinerary, ParseQuery, Segment
from awards.parser.availability import availability_map
from awards.parser.dictionary import resolve_locations
from awards.parser.fares import resolve_fare
from awards.parser.segments import build_segment

logger = logging.getLogger(__name__)


def raw_flights(response: Mapping) -> list[Mapping]:
    """Flights from every bound, in response order.

    Path: pageBom.modelObject.availabilities.upsell.bounds[*].flights[*]
    """
    node: Any = response
    path = ["pageBom", "modelObject", "availabilities", "upsell", "bounds"]
    for i, key in enumerate(path):
        if not isinstance(node, Mapping) or key not in node:
            raise StructuralParseError(f"Missing {'.'.join(path[: i + 1])} in response")
        node = node[key]

    bounds = node if isinstance(node, list) else [node]
    flights: list[Mapping] = []
    for bound in bounds:
        if not isinstance(bound, Mapping):
            raise StructuralParseError(f"Unexpected bound value: {bound!r}")
        for flight in bound.get("flights") or []:
            if not isinstance(flight, Mapping):
                raise StructuralParseError(f"Unexpected flight value: {flight!r}")
            flights.append(flight)
    return flights


def mileage_cost(miles_info: Optional[Mapping], flight_id: str) -> Optional[int]:
    """Positive mileage cost for a flight, or None."""
    if not miles_info:
        return None
    value = miles_info.get(flight_id)
    if isinstance(value, bool) or value is None:
        return None
    try:
        miles = int(float(value))
    except (TypeError, ValueError, OverflowError):
        logger.debug("Ignoring non-numeric mileage %r for %s", value, flight_id)
        return None
    return miles if miles > 0 else None


class FlightAssembler:
    """Turn a raw award search response into Itinerary values.

    Usage::

        assembler = FlightAssembler(load_fares(), load_aircraft())
        itineraries = assembler.parse(response, ParseQuery(quantity=2))
    """

    def __init__(
        self,
        fares: FareCatalog,
        aircraft: AircraftCatalog,
        config: Optional[ParserConfig] = None,
    ) -> None:
        self._fares = fares
        self._aircraft = aircraft
        self._config = config or ParserConfig()

    def parse(self, response: Mapping, query: Optional[ParseQuery] = None) -> list[Itinerary]:
        """Parse a whole response.

        Raises:
            StructuralParseError: If the response (or any flight in it) is
                structurally unparseable. No partial results are returned.
        """
        if query is None:
            query = ParseQuery(quantity=self._config.default_quantity)
        engine = query.engine or self._config.engine

        locations = resolve_locations(response)
        flights = raw_flights(response)
        miles_info = response.get("milesInfo")
        if miles_info is not None and not isinstance(miles_info, Mapping):
            logger.warning("Ignoring milesInfo of type %s", type(miles_info).__name__)
            miles_info = None

        results: list[Itinerary] = []
        for flight in flights:
            itinerary = self.parse_flight(flight, locations, query.quantity, engine, miles_info)
            if itinerary is not None:
                results.append(itinerary)

        logger.info("Parsed %d of %d flights", len(results), len(flights))
        return results

    def parse_flight(
        self,
        flight: Mapping,
        locations: Mapping[str, str],
        quantity: int,
        engine: str,
        miles_info: Optional[Mapping] = None,
    ) -> Optional[Itinerary]:
        """Parse one raw flight, or return None if it is not bookable."""
        flight_id = str(flight.get("flightIdString", ""))
        legs = flight.get("segments")
        if not isinstance(legs, list):
            raise StructuralParseError(f"Flight {flight_id!r} has no segment list")

        availability = availability_map(legs, quantity)
        if not availability:
            logger.debug("No bookable cabin for %s", flight_id)
            return None

        try:
            segments = [build_segment(leg, locations, self._aircraft) for leg in legs]
        except SegmentResolutionError as exc:
            logger.warning("Skipping %s: %s", flight_id, exc)
            return None

        partner = self.is_partner(segments)

        try:
            fare = resolve_fare(flight_id, self._fares)
        except FareResolutionError as exc:
            logger.warning("Skipping %s: %s", flight_id, exc)
            return None

        data = availability.get(fare.cabin)
        if data is None or data.quantity is None:
            logger.debug("Fare cabin %s not bookable for %s", fare.cabin.value, flight_id)
            return None

        award = Award(
            engine=engine,
            partner=partner,
            fare=fare,
            cabins=data.cabins,
            quantity=data.quantity,
            exact=data.exact,
            waitlisted=data.waitlisted,
            mileage_cost=mileage_cost(miles_info, flight_id),
        )
        return Itinerary(segments=segments, awards=[award])

    def is_partner(self, segments: list[Segment]) -> bool:
        """True if any segment is flown by a partner carrier."""
        return any(self._config.is_partner(s.airline) for s in segments)


def parse_response(
    response: Mapping,
    query: Optional[ParseQuery] = None,
    fares: Optional[FareCatalog] = None,
    aircraft: Optional[AircraftCatalog] = None,
    config: Optional[ParserConfig] = None,
) -> list[Itinerary]:
    """Parse a response using the bundled catalogs unless others are given."""
    assembler = FlightAssembler(
        fares if fares is not None else load_fares(),
        aircraft if aircraft is not None else load_aircraft(),
        config,
    )
    return assembler.parse(response, query)
