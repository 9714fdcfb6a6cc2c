"""JSON output formatter -- valid JSON suitable for piping to jq."""

from __future__ import annotations

import json

from awards.models import AircraftType, FareDefinition, Itinerary


class JsonFormatter:
    """Format results as pretty-printed JSON."""

    def format_itineraries(self, itineraries: list[Itinerary]) -> str:
        """Format parsed itineraries as JSON."""
        awards = [a for it in itineraries for a in it.awards]
        data = {
            "type": "award_search_results",
            "summary": {
                "itinerary_count": len(itineraries),
                "waitlisted_count": sum(1 for a in awards if a.waitlisted),
                "partner_count": sum(1 for a in awards if a.partner),
            },
            "itineraries": [it.model_dump(mode="json") for it in itineraries],
        }
        return json.dumps(data, indent=2)

    def format_fares(self, fares: list[FareDefinition]) -> str:
        """Format the fare catalog as JSON."""
        data = {
            "type": "fare_catalog",
            "fare_count": len(fares),
            "fares": [f.model_dump(mode="json") for f in fares],
        }
        return json.dumps(data, indent=2)

    def format_aircraft(self, aircraft: list[AircraftType]) -> str:
        """Format the aircraft catalog as JSON."""
        data = {
            "type": "aircraft_catalog",
            "aircraft_count": len(aircraft),
            "aircraft": [a.model_dump(mode="json") for a in aircraft],
        }
        return json.dumps(data, indent=2)
