"""Award search response parsing - locations, segments, availability and fares."""

from awards.parser.assembler import FlightAssembler, parse_response
from awards.parser.availability import availability_map, cabin_availability
from awards.parser.dictionary import resolve_locations
from awards.parser.fares import resolve_fare
from awards.parser.segments import build_segment

__all__ = [
    "FlightAssembler",
    "availability_map",
    "build_segment",
    "cabin_availability",
    "parse_response",
    "resolve_fare",
    "resolve_locations",
]
