"""Output formatters for parsed award results.

Provides a Formatter protocol and three implementations:
- RichFormatter: colored Rich tables
- PlainFormatter: plain text without ANSI escapes
- JsonFormatter: valid JSON for piping to jq
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from awards.models import AircraftType, FareDefinition, Itinerary


class Formatter(Protocol):
    """Protocol for formatting parse results and reference catalogs."""

    def format_itineraries(self, itineraries: list[Itinerary]) -> str:
        """Format parsed itineraries and their awards."""
        ...

    def format_fares(self, fares: list[FareDefinition]) -> str:
        """Format the fare catalog."""
        ...

    def format_aircraft(self, aircraft: list[AircraftType]) -> str:
        """Format the aircraft catalog."""
        ...


def get_formatter(name: str = "rich") -> Formatter:
    """Get a formatter by name.

    Args:
        name: One of "rich", "plain", "json".

    Returns:
        A Formatter instance.

    Raises:
        ValueError: If the name is not recognized.
    """
    if name == "rich":
        from awards.output.rich_formatter import RichFormatter

        return RichFormatter()
    elif name == "plain":
        from awards.output.plain_formatter import PlainFormatter

        return PlainFormatter()
    elif name == "json":
        from awards.output.json_formatter import JsonFormatter

        return JsonFormatter()
    else:
        raise ValueError(f"Unknown formatter: {name!r}. Use 'rich', 'plain', or 'json'.")
