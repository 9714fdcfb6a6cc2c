"""Plain text output formatter -- no ANSI escapes."""

from __future__ import annotations

from awards.models import AircraftType, Award, FareDefinition, Itinerary


def _header(title: str) -> str:
    """Create a plain text section header."""
    return f"\n{'=' * 60}\n  {title}\n{'=' * 60}\n"


def _subheader(title: str) -> str:
    """Create a plain text sub-header."""
    return f"\n--- {title} ---\n"


def _seats(award: Award) -> str:
    """Seat display: 2, 2 (waitlist)."""
    if award.waitlisted:
        return f"{award.quantity} (waitlist)"
    return str(award.quantity)


def _miles(award: Award) -> str:
    return f"{award.mileage_cost:,}" if award.mileage_cost else "-"


class PlainFormatter:
    """Format results as plain text without ANSI escapes."""

    def format_itineraries(self, itineraries: list[Itinerary]) -> str:
        """Format itineraries, one block per itinerary."""
        lines: list[str] = []
        lines.append(_header("Award Search Results"))
        lines.append(f"  Itineraries: {len(itineraries)}")

        if not itineraries:
            lines.append("  No bookable awards found.")
            return "\n".join(lines)

        for i, it in enumerate(itineraries):
            lines.append(
                _subheader(
                    f"{i + 1}. {it.origin}-{it.destination} "
                    f"{' '.join(it.flight_numbers)}"
                )
            )
            lines.append(
                f"  {'Flight':<8} {'Route':<9} {'Aircraft':<8} {'Departs (UTC)':<17} "
                f"{'Arrives (UTC)':<17} {'Stops':>5}"
            )
            lines.append(f"  {'-' * 8} {'-' * 9} {'-' * 8} {'-' * 17} {'-' * 17} {'-' * 5}")
            for s in it.segments:
                arrives = s.arrival.strftime("%Y-%m-%d %H:%M")
                if s.lag_days:
                    arrives += f" +{s.lag_days}"
                lines.append(
                    f"  {s.flight:<8} {s.route:<9} {s.aircraft or '-':<8} "
                    f"{s.departure.strftime('%Y-%m-%d %H:%M'):<17} {arrives:<17} {s.stops:>5}"
                )

            for a in it.awards:
                cabins = "/".join(c.value for c in a.cabins)
                partner = "  [partner]" if a.partner else ""
                lines.append(
                    f"  Award: {a.fare.name or a.fare.code} ({a.fare.code})  "
                    f"seats {_seats(a)}  miles {_miles(a)}  cabins {cabins}{partner}"
                )

        return "\n".join(lines)

    def format_fares(self, fares: list[FareDefinition]) -> str:
        """Format the fare catalog as a plain text table."""
        lines: list[str] = []
        lines.append(_header("Fare Catalog"))
        lines.append(f"  {'Code':<5} {'Cabin':<9} {'Saver':<6} Name")
        lines.append(f"  {'-' * 5} {'-' * 9} {'-' * 6} {'-' * 30}")
        for f in fares:
            saver = "yes" if f.saver else "no"
            lines.append(f"  {f.code:<5} {f.cabin.value:<9} {saver:<6} {f.name}")
        return "\n".join(lines)

    def format_aircraft(self, aircraft: list[AircraftType]) -> str:
        """Format the aircraft catalog as a plain text table."""
        lines: list[str] = []
        lines.append(_header("Aircraft Types"))
        lines.append(f"  {'IATA':<5} {'ICAO':<5} Name")
        lines.append(f"  {'-' * 5} {'-' * 5} {'-' * 30}")
        for a in aircraft:
            lines.append(f"  {a.iata:<5} {a.icao:<5} {a.name}")
        return "\n".join(lines)
