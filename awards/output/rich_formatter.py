"""Rich-based output formatter with colored tables."""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.table import Table
from rich.text import Text

from awards.models import AircraftType, Cabin, FareDefinition, Itinerary

# Cabin -> Rich style mapping
_CABIN_STYLES = {
    Cabin.FIRST: "bold magenta",
    Cabin.BUSINESS: "bold blue",
    Cabin.PREMIUM: "cyan",
    Cabin.ECONOMY: "green",
}


def _render(renderable) -> str:
    """Render a Rich object to a string."""
    buf = StringIO()
    console = Console(file=buf, force_terminal=True, width=120)
    console.print(renderable)
    return buf.getvalue()


class RichFormatter:
    """Format results using Rich tables."""

    def format_itineraries(self, itineraries: list[Itinerary]) -> str:
        """Format itineraries as one table, one row per award."""
        table = Table(title=f"Award Search Results ({len(itineraries)})", show_lines=True)
        table.add_column("#", style="dim", justify="right")
        table.add_column("Flights", style="cyan", no_wrap=True)
        table.add_column("Route")
        table.add_column("Departs (UTC)")
        table.add_column("Arrives (UTC)")
        table.add_column("Aircraft", style="dim")
        table.add_column("Fare")
        table.add_column("Seats", justify="right", no_wrap=True)
        table.add_column("Miles", justify="right", style="bold green", no_wrap=True)

        for i, it in enumerate(itineraries):
            route = "-".join([it.origin] + [s.to_city for s in it.segments])
            arrives = it.arrival.strftime("%Y-%m-%d %H:%M")
            lag = (it.arrival.date() - it.departure.date()).days
            if lag:
                arrives += f" +{lag}"
            aircraft = ", ".join(s.aircraft or "-" for s in it.segments)

            for a in it.awards:
                fare = Text(a.fare.name or a.fare.code, style=_CABIN_STYLES.get(a.cabin, ""))
                if a.mixed_cabin:
                    fare.append(" (mixed)", style="yellow")
                if a.partner:
                    fare.append(" [partner]", style="dim")

                if a.waitlisted:
                    seats = Text(f"{a.quantity} WL", style="yellow")
                else:
                    seats = Text(str(a.quantity), style="green")

                table.add_row(
                    str(i + 1),
                    " ".join(it.flight_numbers),
                    route,
                    it.departure.strftime("%Y-%m-%d %H:%M"),
                    arrives,
                    aircraft,
                    fare,
                    seats,
                    f"{a.mileage_cost:,}" if a.mileage_cost else "-",
                )

        return _render(table)

    def format_fares(self, fares: list[FareDefinition]) -> str:
        """Format the fare catalog as a table."""
        table = Table(title="Fare Catalog", show_lines=True)
        table.add_column("Code", style="cyan")
        table.add_column("Cabin")
        table.add_column("Saver")
        table.add_column("Name")

        for f in fares:
            table.add_row(
                f.code,
                Text(f.cabin.value, style=_CABIN_STYLES.get(f.cabin, "")),
                Text("yes", style="green") if f.saver else Text("no", style="dim"),
                f.name,
            )

        return _render(table)

    def format_aircraft(self, aircraft: list[AircraftType]) -> str:
        """Format the aircraft catalog as a table."""
        table = Table(title="Aircraft Types", show_lines=True)
        table.add_column("IATA", style="cyan")
        table.add_column("ICAO")
        table.add_column("Name")

        for a in aircraft:
            table.add_row(a.iata, a.icao, a.name)

        return _render(table)
