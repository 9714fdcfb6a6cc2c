"""Awards CLI -- parse saved award search responses.

Provides commands for parsing a saved response into bookable itineraries
and for listing the fare and aircraft reference catalogs.
"""

import json as json_mod
import logging
import sys
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from pydantic import ValidationError

from awards.errors import CatalogError, ParseError

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="awards",
    help="Award search response parser -- bookable itineraries and seat availability.",
    no_args_is_help=True,
)


# ---------------------------------------------------------------------------
# Global option types
# ---------------------------------------------------------------------------

JsonFlag = Annotated[bool, typer.Option("--json", help="Output as JSON.")]
PlainFlag = Annotated[bool, typer.Option("--plain", help="Output as plain text (no color).")]
VerboseFlag = Annotated[bool, typer.Option("--verbose", "-v", help="Verbose output.")]
QuietFlag = Annotated[bool, typer.Option("--quiet", "-q", help="Suppress non-essential output.")]
FaresOption = Annotated[
    Optional[str], typer.Option("--fares", help="Fare catalog YAML (default: bundled).")
]
AircraftOption = Annotated[
    Optional[str], typer.Option("--aircraft", help="Aircraft catalog YAML (default: bundled).")
]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_format(json_flag: bool = False, plain_flag: bool = False) -> str:
    """Determine output format: json > plain > TTY auto-detect > rich."""
    if json_flag:
        return "json"
    if plain_flag:
        return "plain"
    if sys.stdout.isatty():
        return "rich"
    return "plain"


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure logging based on verbosity flags."""
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)


def _load_response(file: str) -> dict[str, Any]:
    """Load a saved response JSON file.

    Provides helpful error messages for a missing file, invalid JSON
    (with line/column) and a non-object document.
    """
    path = Path(file)

    if not path.exists():
        hint = ""
        if not path.is_absolute():
            hint = f" (looked in {Path.cwd()})"
        raise typer.BadParameter(
            f"File not found: {file}{hint}\n  Hint: Check the file path and try again."
        )

    try:
        with open(path, encoding="utf-8") as f:
            raw = json_mod.load(f)
    except json_mod.JSONDecodeError as exc:
        raise typer.BadParameter(
            f"JSON parse error in {file} at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        )

    if not isinstance(raw, dict):
        raise typer.BadParameter(
            f"Expected a JSON object in {file}, got {type(raw).__name__}"
        )
    return raw


def _error_panel(message: str) -> None:
    """Print an error message, using Rich panel if available."""
    try:
        from rich.console import Console
        from rich.panel import Panel

        console = Console(stderr=True)
        console.print(Panel(message, title="Error", border_style="red"))
    except Exception:
        typer.echo(f"Error: {message}", err=True)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


@app.command()
def parse(
    file: str = typer.Argument(help="Path to a saved award search response (JSON)"),
    quantity: Annotated[
        Optional[int],
        typer.Option("--quantity", "-n", min=1, max=9, help="Requested seats (echoed for waitlists)."),
    ] = None,
    config: Annotated[
        Optional[str], typer.Option("--config", "-c", help="Parser config YAML.")
    ] = None,
    fares: FaresOption = None,
    aircraft: AircraftOption = None,
    json: JsonFlag = False,
    plain: PlainFlag = False,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """Parse a saved award search response into bookable itineraries."""
    _setup_logging(verbose, quiet)
    try:
        response = _load_response(file)
        from awards.catalogs import load_aircraft, load_fares
        from awards.config import load_config
        from awards.models import ParseQuery
        from awards.output import get_formatter
        from awards.parser import FlightAssembler

        cfg = load_config(config)
        query = ParseQuery(quantity=quantity or cfg.default_quantity)
        assembler = FlightAssembler(load_fares(fares), load_aircraft(aircraft), cfg)
        itineraries = assembler.parse(response, query)

        fmt = get_formatter(_get_format(json, plain))
        typer.echo(fmt.format_itineraries(itineraries))

        if not itineraries:
            raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except typer.BadParameter:
        raise
    except ParseError as exc:
        _error_panel(f"Unparseable response ({exc.error_type}): {exc}")
        raise typer.Exit(code=2)
    except (CatalogError, ValidationError, OSError, ValueError) as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)


@app.command(name="fares")
def list_fares(
    fares: FaresOption = None,
    json: JsonFlag = False,
    plain: PlainFlag = False,
) -> None:
    """List the fare catalog."""
    from awards.catalogs import load_fares
    from awards.output import get_formatter

    try:
        catalog = load_fares(fares)
    except CatalogError as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)

    fmt = get_formatter(_get_format(json, plain))
    typer.echo(fmt.format_fares(list(catalog)))


@app.command(name="aircraft")
def list_aircraft(
    aircraft: AircraftOption = None,
    json: JsonFlag = False,
    plain: PlainFlag = False,
) -> None:
    """List known aircraft types."""
    from awards.catalogs import load_aircraft
    from awards.output import get_formatter

    try:
        catalog = load_aircraft(aircraft)
    except CatalogError as exc:
        _error_panel(str(exc))
        raise typer.Exit(code=2)

    fmt = get_formatter(_get_format(json, plain))
    typer.echo(fmt.format_aircraft(list(catalog)))


if __name__ == "__main__":
    app()
