"""Shared test fixtures for the award parser."""

import json
from pathlib import Path

import pytest

from awards.catalogs import StaticAircraftCatalog, StaticFareCatalog
from awards.models import AircraftType, FareDefinition

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def load_json():
    """Return a function that loads a JSON fixture file."""

    def _load(name: str) -> dict:
        path = FIXTURES_DIR / name
        with open(path, encoding="utf-8") as f:
            return json.load(f)

    return _load


@pytest.fixture
def cx_response(load_json):
    """Load the sample award search response."""
    return load_json("cx_response.json")


@pytest.fixture
def fares():
    """Small fare catalog covering every cabin's standard tier plus a few others."""
    return StaticFareCatalog([
        FareDefinition(code="FS", cabin="first", saver=True, name="First Standard"),
        FareDefinition(code="CS", cabin="business", saver=True, name="Business Standard"),
        FareDefinition(code="C1", cabin="business", name="Business Choice"),
        FareDefinition(code="WS", cabin="premium", saver=True, name="Premium Economy Standard"),
        FareDefinition(code="YS", cabin="economy", saver=True, name="Economy Standard"),
        FareDefinition(code="Y1", cabin="economy", name="Economy Choice"),
    ])


@pytest.fixture
def aircraft():
    return StaticAircraftCatalog([
        AircraftType(iata="77W", icao="B77W", name="Boeing 777-300ER"),
        AircraftType(iata="333", icao="A333", name="Airbus A330-300"),
        AircraftType(iata="788", icao="B788", name="Boeing 787-8"),
        AircraftType(iata="388", icao="A388", name="Airbus A380-800"),
    ])


def _make_leg(
    cabins: dict,
    origin=1,
    destination=2,
    airline="CX",
    number="100",
    departs="2026-11-03T08:00:00Z",
    arrives="2026-11-03T12:00:00Z",
    equipment="77W",
    stops=0,
) -> dict:
    """Build a raw leg record. ``cabins`` maps raw cabin code -> status."""
    return {
        "flightIdentifier": {
            "marketingAirline": airline,
            "flightNumber": number,
            "originDate": departs,
        },
        "originLocation": origin,
        "destinationLocation": destination,
        "destinationDate": arrives,
        "equipment": equipment,
        "numberOfStops": stops,
        "cabins": {code: {"code": code, "status": status} for code, status in cabins.items()},
    }


def _make_response(flights: list, miles: dict = None, locations: dict = None) -> dict:
    """Build a minimal response around raw flights.

    ``locations`` maps dictionary key -> airport code; defaults to 1=HKG, 2=NRT, 3=LAX.
    """
    locations = locations or {1: "HKG", 2: "NRT", 3: "LAX"}
    values = {
        str(k): {"dictionaryKey": k, "type": "A", "code": code}
        for k, code in locations.items()
    }
    response = {
        "pageBom": {
            "dictionaries": {
                "classNameDictionary": {"7": "CXLocation"},
                "values": {"7": values},
            },
            "modelObject": {
                "availabilities": {"upsell": {"bounds": [{"flights": flights}]}}
            },
        }
    }
    if miles is not None:
        response["milesInfo"] = miles
    return response


@pytest.fixture
def make_leg():
    """Return a function that builds a raw leg record."""
    return _make_leg


@pytest.fixture
def make_response():
    """Return a function that builds a response around raw flights."""
    return _make_response
