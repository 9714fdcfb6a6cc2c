"""Tests for award domain models."""

import datetime

import pytest
from pydantic import ValidationError

from awards.models import (
    CABIN_ORDER,
    AircraftType,
    AvailabilityResult,
    Award,
    Cabin,
    FareDefinition,
    Itinerary,
    ParseQuery,
    Segment,
)

UTC = datetime.timezone.utc


def _segment(airline="CX", flight="CX100", origin="HKG", dest="NRT", hour=8, hours=4):
    departure = datetime.datetime(2026, 11, 3, hour, 0, tzinfo=UTC)
    return Segment(
        airline=airline,
        flight=flight,
        from_city=origin,
        to_city=dest,
        date=departure.date(),
        departure=departure,
        arrival=departure + datetime.timedelta(hours=hours),
    )


def _award(**kwargs):
    fields = {
        "engine": "CX",
        "fare": FareDefinition(code="CS", cabin="business"),
        "cabins": [Cabin.BUSINESS],
        "quantity": 2,
    }
    fields.update(kwargs)
    return Award(**fields)


# --- Cabin Tests ---


class TestCabin:
    def test_order_best_to_worst(self):
        assert CABIN_ORDER == [Cabin.FIRST, Cabin.BUSINESS, Cabin.PREMIUM, Cabin.ECONOMY]

    def test_values(self):
        assert Cabin("premium") == Cabin.PREMIUM


# --- Reference Data Tests ---


class TestFareDefinition:
    def test_code_uppercase(self):
        assert FareDefinition(code="c1", cabin="business").code == "C1"

    def test_code_length(self):
        with pytest.raises(ValidationError):
            FareDefinition(code="CSS", cabin="business")

    def test_invalid_cabin(self):
        with pytest.raises(ValidationError):
            FareDefinition(code="CS", cabin="lounge")


class TestAircraftType:
    def test_int_iata(self):
        assert AircraftType(iata=320, icao="a320").iata == "320"


# --- Result Tests ---


class TestAvailabilityResult:
    def test_requires_a_cabin(self):
        with pytest.raises(ValidationError):
            AvailabilityResult(cabins=[], quantity=1)

    def test_quantity_optional(self):
        assert AvailabilityResult(cabins=[Cabin.FIRST]).quantity is None


class TestSegment:
    def test_codes_uppercase(self):
        seg = _segment(airline="cx", origin="hkg", dest="nrt")
        assert seg.airline == "CX"
        assert seg.route == "HKG-NRT"

    def test_duration(self):
        assert _segment(hours=5).duration_minutes == 300

    def test_invalid_airport(self):
        with pytest.raises(ValidationError):
            _segment(origin="HK")

    def test_negative_stops(self):
        with pytest.raises(ValidationError):
            Segment(**{**_segment().model_dump(), "stops": -1})


class TestAward:
    def test_cabin_from_fare(self):
        assert _award().cabin == Cabin.BUSINESS

    def test_mixed_cabin(self):
        assert _award().mixed_cabin is False
        assert _award(cabins=[Cabin.BUSINESS, Cabin.ECONOMY]).mixed_cabin is True

    def test_mileage_must_be_positive(self):
        with pytest.raises(ValidationError):
            _award(mileage_cost=0)


class TestItinerary:
    def test_derived(self):
        it = Itinerary(
            segments=[
                _segment("CX", "CX451", "TPE", "HKG", hour=1),
                _segment("KA", "KA396", "HKG", "NRT", hour=7),
                _segment("CX", "CX500", "NRT", "HKG", hour=13),
            ],
            awards=[_award()],
        )
        assert it.origin == "TPE"
        assert it.destination == "HKG"
        assert it.airlines == ["CX", "KA"]
        assert it.flight_numbers == ["CX451", "KA396", "CX500"]
        assert it.departure.hour == 1
        assert it.arrival.hour == 17

    def test_needs_segments(self):
        with pytest.raises(ValidationError):
            Itinerary(segments=[])


class TestParseQuery:
    def test_defaults(self):
        q = ParseQuery()
        assert q.quantity == 1
        assert q.engine is None

    def test_quantity_range(self):
        with pytest.raises(ValidationError):
            ParseQuery(quantity=0)
