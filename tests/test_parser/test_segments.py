"""Tests for building segments from raw legs."""

import datetime

import pytest

from awards.errors import SegmentResolutionError
from awards.parser.segments import build_segment, days_between, find_aircraft, parse_utc

UTC = datetime.timezone.utc
LOCATIONS = {"1": "HKG", "2": "NRT", "3": "LAX"}


class TestParseUtc:
    def test_epoch_millis(self):
        assert parse_utc(1793692800000) == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)

    def test_epoch_millis_string(self):
        assert parse_utc("1793692800000") == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)

    def test_iso_zulu(self):
        assert parse_utc("2026-11-03T08:00:00Z") == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)

    def test_iso_naive_is_utc(self):
        dt = parse_utc("2026-11-03T08:00:00")
        assert dt.tzinfo is not None
        assert dt == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)

    def test_iso_offset_converted(self):
        dt = parse_utc("2026-11-03T16:00:00+08:00")
        assert dt == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)
        assert dt.utcoffset() == datetime.timedelta(0)

    @pytest.mark.parametrize(
        "value", [None, "", "tomorrow", True, [1], "99999999999999999999", 10**20, float("inf")]
    )
    def test_invalid(self, value):
        with pytest.raises(SegmentResolutionError):
            parse_utc(value)


class TestDaysBetween:
    def test_same_day(self):
        a = datetime.datetime(2026, 11, 3, 1, 0, tzinfo=UTC)
        b = datetime.datetime(2026, 11, 3, 23, 0, tzinfo=UTC)
        assert days_between(a, b) == 0

    def test_overnight(self):
        a = datetime.datetime(2026, 11, 3, 23, 0, tzinfo=UTC)
        b = datetime.datetime(2026, 11, 4, 1, 0, tzinfo=UTC)
        assert days_between(a, b) == 1

    def test_arrives_previous_day(self):
        a = datetime.datetime(2026, 11, 4, 1, 0, tzinfo=UTC)
        b = datetime.datetime(2026, 11, 3, 23, 0, tzinfo=UTC)
        assert days_between(a, b) == -1


class TestFindAircraft:
    def test_known(self, aircraft):
        assert find_aircraft("77W", aircraft) == "B77W"

    def test_unknown_passed_through(self, aircraft):
        assert find_aircraft("XYZ", aircraft) == "XYZ"

    def test_missing(self, aircraft):
        assert find_aircraft(None, aircraft) is None


class TestBuildSegment:
    def test_basic(self, make_leg, aircraft):
        leg = make_leg({"B": "4"}, number="500", stops="1")
        seg = build_segment(leg, LOCATIONS, aircraft)
        assert seg.airline == "CX"
        assert seg.flight == "CX500"
        assert seg.aircraft == "B77W"
        assert seg.from_city == "HKG"
        assert seg.to_city == "NRT"
        assert seg.departure == datetime.datetime(2026, 11, 3, 8, 0, tzinfo=UTC)
        assert seg.arrival == datetime.datetime(2026, 11, 3, 12, 0, tzinfo=UTC)
        assert seg.date == datetime.date(2026, 11, 3)
        assert seg.stops == 1
        assert seg.lag_days == 0
        assert seg.duration_minutes == 240

    def test_overnight_lag(self, make_leg, aircraft):
        leg = make_leg({}, departs="2026-11-03T22:30:00Z", arrives="2026-11-05T01:00:00Z")
        assert build_segment(leg, LOCATIONS, aircraft).lag_days == 2

    def test_unknown_equipment(self, make_leg, aircraft):
        leg = make_leg({}, equipment="ZZZ")
        assert build_segment(leg, LOCATIONS, aircraft).aircraft == "ZZZ"

    def test_departure_falls_back_to_leg_origin_date(self, make_leg, aircraft):
        leg = make_leg({})
        del leg["flightIdentifier"]["originDate"]
        leg["originDate"] = "2026-11-03T06:00:00Z"
        seg = build_segment(leg, LOCATIONS, aircraft)
        assert seg.departure.hour == 6

    def test_null_departure_falls_back_to_leg_origin_date(self, make_leg, aircraft):
        leg = make_leg({}, departs=None)
        leg["originDate"] = "2026-11-03T06:00:00Z"
        seg = build_segment(leg, LOCATIONS, aircraft)
        assert seg.departure.hour == 6

    def test_integer_location_keys(self, make_leg, aircraft):
        seg = build_segment(make_leg({}, origin=3, destination=1), LOCATIONS, aircraft)
        assert seg.route == "LAX-HKG"

    def test_unknown_location(self, make_leg, aircraft):
        with pytest.raises(SegmentResolutionError, match="destination"):
            build_segment(make_leg({}, destination=99), LOCATIONS, aircraft)

    def test_missing_flight_identifier(self, make_leg, aircraft):
        leg = make_leg({})
        del leg["flightIdentifier"]
        with pytest.raises(SegmentResolutionError):
            build_segment(leg, LOCATIONS, aircraft)

    def test_missing_arrival(self, make_leg, aircraft):
        leg = make_leg({})
        leg["destinationDate"] = None
        with pytest.raises(SegmentResolutionError, match="arrival"):
            build_segment(leg, LOCATIONS, aircraft)

    def test_segment_is_frozen(self, make_leg, aircraft):
        seg = build_segment(make_leg({}), LOCATIONS, aircraft)
        with pytest.raises(Exception):
            seg.stops = 3

    def test_negative_stops_rejected(self, make_leg, aircraft):
        with pytest.raises(SegmentResolutionError, match="CX100"):
            build_segment(make_leg({}, stops=-1), LOCATIONS, aircraft)
