"""Domain models for award search results.

Pydantic models for cabins, fare and aircraft reference data, parsed
segments, award offers and itineraries.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


# --- Enums ---


class Cabin(str, Enum):
    """Cabins of service."""

    FIRST = "first"
    BUSINESS = "business"
    PREMIUM = "premium"  # Premium economy
    ECONOMY = "economy"


# Best to worst
CABIN_ORDER: list[Cabin] = [Cabin.FIRST, Cabin.BUSINESS, Cabin.PREMIUM, Cabin.ECONOMY]


# --- Reference Data Models ---


class FareDefinition(BaseModel):
    """Fare reference data, keyed by a two-character fare code."""

    code: str = Field(min_length=2, max_length=2, description="Cabin letter + tier letter")
    cabin: Cabin
    saver: bool = False
    name: str = ""

    model_config = {"frozen": True}

    @field_validator("code", mode="before")
    @classmethod
    def uppercase_code(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class AircraftType(BaseModel):
    """Aircraft reference data."""

    iata: str = Field(min_length=3, max_length=3)
    icao: str = Field(min_length=2, max_length=4)
    name: str = ""

    model_config = {"frozen": True}

    @field_validator("iata", "icao", mode="before")
    @classmethod
    def normalize_codes(cls, v):
        # YAML reads codes like 320 as ints
        return str(v).upper() if v is not None else v


# --- Parse Input Models ---


class ParseQuery(BaseModel):
    """Caller context for a parse: the quantity that was asked for."""

    quantity: int = Field(default=1, ge=1, le=9)
    engine: Optional[str] = None


# --- Result Models ---


class AvailabilityResult(BaseModel):
    """Bookable availability of one cabin across a whole itinerary."""

    cabins: list[Cabin] = Field(min_length=1)  # Cabin actually used, per leg
    quantity: Optional[int] = None  # None when a seat count is not a number
    exact: bool = True
    waitlisted: bool = False

    model_config = {"frozen": True}


class Segment(BaseModel):
    """A single flown leg."""

    airline: str = Field(min_length=2, max_length=3)
    flight: str
    aircraft: Optional[str] = None
    from_city: str = Field(min_length=3, max_length=3)
    to_city: str = Field(min_length=3, max_length=3)
    date: datetime.date
    departure: datetime.datetime
    arrival: datetime.datetime
    stops: int = Field(default=0, ge=0)
    lag_days: int = 0

    model_config = {"frozen": True}

    @field_validator("airline", "from_city", "to_city", mode="before")
    @classmethod
    def uppercase_codes(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @property
    def route(self) -> str:
        return f"{self.from_city}-{self.to_city}"

    @property
    def duration_minutes(self) -> int:
        """Block time in minutes (departure and arrival are both UTC)."""
        return int((self.arrival - self.departure).total_seconds() // 60)


class Award(BaseModel):
    """An award offer for an itinerary."""

    engine: str
    partner: bool = False
    fare: FareDefinition
    cabins: list[Cabin] = Field(min_length=1)
    quantity: int = Field(ge=0)
    exact: bool = True
    waitlisted: bool = False
    mileage_cost: Optional[int] = Field(default=None, gt=0)

    model_config = {"frozen": True}

    @property
    def cabin(self) -> Cabin:
        return self.fare.cabin

    @property
    def mixed_cabin(self) -> bool:
        """True when some leg is flown in a cabin other than the fare's."""
        return any(c != self.fare.cabin for c in self.cabins)


class Itinerary(BaseModel):
    """Ordered segments plus the award offers found for them."""

    segments: list[Segment] = Field(min_length=1)
    awards: list[Award] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def origin(self) -> str:
        return self.segments[0].from_city

    @property
    def destination(self) -> str:
        return self.segments[-1].to_city

    @property
    def departure(self) -> datetime.datetime:
        return self.segments[0].departure

    @property
    def arrival(self) -> datetime.datetime:
        return self.segments[-1].arrival

    @property
    def airlines(self) -> list[str]:
        """Distinct airlines in flight order."""
        seen: list[str] = []
        for s in self.segments:
            if s.airline not in seen:
                seen.append(s.airline)
        return seen

    @property
    def flight_numbers(self) -> list[str]:
        return [s.flight for s in self.segments]
