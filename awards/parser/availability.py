"""Cabin availability across a multi-leg itinerary.

Each leg reports a raw status per cabin. For a requested cabin, every leg
must be evaluated against the same cabin, or (for first and business
only) the next lower cabin that leg actually reports. The itinerary is
bookable in that cabin when no leg is closed; the bookable quantity is
the smallest confirmed count, or the requested quantity when any leg is
waitlisted.

Status codes:
    "3"  three seats confirmed
    "L"  waitlist
    "N"  not offered
    "X"  not available
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from awards.errors import StructuralParseError
from awards.models import CABIN_ORDER, AvailabilityResult, Cabin

logger = logging.getLogger(__name__)

# Raw cabin code -> cabin. E and R are the standard and reduced economy
# buckets and never appear on the same leg.
CABIN_CODES: dict[str, Cabin] = {
    "E": Cabin.ECONOMY,
    "R": Cabin.ECONOMY,
    "N": Cabin.PREMIUM,
    "B": Cabin.BUSINESS,
    "F": Cabin.FIRST,
}
_STANDARD_ECONOMY = "E"
_REDUCED_ECONOMY = "R"

STATUS_NOT_OFFERED = "N"
STATUS_NOT_AVAILABLE = "X"
STATUS_WAITLIST = "L"
_CLOSED = (STATUS_NOT_OFFERED, STATUS_NOT_AVAILABLE)

# Cabins that must be matched exactly, with no lower cabin to fall back on
_NO_FALLBACK = (Cabin.PREMIUM, Cabin.ECONOMY)

_SEATS_PATTERN = re.compile(r"^\s*(\d+)")

CabinStatusMatrix = list[dict[Cabin, str]]


def raw_cabin_statuses(leg: Mapping) -> list[tuple[str, str]]:
    """Return (raw cabin code, status) pairs reported by one leg.

    ``cabins`` is normally an object keyed by cabin code whose values
    carry ``code`` and ``status``; a list of such objects is accepted too.
    """
    cabins = leg.get("cabins") or {}
    if isinstance(cabins, Mapping):
        items = cabins.items()
    elif isinstance(cabins, list):
        items = ((None, entry) for entry in cabins)
    else:
        raise StructuralParseError(f"Unexpected cabins value on leg: {cabins!r}")

    pairs = []
    for key, entry in items:
        if isinstance(entry, Mapping):
            code = entry.get("code", key)
            status = entry.get("status")
        else:
            code, status = key, entry
        if code is None or status is None:
            continue
        pairs.append((str(code).upper(), str(status).strip().upper()))
    return pairs


def validate_legs(legs: list) -> None:
    """Reject flights that cannot be evaluated at all.

    Raises:
        StructuralParseError: If the leg list is empty or holds a non-object.
            Also when one leg reports both standard and reduced economy.
    """
    if not legs:
        raise StructuralParseError("Flight has no segments")
    for i, leg in enumerate(legs):
        if not isinstance(leg, Mapping):
            raise StructuralParseError(f"Unexpected segment value at {i}: {leg!r}")
        codes = {code for code, _ in raw_cabin_statuses(leg)}
        if _STANDARD_ECONOMY in codes and _REDUCED_ECONOMY in codes:
            raise StructuralParseError(
                f"Conflicting economy cabin status on segment {i}: {sorted(codes)}"
            )


def cabin_status_matrix(legs: list) -> CabinStatusMatrix:
    """Normalize each leg's raw cabin codes to cabins, preserving leg order."""
    matrix: CabinStatusMatrix = []
    for leg in legs:
        row: dict[Cabin, str] = {}
        for code, status in raw_cabin_statuses(leg):
            cabin = CABIN_CODES.get(code)
            if cabin is None:
                logger.debug("Ignoring unknown cabin code %r", code)
                continue
            row[cabin] = status
        matrix.append(row)
    return matrix


def fallback_chain(cabin: Cabin) -> list[Cabin]:
    """Cabins checked, in order, on each leg for a request in ``cabin``."""
    if cabin in _NO_FALLBACK:
        return [cabin]
    return CABIN_ORDER[CABIN_ORDER.index(cabin):]


def parse_seats(status: str) -> Optional[int]:
    """Leading integer of a confirmed status, or None if it has none."""
    match = _SEATS_PATTERN.match(status)
    return int(match.group(1)) if match else None


def cabin_availability(
    matrix: CabinStatusMatrix,
    cabin: Cabin,
    quantity: int,
) -> Optional[AvailabilityResult]:
    """Availability of ``cabin`` across every leg, or None if not bookable.

    Args:
        matrix: Per-leg cabin statuses, in itinerary order.
        cabin: The requested cabin.
        quantity: Requested quantity, returned as-is for waitlisted results.
    """
    chain = fallback_chain(cabin)
    statuses: list[str] = []
    cabins: list[Cabin] = []

    for row in matrix:
        # First cabin from the requested one downwards that this leg reports
        leg_cabin = next((c for c in chain if c in row), None)
        if leg_cabin is None:
            return None
        statuses.append(row[leg_cabin])
        cabins.append(leg_cabin)

    if cabin not in cabins:
        return None
    if any(s in _CLOSED for s in statuses):
        return None

    if STATUS_WAITLIST in statuses:
        return AvailabilityResult(cabins=cabins, quantity=quantity, exact=False, waitlisted=True)

    seats = [parse_seats(s) for s in statuses]
    if any(n is None for n in seats):
        logger.debug("Non-numeric status in %s for %s", statuses, cabin.value)
        return AvailabilityResult(cabins=cabins, quantity=None, exact=True, waitlisted=False)

    return AvailabilityResult(cabins=cabins, quantity=min(seats), exact=True, waitlisted=False)


def availability_map(legs: list[Any], quantity: int) -> dict[Cabin, AvailabilityResult]:
    """Compute availability for every cabin a flight can be booked in.

    Cabins with no result are absent from the returned mapping, which is
    ordered best cabin first.

    Raises:
        StructuralParseError: See ``validate_legs``.
    """
    validate_legs(legs)
    matrix = cabin_status_matrix(legs)

    result: dict[Cabin, AvailabilityResult] = {}
    for cabin in CABIN_ORDER:
        mapping = cabin_availability(matrix, cabin, quantity)
        if mapping is not None:
            result[cabin] = mapping
    return result
