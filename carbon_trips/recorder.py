import math
import numbers
from datetime import datetime, timezone
from typing import Callable, Optional

from .context import TripRecord
from .errors import InvalidInput
from .factors import canonical_mode, factor_for
from .ledger import TripLedger
from .months import canonical_month


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _check_passengers(passengers) -> int:
    if isinstance(passengers, bool) or not isinstance(passengers, numbers.Real):
        raise InvalidInput(f"Passengers must be a whole number, got {passengers!r}.")
    if not math.isfinite(passengers) or int(passengers) != passengers:
        raise InvalidInput(f"Passengers must be a whole number, got {passengers!r}.")
    if passengers < 1:
        raise InvalidInput("Passengers must be at least 1.")
    return int(passengers)


def _check_distance(distance_km) -> float:
    if isinstance(distance_km, bool) or not isinstance(distance_km, numbers.Real):
        raise InvalidInput(f"Distance must be a number, got {distance_km!r}.")
    if not math.isfinite(distance_km):
        raise InvalidInput("Distance must be a finite number of km.")
    if distance_km < 0:
        raise InvalidInput("Distance cannot be negative.")
    return float(distance_km)


class TripRecorder:
    """
    Validates a trip, prices it with the emission factor table and appends
    it to the ledger. Every check runs before the append, so a rejected
    trip leaves the ledger untouched.
    """

    def __init__(self, ledger: TripLedger, clock: Optional[Callable[[], datetime]] = None):
        self.ledger = ledger
        self.clock = clock or _utcnow

    def add(self, passengers: int, distance_km: float, month: str, transport_mode: str) -> TripRecord:
        passengers = _check_passengers(passengers)
        distance_km = _check_distance(distance_km)
        month = canonical_month(month)
        transport_mode = canonical_mode(transport_mode)

        emissions_kg = passengers * distance_km * factor_for(transport_mode)
        if not math.isfinite(emissions_kg):
            raise InvalidInput("Trip is too large to price; emissions overflow.")

        record = TripRecord(
            passengers=passengers,
            distance_km=distance_km,
            month=month,
            transport_mode=transport_mode,
            emissions_kg=emissions_kg,
            recorded_at=self.clock(),
        )
        self.ledger.append(record)
        return record
