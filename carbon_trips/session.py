from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from .context import EmissionFactor, MonthlyRow, ReferenceSociety, TotalRow, TripRecord
from .factors import factors
from .ledger import TripLedger
from .metrics import compare_totals, cumulative_by_month, default_references
from .recorder import TripRecorder


class TripSession:
    """
    Everything the presentation layer talks to for one user session.
    Owns the ledger; aggregations are recomputed on each call.
    """

    def __init__(
        self,
        references: Optional[Sequence[ReferenceSociety]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.ledger = TripLedger()
        self.recorder = TripRecorder(self.ledger, clock=clock)
        self.references: Tuple[ReferenceSociety, ...] = (
            default_references() if references is None else tuple(references)
        )

    def add_trip(self, passengers: int, distance_km: float, month: str, transport_mode: str) -> TripRecord:
        return self.recorder.add(passengers, distance_km, month, transport_mode)

    def reset_trips(self) -> None:
        self.ledger.clear()

    def list_trips(self) -> Tuple[TripRecord, ...]:
        return self.ledger.snapshot()

    def get_emission_factors(self) -> Tuple[EmissionFactor, ...]:
        return factors()

    def get_total_comparison(self) -> List[TotalRow]:
        return compare_totals(self.ledger, self.references)

    def get_cumulative_by_month(self) -> List[MonthlyRow]:
        return cumulative_by_month(self.ledger)

    @property
    def has_trips(self) -> bool:
        return not self.ledger.is_empty

    @property
    def total_emissions_kg(self) -> float:
        return float(sum(r.emissions_kg for r in self.ledger.snapshot()))
