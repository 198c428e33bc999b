from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class EmissionFactor:
    transport_mode: str
    factor_kg_per_passenger_km: float


@dataclass(frozen=True)
class TripRecord:
    """
    One logged journey. Only TripRecorder builds these; emissions_kg is
    derived from the other fields and stored unrounded.
    """

    passengers: int
    distance_km: float
    month: str
    transport_mode: str
    emissions_kg: float
    recorded_at: datetime


@dataclass(frozen=True)
class ReferenceSociety:
    name: str
    total_emissions_kg: float


@dataclass(frozen=True)
class TotalRow:
    name: str
    total_emissions_kg: float


@dataclass(frozen=True)
class MonthlyRow:
    month: str
    monthly_total_kg: float
    cumulative_total_kg: float
