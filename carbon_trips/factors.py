from typing import Dict, Tuple

from .config import EMISSION_FACTORS
from .context import EmissionFactor
from .errors import UnknownTransportMode

_BY_LOWER: Dict[str, str] = {mode.lower(): mode for mode in EMISSION_FACTORS}


def canonical_mode(mode: str) -> str:
    """Return the table spelling of ``mode`` ("car" -> "Car")."""
    key = str(mode).strip().lower() if mode is not None else ""
    if key not in _BY_LOWER:
        raise UnknownTransportMode(
            f"Unknown transport mode {mode!r}. Choose from: {', '.join(EMISSION_FACTORS)}"
        )
    return _BY_LOWER[key]


def factor_for(mode: str) -> float:
    return EMISSION_FACTORS[canonical_mode(mode)]


def factors() -> Tuple[EmissionFactor, ...]:
    return tuple(
        EmissionFactor(transport_mode=mode, factor_kg_per_passenger_km=value)
        for mode, value in EMISSION_FACTORS.items()
    )
