"""
Travel carbon ledger.

Trips are logged into a per-session ledger, priced with a fixed emission
factor table, and summarised as a comparison against reference societies
and as a cumulative total over the academic year.
"""

from .context import EmissionFactor, MonthlyRow, ReferenceSociety, TotalRow, TripRecord
from .errors import InvalidInput, TripInputError, UnknownMonth, UnknownTransportMode
from .ledger import TripLedger
from .metrics import compare_totals, cumulative_by_month
from .recorder import TripRecorder
from .session import TripSession

__all__ = [
    "EmissionFactor",
    "InvalidInput",
    "MonthlyRow",
    "ReferenceSociety",
    "TotalRow",
    "TripInputError",
    "TripLedger",
    "TripRecord",
    "TripRecorder",
    "TripSession",
    "UnknownMonth",
    "UnknownTransportMode",
    "compare_totals",
    "cumulative_by_month",
]
