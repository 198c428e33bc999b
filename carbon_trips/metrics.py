from dataclasses import asdict
from typing import Iterable, List, Sequence, Tuple

import pandas as pd

from .config import ACADEMIC_MONTHS, REFERENCE_SOCIETIES, USER_TOTAL_LABEL
from .context import MonthlyRow, ReferenceSociety, TotalRow, TripRecord
from .months import ACADEMIC_ORDER, academic_ordinal

TRIP_COLUMNS = (
    "passengers",
    "distance_km",
    "month",
    "transport_mode",
    "emissions_kg",
    "recorded_at",
)


def default_references() -> Tuple[ReferenceSociety, ...]:
    return tuple(ReferenceSociety(name, total) for name, total in REFERENCE_SOCIETIES)


def _records(ledger) -> Tuple[TripRecord, ...]:
    # Accept a TripLedger or any iterable of records.
    snapshot = getattr(ledger, "snapshot", None)
    return snapshot() if callable(snapshot) else tuple(ledger)


def trips_frame(ledger, include_timestamp: bool = True) -> pd.DataFrame:
    """Ledger as a DataFrame in insertion order, one row per trip."""
    rows = [asdict(r) for r in _records(ledger)]
    df = pd.DataFrame(rows, columns=list(TRIP_COLUMNS))
    if not include_timestamp:
        df = df.drop(columns=["recorded_at"])
    return df


def compare_totals(
    ledger,
    references: Sequence[ReferenceSociety] | None = None,
) -> List[TotalRow]:
    """
    Reference society totals in their given order, followed by the ledger's
    own total labelled "Your Trips". An empty ledger totals 0.
    """
    refs = default_references() if references is None else references
    user_total = float(sum(r.emissions_kg for r in _records(ledger)))
    rows = [TotalRow(name=ref.name, total_emissions_kg=float(ref.total_emissions_kg)) for ref in refs]
    rows.append(TotalRow(name=USER_TOTAL_LABEL, total_emissions_kg=user_total))
    return rows


def cumulative_by_month(ledger) -> List[MonthlyRow]:
    """
    Monthly and running emission totals over the academic year.

    Records are summed per month, every academic month missing from the
    ledger is filled with 0, and the running sum is taken in September..August
    order. Always 12 rows; cumulative_total_kg of a row includes its own month.
    Raises UnknownMonth for a record whose month is not in the table.
    """
    df = trips_frame(ledger, include_timestamp=False)
    df["ordinal"] = [academic_ordinal(m) for m in df["month"]]
    monthly = (
        df.groupby("ordinal")["emissions_kg"]
        .sum()
        .reindex(range(1, len(ACADEMIC_MONTHS) + 1), fill_value=0.0)
        .astype(float)
    )
    cumulative = monthly.cumsum()
    return [
        MonthlyRow(
            month=month,
            monthly_total_kg=float(monthly[ACADEMIC_ORDER[month]]),
            cumulative_total_kg=float(cumulative[ACADEMIC_ORDER[month]]),
        )
        for month in ACADEMIC_MONTHS
    ]


def totals_frame(rows: Iterable[TotalRow]) -> pd.DataFrame:
    return pd.DataFrame([asdict(r) for r in rows], columns=["name", "total_emissions_kg"])


def cumulative_frame(rows: Iterable[MonthlyRow]) -> pd.DataFrame:
    df = pd.DataFrame(
        [asdict(r) for r in rows],
        columns=["month", "monthly_total_kg", "cumulative_total_kg"],
    )
    # Keep the academic order when plotting or sorting.
    df["month"] = pd.Categorical(df["month"], categories=list(ACADEMIC_MONTHS), ordered=True)
    return df
