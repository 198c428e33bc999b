import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd
import streamlit as st

from .config import ACADEMIC_MONTHS, EMISSION_FACTORS
from .context import EmissionFactor, TripRecord
from .metrics import trips_frame

logger = logging.getLogger(__name__)

TRIP_DISPLAY_COLUMNS = {
    "passengers": "Passengers",
    "distance_km": "Distance (km)",
    "month": "Month",
    "transport_mode": "Mode",
    "emissions_kg": "Emissions (kg CO2)",
}


@dataclass(frozen=True)
class TripInput:
    """Raw values from the trip form, handed to TripSession.add_trip unchanged."""

    passengers: int
    distance_km: float
    month: str
    transport_mode: str


def render_trip_form() -> Optional[TripInput]:
    """
    Trip entry form. Returns the submitted values, or None on reruns where
    the form was not submitted. Validation is left to the recorder.
    """
    with st.form("trip_form", clear_on_submit=False):
        passengers = st.number_input("Passengers", min_value=1, value=1, step=1, key="trip_passengers")
        distance_km = st.number_input("Distance (km)", min_value=0.0, value=0.0, step=1.0, key="trip_distance")
        month = st.selectbox("Month", ACADEMIC_MONTHS, index=0, key="trip_month")
        transport_mode = st.selectbox("Transport mode", tuple(EMISSION_FACTORS), index=0, key="trip_mode")
        submitted = st.form_submit_button("Add trip")

    if not submitted:
        return None
    logger.debug("Trip form submitted: %s pax, %s km, %s, %s", passengers, distance_km, month, transport_mode)
    return TripInput(
        passengers=int(passengers),
        distance_km=float(distance_km),
        month=month,
        transport_mode=transport_mode,
    )


def render_reset_button() -> bool:
    return st.button("Reset trips", key="reset_trips_btn")


def render_factor_table(rows: Sequence[EmissionFactor]) -> None:
    df = pd.DataFrame(
        {
            "Mode": [r.transport_mode for r in rows],
            "kg CO2 per passenger-km": [r.factor_kg_per_passenger_km for r in rows],
        }
    )
    st.dataframe(df, hide_index=True)


def render_trip_table(records: Sequence[TripRecord]) -> None:
    df = trips_frame(records, include_timestamp=False).rename(columns=TRIP_DISPLAY_COLUMNS)
    df["Emissions (kg CO2)"] = pd.to_numeric(df["Emissions (kg CO2)"]).round(2)
    st.dataframe(df, hide_index=True)
