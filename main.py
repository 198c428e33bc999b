import logging

import streamlit as st

from carbon_trips.charts import cumulative_line, totals_bar
from carbon_trips.config import PLOTLY_CONFIG, SESSION_STATE_KEY, configure_logging
from carbon_trips.errors import TripInputError
from carbon_trips.layout import (
    render_factor_table,
    render_reset_button,
    render_trip_form,
    render_trip_table,
)
from carbon_trips.session import TripSession

configure_logging()
logger = logging.getLogger(__name__)

st.set_page_config(page_title="Travel Carbon Ledger", layout="wide")


def get_session() -> TripSession:
    """One TripSession per browser session, created on first run."""
    if SESSION_STATE_KEY not in st.session_state:
        st.session_state[SESSION_STATE_KEY] = TripSession()
        logger.info("Started new trip session")
    return st.session_state[SESSION_STATE_KEY]


def main() -> None:
    session = get_session()

    st.title("Travel Carbon Ledger")
    st.caption("Log your society's trips and see how the year adds up.")

    left, right = st.columns([1, 2])
    with left:
        st.subheader("Add a trip")
        trip = render_trip_form()
        if trip is not None:
            try:
                record = session.add_trip(
                    trip.passengers, trip.distance_km, trip.month, trip.transport_mode
                )
            except TripInputError as exc:
                logger.warning("Rejected trip: %s", exc)
                st.error(str(exc))
            else:
                logger.info(
                    "Added %s trip in %s: %.2f kg CO2",
                    record.transport_mode,
                    record.month,
                    record.emissions_kg,
                )
                st.success(f"Added trip: {record.emissions_kg:,.2f} kg CO2")

        if render_reset_button():
            session.reset_trips()
            logger.info("Trips reset")

        st.subheader("Emission factors")
        render_factor_table(session.get_emission_factors())

    with right:
        st.subheader("Your trips")
        render_trip_table(session.list_trips())

        # Charts only make sense once something has been logged.
        if not session.has_trips:
            st.info("Add a trip to see totals.")
            return

        st.metric("Total emissions", f"{session.total_emissions_kg:,.1f} kg CO2")
        st.plotly_chart(totals_bar(session.get_total_comparison()), config=PLOTLY_CONFIG)
        st.plotly_chart(cumulative_line(session.get_cumulative_by_month()), config=PLOTLY_CONFIG)


main()
