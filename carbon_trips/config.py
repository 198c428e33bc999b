import logging
import os

# Emission factors in kg CO2 per passenger per km, in display order.
EMISSION_FACTORS = {
    "Car": 0.17,
    "Bus": 0.10,
    "Train": 0.04,
    "Plane": 0.13,
}

# Academic year runs September to August; ordinal is the position in this tuple + 1.
ACADEMIC_MONTHS = (
    "September",
    "October",
    "November",
    "December",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
)

# Yearly travel totals (kg CO2) of the societies users compare themselves against.
REFERENCE_SOCIETIES = (
    ("Hiking Club", 1250.0),
    ("Debating Society", 860.0),
    ("Rowing Club", 2140.0),
    ("Film Society", 310.0),
)

USER_TOTAL_LABEL = "Your Trips"

# Key under which each browser session keeps its TripSession.
SESSION_STATE_KEY = "trip_session"

ENV_LOG_LEVEL = "CARBON_TRIPS_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Shared Plotly defaults so both charts look consistent.
PLOTLY_CONFIG = {
    "displaylogo": False,
    "modeBarButtonsToRemove": [
        "lasso2d",
        "select2d",
        "autoScale2d",
        "resetScale2d",
    ],
}


def configure_logging() -> None:
    level_name = os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
