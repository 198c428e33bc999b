from typing import Sequence

import plotly.express as px
import plotly.graph_objects as go

from .config import ACADEMIC_MONTHS, USER_TOTAL_LABEL
from .context import MonthlyRow, TotalRow
from .metrics import cumulative_frame, totals_frame

REFERENCE_COLOR = "#8fa3b8"
USER_COLOR = "#1e90ff"


def apply_layout(fig: go.Figure, height: int = 360, showlegend: bool = False) -> go.Figure:
    """Centralize layout tweaks so both charts share margins and template."""
    fig.update_layout(
        height=height,
        margin=dict(l=24, r=24, t=40, b=24),
        showlegend=showlegend,
        template="plotly_white",
    )
    return fig


def totals_bar(rows: Sequence[TotalRow]) -> go.Figure:
    df = totals_frame(rows)
    df["source"] = ["You" if name == USER_TOTAL_LABEL else "Reference" for name in df["name"]]
    fig = px.bar(
        df,
        x="name",
        y="total_emissions_kg",
        color="source",
        color_discrete_map={"You": USER_COLOR, "Reference": REFERENCE_COLOR},
        labels={"name": "", "total_emissions_kg": "kg CO2"},
        title="Your trips against other societies",
    )
    # Keep the row order from compare_totals; the user bar stays last.
    fig.update_xaxes(categoryorder="array", categoryarray=list(df["name"]))
    return apply_layout(fig)


def cumulative_line(rows: Sequence[MonthlyRow]) -> go.Figure:
    df = cumulative_frame(rows).sort_values("month")
    df["month"] = df["month"].astype(str)
    fig = px.line(
        df,
        x="month",
        y="cumulative_total_kg",
        markers=True,
        hover_data={"monthly_total_kg": ":.2f"},
        labels={"month": "", "cumulative_total_kg": "Cumulative kg CO2", "monthly_total_kg": "Month kg CO2"},
        title="Cumulative emissions over the academic year",
    )
    fig.update_traces(line=dict(color=USER_COLOR, width=3))
    fig.update_xaxes(categoryorder="array", categoryarray=list(ACADEMIC_MONTHS))
    return apply_layout(fig)
