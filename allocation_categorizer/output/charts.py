"""Chart and table builders for the dashboard.

Both builders take the same AllocationSummary and keep its entry order,
so the table rows and the chart bars always line up.
"""

import pandas as pd
import plotly.graph_objects as go

from ..core.config import AppConfig
from ..core.models import AllocationSummary

SUMMARY_COLUMNS = ["Data Allocation", "Count", "Percentage"]


def summary_dataframe(summary: AllocationSummary) -> pd.DataFrame:
    """Summary rows as a DataFrame (percentage on a 0-100 scale)."""
    rows = [
        {
            "Data Allocation": row["allocation"],
            "Count": row["count"],
            "Percentage": row["percentage"],
        }
        for row in summary.rows()
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def build_bar_chart(summary: AllocationSummary, config: AppConfig | None = None) -> go.Figure:
    """
    Bar chart of counts per allocation.

    Args:
        summary: Aggregated summary; bars follow its entry order
        config: Presentation settings (height, bar color)

    Returns:
        Plotly figure ready for ``st.plotly_chart``
    """
    config = config or AppConfig()

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=summary.labels(),
        y=[entry.count for entry in summary.entries],
        name="count",
        marker_color=config.bar_color,
        hovertemplate="%{x}: %{y}<extra></extra>",
    ))

    fig.update_layout(
        xaxis_title="",
        yaxis_title="Count",
        height=config.chart_height,
        showlegend=True,
        margin=dict(l=20, r=20, t=30, b=20),
        xaxis=dict(type="category", categoryorder="array", categoryarray=summary.labels()),
    )
    return fig
