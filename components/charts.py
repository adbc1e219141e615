"""
Plotly chart wrappers with iOS styling for the Jusur calculator
"""
import plotly.graph_objects as go
from typing import Dict, List, Optional
import pandas as pd

from jusur_engine.deal import DealResults, SharingModel
from jusur_engine.scenarios import ModelComparison
from jusur_engine.timeline import TimelinePoint
from components.styles import (
    IOS_BLUE, IOS_GREEN, IOS_ORANGE,
    CHART_COLORS, PARTY_COLORS, MODEL_COLORS, apply_plotly_theme,
)

CHART_TYPES = ["Pie", "Bar", "Line", "Area"]

_LEGEND_BELOW = {
    "orientation": "h",
    "yanchor": "top",
    "y": -0.2,
    "xanchor": "center",
    "x": 0.5,
}


def create_pie_chart(
    labels: List[str],
    values: List[float],
    title: str = "",
    colors: Optional[List[str]] = None,
    dark: bool = False,
) -> go.Figure:
    """Create donut chart"""
    fig = go.Figure(go.Pie(
        labels=labels,
        values=values,
        hole=0.55,
        marker={"colors": colors or CHART_COLORS},
        textinfo="percent",
    ))

    fig.update_layout(title={"text": title}, legend=_LEGEND_BELOW)

    return apply_plotly_theme(fig, dark)


def create_bar_chart(
    x: List,
    y: List,
    title: str = "",
    y_title: str = "",
    colors: Optional[List[str]] = None,
    dark: bool = False,
) -> go.Figure:
    """Create styled bar chart"""
    fig = go.Figure(go.Bar(x=x, y=y, marker_color=colors or IOS_BLUE))

    fig.update_layout(
        title={"text": title},
        yaxis_title=y_title,
        yaxis_tickformat=",.0f",
    )

    return apply_plotly_theme(fig, dark)


def create_multi_line_chart(
    data: Dict[str, Dict],  # {series_name: {"x": [], "y": [], "color": str}}
    title: str = "",
    x_title: str = "",
    y_title: str = "",
    fill: bool = False,
    height: int = 400,
    dark: bool = False,
) -> go.Figure:
    """Create multi-line (or filled area) chart with multiple series"""
    fig = go.Figure()

    for i, (name, series) in enumerate(data.items()):
        color = series.get("color", CHART_COLORS[i % len(CHART_COLORS)])
        fig.add_trace(go.Scatter(
            x=series["x"],
            y=series["y"],
            name=name,
            mode="lines" if fill else "lines+markers",
            line={"color": color, "width": 2, "dash": series.get("dash", "solid")},
            marker={"size": 5},
            fill="tozeroy" if fill else None,
        ))

    fig.update_layout(
        title={"text": title},
        xaxis_title=x_title,
        yaxis_title=y_title,
        height=height,
        legend=_LEGEND_BELOW,
        margin=dict(b=100),
    )

    return apply_plotly_theme(fig, dark)


def create_grouped_bar_chart(
    categories: List[str],
    groups: Dict[str, List[float]],
    title: str = "",
    y_title: str = "",
    colors: Optional[List[str]] = None,
    height: int = 400,
    dark: bool = False,
) -> go.Figure:
    """Create grouped bar chart"""
    if colors is None:
        colors = CHART_COLORS

    fig = go.Figure()

    for i, (group_name, values) in enumerate(groups.items()):
        fig.add_trace(go.Bar(
            x=categories,
            y=values,
            name=group_name,
            marker_color=colors[i % len(colors)],
        ))

    fig.update_layout(
        barmode="group",
        title={"text": title},
        yaxis_title=y_title,
        yaxis_tickformat=",.0f",
        height=height,
        legend=_LEGEND_BELOW,
        margin=dict(b=100),
    )

    return apply_plotly_theme(fig, dark)


# =============================================================================
# DEAL CHARTS
# =============================================================================

def create_profit_chart(
    results: DealResults,
    timeline: List[TimelinePoint],
    chart_type: str = "Pie",
    dark: bool = False,
) -> go.Figure:
    """
    Profit visual for the calculator page

    Pie and Bar show the split of the current deal; Line and Area show the
    holding-period timeline.
    """
    if chart_type == "Bar":
        return create_bar_chart(
            ["Total Profit", "Investor Profit", "Jusur Profit"],
            [results.total_profit, results.investor_profit, results.profit_cut],
            title="Profit Breakdown",
            colors=[PARTY_COLORS["total"], PARTY_COLORS["investor"], PARTY_COLORS["jusur"]],
            dark=dark,
        )

    if chart_type in ("Line", "Area"):
        months = [p.month for p in timeline]
        return create_multi_line_chart(
            {
                "Profit": {"x": months, "y": [p.profit for p in timeline], "color": IOS_ORANGE},
            },
            title="Profit Over Holding Period",
            x_title="Month",
            fill=chart_type == "Area",
            dark=dark,
        )

    return create_pie_chart(
        ["Investor Profit", "Jusur Profit Cut"],
        [max(0, results.investor_profit), max(0, results.profit_cut)],
        title="Profit Split",
        colors=[PARTY_COLORS["investor"], PARTY_COLORS["jusur"]],
        dark=dark,
    )


def create_roi_timeline_chart(timeline: List[TimelinePoint], dark: bool = False) -> go.Figure:
    months = [p.month for p in timeline]
    return create_multi_line_chart(
        {"Investor ROI %": {"x": months, "y": [p.roi_pct for p in timeline], "color": IOS_GREEN}},
        title="ROI Over Holding Period",
        x_title="Month",
        y_title="ROI (%)",
        dark=dark,
    )


def create_model_comparison_chart(comparisons: List[ModelComparison], dark: bool = False) -> go.Figure:
    """Investor profit vs Jusur cut for every model"""
    return create_grouped_bar_chart(
        [c.label for c in comparisons],
        {
            "Investor Profit": [c.results.investor_profit for c in comparisons],
            "Jusur Profit Cut": [c.results.profit_cut for c in comparisons],
        },
        title="Model Comparison",
        colors=[PARTY_COLORS["investor"], PARTY_COLORS["jusur"]],
        dark=dark,
    )


def create_sensitivity_chart(
    frame: pd.DataFrame,
    metric: str = "Cut",
    dark: bool = False,
) -> go.Figure:
    """
    Lines per model across the profit sweep

    Args:
        frame: Output of sweep_to_frame
        metric: "Cut" for Jusur profit cut, "Investor" for investor profit
    """
    data = {}
    if not frame.empty:
        x = [f"{m:.0%}" for m in frame["Multiplier"]]
        for model in SharingModel:
            column = f"{model.label} {metric}"
            if column in frame:
                data[model.label] = {"x": x, "y": list(frame[column]), "color": MODEL_COLORS[model.value]}

    title = "Jusur Profit Cut by Model" if metric == "Cut" else "Investor Profit by Model"
    return create_multi_line_chart(
        data,
        title=title,
        x_title="Profit Level (% of current)",
        dark=dark,
    )
