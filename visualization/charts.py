"""Plotly chart builders for the MonthEnd dashboard."""

from __future__ import annotations

import pandas as pd
import plotly.graph_objects as go

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = ["build_balance_chart"]


def _empty_plotly_figure(message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        margin=dict(l=0, r=0, t=20, b=0),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_balance_chart(
    projection_df: pd.DataFrame,
    currency_symbol: str | None = "R$",
    show_simulation: bool = True,
) -> go.Figure:
    """Render the projected balance as an area chart coloured by daily trend.

    Rising days are drawn green and falling days orange; the simulated
    scenario, when it differs from the baseline, is overlaid as a dashed line.
    """

    if projection_df.empty:
        return _empty_plotly_figure("Enter a balance, a daily spend or a scheduled movement to see the projection.")

    df = projection_df.sort_values("Day")
    currency_prefix = f"{currency_symbol} " if currency_symbol else ""
    hover_template = f"%{{x}}<br>{currency_prefix}%{{y:,.2f}}<extra></extra>"

    fig = go.Figure()
    for column, name, color, fill in (
        ("Rising", "Rising balance", TOKENS.rising_color, TOKENS.rising_fill),
        ("Falling", "Falling balance", TOKENS.falling_color, TOKENS.falling_fill),
    ):
        fig.add_trace(
            go.Scatter(
                x=df["Date"],
                y=df[column],
                mode="lines+markers",
                name=name,
                connectgaps=False,
                line=dict(color=color, width=2, shape="spline", smoothing=0.6),
                marker=dict(size=5, color=color),
                fill="tozeroy",
                fillcolor=fill,
                hovertemplate=hover_template,
            )
        )

    has_simulation = bool((df["BalanceWithSimulation"] != df["Balance"]).any())
    if show_simulation and has_simulation:
        fig.add_trace(
            go.Scatter(
                x=df["Date"],
                y=df["BalanceWithSimulation"],
                mode="lines",
                name="With simulation",
                line=dict(color=TOKENS.simulation_color, width=2, dash="dash", shape="spline", smoothing=0.6),
                hovertemplate=hover_template,
            )
        )

    fig.add_hline(y=0, line=dict(color=TOKENS.zero_line_color, width=1, dash="dot"))

    fig.update_layout(
        title="",
        xaxis_title="Day",
        yaxis_title="Balance",
        margin=dict(l=0, r=0, t=20, b=0),
        hovermode="x unified",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        xaxis=dict(showgrid=False, type="category"),
        yaxis=dict(showgrid=True, gridcolor=TOKENS.grid_color, zeroline=False),
        font=dict(color=TOKENS.label_color, size=TOKENS.label_size, family=TOKENS.label_font),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )

    return fig
