# catalog_growth/charts.py
from typing import Optional

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
from plotly.colors import hex_to_rgb

from .aggregates import GenreMix
from .config import FALLBACK_GENRE_COLOR, GENRE_COLORS, MOVIE, OTHER, TV_SHOW, TYPE_COLORS

ACTIVE_FILL, MUTED_FILL = 0.85, 0.15
ACTIVE_STROKE, MUTED_STROKE = 1.0, 0.2

_MARGIN = dict(l=0, r=20, t=10, b=0)
_HOVER = "%{x}: %{text}<extra>%{fullData.name}</extra>"


def format_number(n) -> str:
    if n is None or pd.isna(n):
        return ""
    return f"{int(n):,}"


def is_genre_active(genre: str, hovered: Optional[str]) -> bool:
    return not hovered or hovered == genre


def area_opacity(genre: str, hovered: Optional[str]) -> float:
    return ACTIVE_FILL if is_genre_active(genre, hovered) else MUTED_FILL


def stroke_opacity(genre: str, hovered: Optional[str]) -> float:
    return ACTIVE_STROKE if is_genre_active(genre, hovered) else MUTED_STROKE


def genre_color(genre: str) -> str:
    return GENRE_COLORS.get(genre, FALLBACK_GENRE_COLOR)


def _rgba(hex_color: str, alpha: float) -> str:
    r, g, b = hex_to_rgb(hex_color)
    return f"rgba({r}, {g}, {b}, {alpha})"


def titles_added_figure(titles: pd.DataFrame) -> go.Figure:
    fig = px.line(titles, x="year", y="titles")
    fig.update_traces(
        line=dict(width=3),
        text=[format_number(n) for n in titles["titles"]],
        hovertemplate=_HOVER,
    )
    fig.update_yaxes(tickformat=",")
    fig.update_layout(margin=_MARGIN)
    return fig


def movies_vs_tv_figure(types: pd.DataFrame) -> go.Figure:
    fig = go.Figure()
    for kind in (MOVIE, TV_SHOW):
        fig.add_trace(go.Scatter(
            x=types["year"], y=types[kind], name=kind, mode="lines",
            line=dict(color=TYPE_COLORS[kind], width=3),
            text=[format_number(n) for n in types[kind]], hovertemplate=_HOVER,
        ))
    fig.update_yaxes(tickformat=",")
    fig.update_layout(margin=_MARGIN, legend_title_text=None)
    return fig


def genre_mix_figure(mix: GenreMix, hovered: Optional[str] = None) -> go.Figure:
    """Stacked areas for each top genre plus "Other".

    Every area except ``hovered`` is faded; with nothing hovered all areas
    are drawn at full emphasis.
    """
    fig = go.Figure()
    series = mix.series
    stacked = mix.columns + ([OTHER] if OTHER not in mix.columns else [])
    for genre in stacked:
        color = genre_color(genre)
        fig.add_trace(go.Scatter(
            x=series["year"], y=series[genre], name=genre,
            mode="lines", stackgroup="genres",
            text=[format_number(n) for n in series[genre]], hovertemplate=_HOVER,
            line=dict(color=_rgba(color, stroke_opacity(genre, hovered))),
            fillcolor=_rgba(color, area_opacity(genre, hovered)),
        ))
    fig.update_layout(margin=_MARGIN, hovermode="x unified")
    return fig
