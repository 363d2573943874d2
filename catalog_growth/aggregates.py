# catalog_growth/aggregates.py
from typing import List, NamedTuple

import pandas as pd

from .config import ALL_TYPES, MOVIE, OTHER, TOP_GENRES, TV_SHOW
from .normalize import years_of


class GenreMix(NamedTuple):
    series: pd.DataFrame
    columns: List[str]


def _column(rows: pd.DataFrame, name: str) -> pd.Series:
    # Missing columns read as blank values so every reducer stays total.
    if name in rows.columns:
        return rows[name].reset_index(drop=True)
    return pd.Series("", index=pd.RangeIndex(len(rows)), dtype=object)


def genre_tokens(listed_in: pd.Series) -> pd.Series:
    """Explode comma-separated genre lists into one token per entry.

    The result keeps the row position as its index, in file order.
    """
    tokens = listed_in.fillna("").astype(str).str.split(",").explode().str.strip()
    return tokens[tokens.ne("")]


def additions_per_year(rows: pd.DataFrame, type_filter: str = ALL_TYPES) -> pd.DataFrame:
    """Titles added per year, optionally limited to one content type."""
    years = years_of(_column(rows, "date_added"))
    if type_filter and type_filter != ALL_TYPES:
        years = years[_column(rows, "type").eq(type_filter)]

    counts = years.dropna().astype(int).value_counts().sort_index()
    return counts.rename_axis("year").reset_index(name="titles")


def movies_vs_tv_per_year(rows: pd.DataFrame) -> pd.DataFrame:
    """Movie and TV Show counts per year.

    Every row with a valid year opens its year, so a year holding only
    blank or unknown types still shows up with zero counts.
    """
    kinds = _column(rows, "type")
    frame = pd.DataFrame({
        "year": years_of(_column(rows, "date_added")),
        MOVIE: kinds.eq(MOVIE).astype(int),
        TV_SHOW: kinds.eq(TV_SHOW).astype(int),
    }).dropna(subset=["year"])
    frame["year"] = frame["year"].astype(int)

    return frame.groupby("year", as_index=False)[[MOVIE, TV_SHOW]].sum()


def top_genres(rows: pd.DataFrame, top_k: int = TOP_GENRES) -> List[str]:
    """The ``top_k`` most frequent genre labels across every row.

    Ties keep the order in which the genres first appear in the file.
    """
    tokens = genre_tokens(_column(rows, "listed_in"))
    if tokens.empty or top_k <= 0:
        return []
    totals = tokens.groupby(tokens.to_numpy(), sort=False).size()
    ranked = totals.sort_values(ascending=False, kind="stable")
    return ranked.head(top_k).index.tolist()


def genre_mix_per_year(rows: pd.DataFrame, top_k: int = TOP_GENRES) -> GenreMix:
    """Per-year genre composition over a fixed set of top genres.

    Genres outside the top ``top_k`` (ranked over the whole catalogue, not
    per year) are counted under "Other". A title listed in several genres
    counts once for each of them.
    """
    selected = top_genres(rows, top_k)
    columns = selected + ([OTHER] if OTHER not in selected else [])

    years = years_of(_column(rows, "date_added"))
    valid_years = sorted(int(y) for y in years.dropna().unique())
    table = pd.DataFrame(0, index=pd.Index(valid_years, name="year"), columns=columns)

    tokens = genre_tokens(_column(rows, "listed_in"))
    counted = pd.DataFrame({
        "year": years.reindex(tokens.index).to_numpy(),
        "genre": tokens.to_numpy(),
    }).dropna(subset=["year"])

    if not counted.empty:
        counted["year"] = counted["year"].astype(int)
        counted["genre"] = counted["genre"].where(counted["genre"].isin(selected), OTHER)
        hits = counted.groupby(["year", "genre"]).size().unstack(fill_value=0)
        table = (
            hits.reindex(index=table.index, columns=columns, fill_value=0)
            .rename_axis(columns=None)
        )

    return GenreMix(series=table.reset_index(), columns=selected)


def since_year(series: pd.DataFrame, min_year) -> pd.DataFrame:
    """Drop entries before ``min_year`` from an aggregated series."""
    if min_year is None:
        return series
    return series[series["year"] >= min_year].reset_index(drop=True)
