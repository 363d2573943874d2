# catalog_growth/normalize.py
import pandas as pd

from .config import DATE_ADDED_FORMAT

_RELATIVE_DATES = {"now", "today"}


def _parse_year(text: str):
    try:
        stamp = pd.to_datetime(text, errors="coerce")
    except (ValueError, OverflowError):
        return None
    if pd.isna(stamp):
        return None
    return stamp.year


def years_of(dates: pd.Series) -> pd.Series:
    """Year of each ``date_added`` value as a nullable Int64 series.

    Values in the catalog's own "August 4, 2017" form are parsed in one
    vectorised pass; anything else falls back to pandas' lenient parser one
    value at a time. Blank or unparseable values become <NA>. Timezones are
    not normalised: "2018-12-31T23:00:00-05:00" counts as 2018.
    """
    text = dates.fillna("").astype(str).str.strip()
    # pandas reads "now"/"today" as the current timestamp even with a format
    text = text.mask(text.str.lower().isin(_RELATIVE_DATES), "")
    parsed = pd.to_datetime(text, format=DATE_ADDED_FORMAT, errors="coerce")
    years = parsed.dt.year.astype("Int64")

    fallback = years.isna() & text.ne("")
    if fallback.any():
        years.loc[fallback] = text[fallback].map(_parse_year).astype("Int64")
    return years


def year_of(date_text):
    """Calendar year of a single free-text date, or None."""
    year = years_of(pd.Series([date_text], dtype=object)).iloc[0]
    if pd.isna(year):
        return None
    return int(year)
