# catalog_growth/state.py
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import pandas as pd

from .aggregates import (
    GenreMix,
    additions_per_year,
    genre_mix_per_year,
    movies_vs_tv_per_year,
    since_year,
)
from .config import ALL_TYPES, CONTENT_TYPES, DEFAULT_MIN_YEAR, TOP_GENRES
from .loader import CatalogLoadError, empty_catalog, load_catalog
from .normalize import years_of

logger = logging.getLogger(__name__)


@dataclass
class ViewState:
    content_type: str = ALL_TYPES
    min_year: int = DEFAULT_MIN_YEAR
    hovered_genre: Optional[str] = None


@dataclass
class CatalogSession:
    """Rows of one loaded catalog plus the filters applied to them.

    Aggregates are computed lazily and memoised until the rows are
    replaced. The additions series is kept per content type; the minimum
    year only filters the genre mix and never triggers re-aggregation.
    """

    rows: pd.DataFrame = field(default_factory=empty_catalog)
    view: ViewState = field(default_factory=ViewState)
    top_k: int = TOP_GENRES
    loading: bool = False
    error: Optional[str] = None
    _titles: Dict[str, pd.DataFrame] = field(default_factory=dict, init=False, repr=False)
    _types: Optional[pd.DataFrame] = field(default=None, init=False, repr=False)
    _genres: Optional[GenreMix] = field(default=None, init=False, repr=False)

    def load(self, source, loader: Callable[..., pd.DataFrame] = load_catalog) -> None:
        """Load rows from ``source``; failures leave an empty catalog."""
        self.loading = True
        self.error = None
        try:
            rows = loader(source)
        except CatalogLoadError as e:
            logger.error("Catalog load failed, showing empty dataset: %s", e)
            self.error = str(e)
            rows = empty_catalog()
        finally:
            self.loading = False
        self.replace_rows(rows)

    def replace_rows(self, rows: pd.DataFrame) -> None:
        self.rows = rows
        self._titles = {}
        self._types = None
        self._genres = None

    # --- filters ---

    def set_content_type(self, content_type: str) -> None:
        if content_type not in CONTENT_TYPES:
            raise ValueError(
                f"Unknown content type {content_type!r}; expected one of {CONTENT_TYPES}"
            )
        self.view.content_type = content_type

    def set_min_year(self, year: int) -> None:
        self.view.min_year = int(year)

    def hover_genre(self, genre: Optional[str]) -> None:
        self.view.hovered_genre = genre or None

    # --- aggregates ---

    @property
    def titles_added(self) -> pd.DataFrame:
        key = self.view.content_type
        if key not in self._titles:
            self._titles[key] = additions_per_year(self.rows, key)
        return self._titles[key]

    @property
    def movies_vs_tv(self) -> pd.DataFrame:
        if self._types is None:
            self._types = movies_vs_tv_per_year(self.rows)
        return self._types

    @property
    def full_genre_mix(self) -> GenreMix:
        if self._genres is None:
            self._genres = genre_mix_per_year(self.rows, self.top_k)
        return self._genres

    @property
    def genre_mix(self) -> GenreMix:
        mix = self.full_genre_mix
        return GenreMix(since_year(mix.series, self.view.min_year), mix.columns)

    @property
    def status(self) -> str:
        if self.loading:
            return "loading"
        if self.titles_added.empty:
            return "empty"
        return "ready"

    @property
    def unparsed_dates(self) -> int:
        if "date_added" not in self.rows.columns:
            return len(self.rows)
        return int(years_of(self.rows["date_added"]).isna().sum())
