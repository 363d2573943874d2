from .aggregates import (
    GenreMix,
    additions_per_year,
    genre_mix_per_year,
    genre_tokens,
    movies_vs_tv_per_year,
    since_year,
    top_genres,
)
from .loader import CatalogLoadError, load_catalog
from .normalize import year_of, years_of
from .state import CatalogSession, ViewState

__version__ = "0.1.0"
