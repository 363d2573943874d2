# catalog_growth/loader.py
import logging

import pandas as pd

from .config import REQUIRED_COLUMNS

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """The catalog CSV could not be fetched or parsed."""


def empty_catalog() -> pd.DataFrame:
    return pd.DataFrame({col: pd.Series(dtype=object) for col in REQUIRED_COLUMNS})


def load_catalog(source) -> pd.DataFrame:
    """Read the catalog CSV from a local path or an http(s) URL.

    Every cell is kept as a string and blank lines are skipped. Missing
    required columns are added as blanks so the aggregates degrade instead
    of failing; an empty file loads as an empty catalog.

    Raises:
        CatalogLoadError: If the source cannot be read or parsed.
    """
    try:
        df = pd.read_csv(
            source,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            on_bad_lines="warn",
        )
    except pd.errors.EmptyDataError:
        logger.warning("Catalog source %s is empty", source)
        return empty_catalog()
    except (OSError, ValueError) as e:
        logger.error("Failed to load catalog from %s: %s", source, e)
        raise CatalogLoadError(f"Could not load data from '{source}': {e}") from e

    # Short rows leave NaN on pandas 2 and "" on pandas 3
    df = df.fillna("")
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        logger.warning("Catalog source %s lacks columns: %s", source, ", ".join(missing))
        for col in missing:
            df[col] = ""

    logger.info("Loaded %d rows from %s", len(df), source)
    logger.debug("First rows:\n%s", df.head())
    return df
