# catalog_growth/config.py
import os

# --- Data source ---
DEFAULT_CSV_PATH = os.environ.get("CATALOG_CSV", "netflix_titles.csv")
DATA_SOURCE_URL = "https://www.kaggle.com/datasets/shivamb/netflix-shows"
REQUIRED_COLUMNS = ["type", "date_added", "listed_in"]

# Format used by netflix_titles.csv, e.g. "August 4, 2017"
DATE_ADDED_FORMAT = "%B %d, %Y"

# --- Logging ---
LOG_LEVEL = os.environ.get("CATALOG_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# --- Filters ---
ALL_TYPES = "All"
MOVIE = "Movie"
TV_SHOW = "TV Show"
CONTENT_TYPES = [ALL_TYPES, MOVIE, TV_SHOW]

MIN_YEAR_CHOICES = [2008, 2010, 2012, 2014, 2015, 2016, 2017, 2018, 2019]
DEFAULT_MIN_YEAR = 2015

# --- Genre mix ---
TOP_GENRES = 8
OTHER = "Other"

GENRE_COLORS = {
    "Dramas": "#4C78A8",
    "Comedies": "#F58518",
    "Documentaries": "#54A24B",
    "Action & Adventure": "#E45756",
    "International Movies": "#72B7B2",
    "International TV Shows": "#B279A2",
    "Independent Movies": "#FF9DA6",
    "TV Dramas": "#9D755D",
    OTHER: "#BAB0AC",
}
FALLBACK_GENRE_COLOR = "#8884d8"
TYPE_COLORS = {MOVIE: "#E50914", TV_SHOW: "#1F77B4"}
