import pandas as pd
import pytest


def make_rows(*records):
    return pd.DataFrame(list(records), columns=["type", "date_added", "listed_in"])


@pytest.fixture
def scenario_rows():
    return make_rows(
        {"type": "Movie", "date_added": "1/1/2018", "listed_in": "Dramas, Comedies"},
        {"type": "TV Show", "date_added": "6/6/2018", "listed_in": "Dramas"},
    )


@pytest.fixture
def catalog_rows():
    return make_rows(
        {"type": "Movie", "date_added": "September 25, 2021", "listed_in": "Documentaries"},
        {"type": "TV Show", "date_added": "September 24, 2021", "listed_in": "International TV Shows, TV Dramas, TV Mysteries"},
        {"type": "Movie", "date_added": "August 4, 2017", "listed_in": "Dramas, International Movies"},
        {"type": "Movie", "date_added": " August 4, 2017", "listed_in": "Comedies, Dramas"},
        {"type": "TV Show", "date_added": "", "listed_in": "Kids' TV"},
        {"type": "", "date_added": "March 1, 2019", "listed_in": ""},
        {"type": "Movie", "date_added": "not a date", "listed_in": "Horror Movies"},
        {"type": "Movie", "date_added": "January 1, 2019", "listed_in": "Dramas, Horror Movies"},
    )


@pytest.fixture
def catalog_csv(tmp_path, catalog_rows):
    path = tmp_path / "netflix_titles.csv"
    frame = catalog_rows.copy()
    frame.insert(0, "show_id", [f"s{i}" for i in range(1, len(frame) + 1)])
    frame.to_csv(path, index=False)
    return path
