import pytest

from catalog_growth.loader import CatalogLoadError
from catalog_growth.state import CatalogSession, ViewState


def test_default_view_state():
    view = ViewState()
    assert view.content_type == "All"
    assert view.min_year == 2015
    assert view.hovered_genre is None


def test_new_session_is_empty():
    session = CatalogSession()
    assert session.rows.empty
    assert session.status == "empty"
    assert session.genre_mix.series.empty


def test_load_from_csv(catalog_csv):
    session = CatalogSession()
    session.load(catalog_csv)

    assert not session.loading
    assert session.error is None
    assert session.status == "ready"
    assert len(session.rows) == 8
    assert session.unparsed_dates == 2


def test_load_failure_leaves_empty_dataset(tmp_path, catalog_rows):
    session = CatalogSession(rows=catalog_rows)
    assert session.status == "ready"

    session.load(tmp_path / "missing.csv")

    assert not session.loading
    assert session.rows.empty
    assert session.status == "empty"
    assert "missing.csv" in session.error


def test_load_is_not_retried(catalog_rows):
    calls = []

    def failing_loader(source):
        calls.append(source)
        raise CatalogLoadError("HTTP 404 fetching CSV")

    session = CatalogSession()
    session.load("https://example.invalid/netflix_titles.csv", loader=failing_loader)

    assert calls == ["https://example.invalid/netflix_titles.csv"]
    assert session.error == "HTTP 404 fetching CSV"
    assert session.titles_added.empty


def test_loading_flag_during_load(catalog_rows):
    seen = []
    session = CatalogSession()

    def loader(source):
        seen.append(session.status)
        return catalog_rows

    session.load("netflix_titles.csv", loader=loader)
    assert seen == ["loading"]
    assert session.status == "ready"


def test_content_type_filter_recomputes_additions(catalog_rows):
    session = CatalogSession(rows=catalog_rows)
    assert session.titles_added["titles"].sum() == 6

    session.set_content_type("TV Show")
    assert session.titles_added.to_dict("records") == [{"year": 2021, "titles": 1}]

    session.set_content_type("All")
    assert session.titles_added["titles"].sum() == 6


def test_unknown_content_type_rejected(catalog_rows):
    session = CatalogSession(rows=catalog_rows)
    with pytest.raises(ValueError, match="Documentary"):
        session.set_content_type("Documentary")
    assert session.view.content_type == "All"


def test_content_type_does_not_touch_other_aggregates(catalog_rows):
    session = CatalogSession(rows=catalog_rows)
    types, mix = session.movies_vs_tv, session.full_genre_mix

    session.set_content_type("Movie")
    assert session.movies_vs_tv is types
    assert session.full_genre_mix is mix


def test_min_year_post_filters_genre_mix(catalog_rows):
    session = CatalogSession(rows=catalog_rows, view=ViewState(min_year=2008))
    full = session.full_genre_mix
    assert session.genre_mix.series["year"].tolist() == [2017, 2019, 2021]

    session.set_min_year(2019)
    assert session.genre_mix.series["year"].tolist() == [2019, 2021]
    assert session.genre_mix.columns == full.columns
    assert session.full_genre_mix is full


def test_hover_genre_only_changes_view(catalog_rows):
    session = CatalogSession(rows=catalog_rows)
    mix = session.full_genre_mix

    session.hover_genre("Dramas")
    assert session.view.hovered_genre == "Dramas"
    session.hover_genre("")
    assert session.view.hovered_genre is None
    assert session.full_genre_mix is mix


def test_replace_rows_recomputes_everything(catalog_rows, scenario_rows):
    session = CatalogSession(rows=catalog_rows, view=ViewState(min_year=2008))
    session.titles_added, session.movies_vs_tv, session.genre_mix

    session.replace_rows(scenario_rows)

    assert session.titles_added.to_dict("records") == [{"year": 2018, "titles": 2}]
    assert session.movies_vs_tv.to_dict("records") == [{"year": 2018, "Movie": 1, "TV Show": 1}]
    assert session.genre_mix.columns == ["Dramas", "Comedies"]


def test_top_k_is_configurable(catalog_rows):
    session = CatalogSession(rows=catalog_rows, top_k=2)
    assert session.genre_mix.columns == ["Dramas", "Horror Movies"]
