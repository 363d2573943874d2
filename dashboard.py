# dashboard.py
import logging

import pandas as pd
import streamlit as st

from catalog_growth import CatalogSession, load_catalog
from catalog_growth.charts import genre_mix_figure, movies_vs_tv_figure, titles_added_figure
from catalog_growth.config import (
    CONTENT_TYPES,
    DATA_SOURCE_URL,
    DEFAULT_CSV_PATH,
    DEFAULT_MIN_YEAR,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
    MIN_YEAR_CHOICES,
    OTHER,
)

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)
logger = logging.getLogger("dashboard")

st.set_page_config(page_title="Netflix Catalog Growth", page_icon="📈", layout="centered")


@st.cache_data
def load_data(path: str) -> pd.DataFrame:
    return load_catalog(path)


def get_session(path: str) -> CatalogSession:
    session = st.session_state.get("catalog")
    if session is None or st.session_state.get("catalog_source") != path:
        session = CatalogSession()
        with st.spinner("Loading dataset…"):
            session.load(path, loader=load_data)
        st.session_state["catalog"] = session
        st.session_state["catalog_source"] = path
    return session


# ===== Sidebar =====
st.sidebar.title("📁 Data Source")
csv_path = st.sidebar.text_input(
    "CSV path or URL", value=DEFAULT_CSV_PATH, help="Path or URL of netflix_titles.csv"
)
if st.sidebar.button("Reload"):
    logger.info("Reloading catalog from %s", csv_path)
    load_data.clear()
    st.session_state.pop("catalog", None)

session = get_session(csv_path)

# ===== Header =====
st.title("Netflix Catalog Growth")
st.write(
    "A lightweight dashboard exploring how Netflix’s catalog has evolved over time. "
    "Showing overall growth, the balance of Movies vs TV Shows, and shifting genre mix."
)

content_type = st.selectbox("Type", CONTENT_TYPES, index=CONTENT_TYPES.index(session.view.content_type))
session.set_content_type(content_type)

if session.error:
    st.error(session.error)

if session.status == "empty":
    st.info(
        f"No rows were parsed. Double-check that `{csv_path}` exists "
        "and includes a `date_added` column."
    )
else:
    # ===== Titles added per year =====
    st.subheader("Titles Added Per Year")
    st.caption("*How quickly has Netflix’s catalog expanded over time?*")
    st.write("Growth of Netflix’s catalog over time.")
    st.plotly_chart(titles_added_figure(session.titles_added), use_container_width=True)

    # ===== Movies vs TV Shows =====
    st.subheader("Movies vs TV Shows Over Time")
    st.caption("*How has Netflix balanced Movies vs TV Shows as the platform scaled?*")
    st.write("Comparison of catalog growth by content type.")
    st.plotly_chart(movies_vs_tv_figure(session.movies_vs_tv), use_container_width=True)

    # ===== Genre mix =====
    col1, col2 = st.columns(2)
    with col1:
        min_year = st.selectbox(
            "From year",
            MIN_YEAR_CHOICES,
            index=MIN_YEAR_CHOICES.index(
                session.view.min_year if session.view.min_year in MIN_YEAR_CHOICES else DEFAULT_MIN_YEAR
            ),
            format_func=lambda y: f"{y}+",
        )
        session.set_min_year(min_year)
    mix = session.genre_mix
    with col2:
        choices = [None] + mix.columns + ([OTHER] if OTHER not in mix.columns else [])
        hovered = st.selectbox(
            "Highlight genre",
            choices,
            index=choices.index(session.view.hovered_genre) if session.view.hovered_genre in choices else 0,
            format_func=lambda g: "None" if g is None else g,
        )
        session.hover_genre(hovered)

    st.subheader("Genre Mix Over Time")
    st.caption("*How has the composition of Netflix’s content shifted by genre over time?*")
    st.write("Catalog additions by year, segmented by genre.")
    st.caption("Pick a genre to isolate it.")

    if not mix.series.empty:
        st.plotly_chart(
            genre_mix_figure(mix, session.view.hovered_genre), use_container_width=True
        )
    else:
        st.caption("Genre chart will appear once `listed_in` values are parsed.")

    # Data quality note
    st.write(f"Rows loaded: **{len(session.rows):,}**")
    st.caption(f"Unparsed/blank dates: {session.unparsed_dates}")

# ===== Footer =====
st.caption(f"Data source: [Netflix Movies and TV Shows (Kaggle)]({DATA_SOURCE_URL})")
