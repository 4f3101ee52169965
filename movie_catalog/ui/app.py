"""
Streamlit main app for the Movie Catalog.

Run: streamlit run movie_catalog/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_catalog.ui.utils.api_client import health_check, list_movies, search_movies
from movie_catalog.ui.utils.session_state import (
    clear_search_criteria,
    init_session_state,
    select_movie,
    set_search_criteria,
)
from movie_catalog.ui.components.movie_card import render_movie_card
from movie_catalog.ui.components.search_form import render_search_form

st.set_page_config(
    page_title="Movie Catalog",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

init_session_state()

st.title("🎬 Movie Catalog")
st.markdown("Browse the collection or search by name, id, or genre.")

# Check API health
try:
    health = health_check()
    if not health.get("catalog_loaded"):
        st.warning("The movie catalog could not be loaded; no movies are available.")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info("Start the API with: uvicorn movie_catalog.api.main:app --host 0.0.0.0 --port 8000")
    st.stop()


def show_details(movie_id: int) -> None:
    """Callback when the details button is pressed."""
    select_movie(movie_id)
    st.switch_page("pages/1_movie_details.py")


criteria = render_search_form()
if st.button("Clear search"):
    clear_search_criteria()
    st.rerun()

st.divider()

try:
    if criteria is None:
        movies = list_movies()["movies"]
    else:
        name, movie_id, genre = criteria
        set_search_criteria(name, movie_id, genre)
        data = search_movies(name=name, movie_id=movie_id, genre=genre)
        if data["success"]:
            st.success(data["message"])
            movies = data["results"]
        else:
            st.warning(data["message"])
            movies = list_movies()["movies"]

    if movies:
        for movie in movies:
            render_movie_card(movie, on_details=show_details)
    else:
        st.info("No movies to show.")
except Exception as e:
    st.error(f"Failed to load movies: {e}")
