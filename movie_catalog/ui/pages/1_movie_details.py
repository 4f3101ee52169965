"""
Movie details page.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_catalog.ui.utils.api_client import get_movie
from movie_catalog.ui.utils.session_state import (
    get_selected_movie_id,
    init_session_state,
    select_movie,
)
from movie_catalog.ui.components.movie_card import render_movie_details

init_session_state()

movie_id = st.number_input("Movie ID", min_value=1, step=1, value=get_selected_movie_id() or 1)
select_movie(int(movie_id))

try:
    movie = get_movie(int(movie_id))
except Exception as e:
    st.error(f"Failed to load movie: {e}")
    st.stop()

if movie is None:
    st.title("Movie Not Found")
    st.error(f"Movie with ID {int(movie_id)} was not found.")
else:
    render_movie_details(movie)

if st.button("⬅ Back to catalog"):
    st.switch_page("app.py")
