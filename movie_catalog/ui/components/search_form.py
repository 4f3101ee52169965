"""
Search form component (name, id, genre).
"""

import streamlit as st


def render_search_form() -> tuple[str, int | None, str] | None:
    """
    Render the search form.

    Returns:
        (name, movie_id, genre) when submitted, else None. An id of 0 is
        returned as None.
    """
    with st.form("movie_search"):
        col1, col2, col3 = st.columns([2, 1, 2])
        with col1:
            name = st.text_input("Name", value=st.session_state.get("search_name", ""))
        with col2:
            movie_id = st.number_input(
                "ID",
                min_value=0,
                step=1,
                value=st.session_state.get("search_id") or 0,
            )
        with col3:
            genre = st.text_input("Genre", value=st.session_state.get("search_genre", ""))
        submitted = st.form_submit_button("Search")

    if not submitted:
        return None
    return name, int(movie_id) or None, genre
