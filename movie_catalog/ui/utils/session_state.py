"""
Session state helpers for Streamlit.
"""

import streamlit as st


def get_selected_movie_id() -> int | None:
    """Get the movie chosen for the details page."""
    return st.session_state.get("selected_movie_id")


def select_movie(movie_id: int) -> None:
    """Remember the movie to show on the details page."""
    st.session_state["selected_movie_id"] = movie_id


def set_search_criteria(name: str | None, movie_id: int | None, genre: str | None) -> None:
    """Store the last submitted search so the form can be refilled."""
    st.session_state["search_name"] = name or ""
    st.session_state["search_id"] = movie_id
    st.session_state["search_genre"] = genre or ""


def clear_search_criteria() -> None:
    """Reset the search form."""
    set_search_criteria(None, None, None)


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "selected_movie_id" not in st.session_state:
        st.session_state["selected_movie_id"] = None
    if "search_name" not in st.session_state:
        clear_search_criteria()
