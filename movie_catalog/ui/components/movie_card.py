"""
Movie display card component.
"""

import streamlit as st

GENRE_ICONS = {
    "action": "💥",
    "adventure": "🗺️",
    "animation": "🎨",
    "comedy": "😂",
    "crime": "🕵️",
    "drama": "🎭",
    "horror": "👻",
    "romance": "💕",
    "sci-fi": "🚀",
    "thriller": "🔪",
}
DEFAULT_ICON = "🎬"


def genre_icon(genre: str) -> str:
    """Pick an icon from the first recognised category of a genre string."""
    for part in genre.lower().split("/"):
        icon = GENRE_ICONS.get(part.strip())
        if icon:
            return icon
    return DEFAULT_ICON


def render_movie_card(movie: dict, on_details: callable = None) -> None:
    """
    Render a movie card.

    Args:
        movie: Movie as returned by the API
        on_details: Callback(movie_id) when the details button is pressed
    """
    with st.container():
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(f"{genre_icon(movie['genre'])} **{movie['title']}** ({movie['year']})")
            st.caption(
                f"{movie['genre']} | {movie['director']} | "
                f"{movie['duration_minutes']} min | Rating: {movie['rating']:.1f}"
            )
        with col2:
            if on_details and st.button("Details", key=f"details_{movie['id']}"):
                on_details(movie["id"])
        st.divider()


def render_movie_details(movie: dict) -> None:
    """Render the full details of one movie."""
    st.header(f"{genre_icon(movie['genre'])} {movie['title']}")
    col1, col2, col3 = st.columns(3)
    col1.metric("Year", movie["year"])
    col2.metric("Duration", f"{movie['duration_minutes']} min")
    col3.metric("Rating", f"{movie['rating']:.1f}")
    st.markdown(f"**Director:** {movie['director']}")
    st.markdown(f"**Genre:** {movie['genre']}")
    st.write(movie["description"])
