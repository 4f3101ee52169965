"""
Movie Catalog Application Package.

This package contains the in-memory movie catalog, its query engine,
the FastAPI service, the Streamlit UI, and shared utilities.
"""

__version__ = "1.0.0"
