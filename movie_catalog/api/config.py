"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path


def get_movies_data_path() -> str:
    """Get movie dataset file path from env or default."""
    return os.getenv("MOVIES_DATA_PATH", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "movies.json"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> str | None:
    """Get optional API log file name from env (console only when unset)."""
    return os.getenv("LOG_FILE") or None


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("API_PORT", "8000"))
