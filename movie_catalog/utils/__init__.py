"""
Shared utilities package.

This package contains logging configuration used by the API and scripts.
"""

from movie_catalog.utils.logging_config import setup_logging, configure_api_logging

__all__ = ['setup_logging', 'configure_api_logging']
