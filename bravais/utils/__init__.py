"""
Utility helpers: logging configuration.
"""

from .logging import setup_logging, verbosity_to_level

__all__ = [
    'setup_logging',
    'verbosity_to_level',
]
