"""Core abstractions for blocking walks.

This module contains the adapter interface and the walker that drives it.
"""

from .adapter import WalkAdapter
from .walker import Walker

__all__ = [
    "WalkAdapter",
    "Walker",
]
