"""Core abstractions for async walks.

All adapter methods are awaitable; the walker suspends only inside them.
"""

from .adapter import AsyncWalkAdapter
from .walker import AsyncWalker

__all__ = [
    'AsyncWalkAdapter',
    'AsyncWalker',
]
