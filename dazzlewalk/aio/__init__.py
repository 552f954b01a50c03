"""Asynchronous implementation of dazzlewalk.

Native async/await walks that yield control to the event loop at every
filesystem operation. Results match the synchronous implementation entry
for entry.
"""

# Core abstractions
from .core import (
    AsyncWalkAdapter,
    AsyncWalker,
)

# Adapters
from .adapters import AsyncFileSystemAdapter

# Configuration (re-exported from _common)
from .config import (
    PathPredicate,
    DepthConfig,
    FilterConfig,
    WalkOptions,
)

# High-level API
from .api import (
    walk_async,
    walk_paths_async,
    count_entries_async,
    find_files_async,
    find_directories_async,
    get_walk_stats_async,
)

__all__ = [
    # Core abstractions
    'AsyncWalkAdapter',
    'AsyncWalker',
    # Adapters
    'AsyncFileSystemAdapter',
    # Configuration
    'PathPredicate',
    'DepthConfig',
    'FilterConfig',
    'WalkOptions',
    # High-level API
    'walk_async',
    'walk_paths_async',
    'count_entries_async',
    'find_files_async',
    'find_directories_async',
    'get_walk_stats_async',
]
