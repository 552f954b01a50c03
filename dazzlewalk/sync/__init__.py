"""Synchronous implementation of dazzlewalk.

All components here operate in a blocking manner; a walk is a plain
iterator that can be consumed without any event loop.
"""

# Core components
from .core.adapter import WalkAdapter
from .core.walker import Walker

# Adapters
from .adapters.filesystem import FileSystemAdapter

# Configuration
from .config import (
    PathPredicate,
    DepthConfig,
    FilterConfig,
    WalkOptions,
)

# High-level API
from .api import (
    walk,
    walk_paths,
    count_entries,
    find_files,
    find_directories,
    get_walk_stats,
)

__all__ = [
    # Core
    'WalkAdapter',
    'Walker',
    # Adapters
    'FileSystemAdapter',
    # Config
    'PathPredicate',
    'DepthConfig',
    'FilterConfig',
    'WalkOptions',
    # API
    'walk',
    'walk_paths',
    'count_entries',
    'find_files',
    'find_directories',
    'get_walk_stats',
]
