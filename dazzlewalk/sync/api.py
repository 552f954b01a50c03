"""High-level API for dazzlewalk.

This module provides simple functions for the most common walks. They
hide Walker and adapter construction while still allowing both to be
customized.
"""

import dataclasses
import os
from typing import Any, Dict, Iterator, List, Optional, Union

from .._common.config import WalkOptions, resolve_options
from .._common.entry import Entry
from .core.adapter import WalkAdapter
from .core.walker import Walker


def _options_with(options: Optional[WalkOptions],
                  option_kwargs: Dict[str, Any],
                  **overrides) -> WalkOptions:
    """Resolve options, then force the given fields."""
    return dataclasses.replace(resolve_options(options, **option_kwargs), **overrides)


def walk(root: Union[str, os.PathLike],
         options: Optional[WalkOptions] = None,
         *,
         adapter: Optional[WalkAdapter] = None,
         **option_kwargs) -> Iterator[Entry]:
    """Walk a directory tree, yielding entries lazily.

    Directories and unfollowed symlinks are yielded alongside files. For
    a files-only walk pass ``include_dirs=False, include_symlinks=False``
    (or use find_files()).

    Args:
        root: Directory to walk
        options: WalkOptions, or pass its fields as keyword arguments
        adapter: Optional custom adapter (creates FileSystemAdapter if None)
        **option_kwargs: WalkOptions fields (max_depth, exts, match, skip, ...)

    Yields:
        Entry objects, depth-first, directories before their contents

    Example:
        >>> for entry in walk("src", exts=[".py"], skip=[re.compile("test")]):
        ...     print(entry.path)
    """
    return iter(Walker(root, resolve_options(options, **option_kwargs), adapter))


def walk_paths(root: Union[str, os.PathLike],
               options: Optional[WalkOptions] = None,
               *,
               adapter: Optional[WalkAdapter] = None,
               **option_kwargs) -> List[str]:
    """Collect the posix paths of a walk, sorted.

    Sorting makes the result independent of directory listing order.
    """
    return sorted(entry.posix_path
                  for entry in walk(root, options, adapter=adapter, **option_kwargs))


def count_entries(root: Union[str, os.PathLike],
                  options: Optional[WalkOptions] = None,
                  *,
                  adapter: Optional[WalkAdapter] = None,
                  **option_kwargs) -> int:
    """Count the entries a walk would yield."""
    return sum(1 for _ in walk(root, options, adapter=adapter, **option_kwargs))


def find_files(root: Union[str, os.PathLike],
               *exts: str,
               options: Optional[WalkOptions] = None,
               adapter: Optional[WalkAdapter] = None,
               **option_kwargs) -> List[Entry]:
    """Find files, optionally restricted to some suffixes.

    Args:
        root: Directory to search
        *exts: Suffixes to keep (e.g. '.py', '.txt'); all files if none
        options: Base WalkOptions
        adapter: Optional custom adapter
        **option_kwargs: WalkOptions fields

    Returns:
        File entries in walk order
    """
    overrides = {'include_dirs': False, 'include_symlinks': False}
    if exts:
        overrides['exts'] = exts
    resolved = _options_with(options, option_kwargs, **overrides)
    return list(Walker(root, resolved, adapter))


def find_directories(root: Union[str, os.PathLike],
                     options: Optional[WalkOptions] = None,
                     *,
                     adapter: Optional[WalkAdapter] = None,
                     **option_kwargs) -> List[Entry]:
    """Find directories below root (root itself excluded)."""
    resolved = _options_with(options, option_kwargs,
                             include_files=False, include_symlinks=False)
    return list(Walker(root, resolved, adapter))


def get_walk_stats(root: Union[str, os.PathLike],
                   options: Optional[WalkOptions] = None,
                   *,
                   adapter: Optional[WalkAdapter] = None,
                   **option_kwargs) -> Dict[str, Any]:
    """Summarize a walk.

    Returns:
        Dictionary with counts of files, directories and symlinks, the
        total size of files in bytes and the deepest depth reached
    """
    stats = {
        'total_entries': 0,
        'files': 0,
        'directories': 0,
        'symlinks': 0,
        'total_size': 0,
        'max_depth': 0,
    }
    for entry in walk(root, options, adapter=adapter, **option_kwargs):
        _add_to_stats(stats, entry)
    return stats


def _add_to_stats(stats: Dict[str, Any], entry: Entry) -> None:
    stats['total_entries'] += 1
    if entry.is_directory:
        stats['directories'] += 1
    elif entry.is_file:
        stats['files'] += 1
        stats['total_size'] += entry.size or 0
    if entry.is_symlink:
        stats['symlinks'] += 1
    stats['max_depth'] = max(stats['max_depth'], entry.depth)
