"""High-level async API for dazzlewalk.

Async counterparts of ``dazzlewalk.sync.api``. Every function takes the
same arguments and returns the same results as its blocking twin.
"""

import os
from typing import Any, AsyncIterator, Dict, List, Optional, Union

from .._common.config import WalkOptions, resolve_options
from .._common.entry import Entry
from ..sync.api import _add_to_stats, _options_with
from .core.walker import AsyncWalker


def walk_async(root: Union[str, os.PathLike],
               options: Optional[WalkOptions] = None,
               *,
               adapter: Optional[Any] = None,
               **option_kwargs) -> AsyncIterator[Entry]:
    """Walk a directory tree asynchronously, yielding entries lazily.

    Directories and unfollowed symlinks are yielded alongside files. For
    a files-only walk pass ``include_dirs=False, include_symlinks=False``
    (or use find_files_async()).

    Args:
        root: Directory to walk
        options: WalkOptions, or pass its fields as keyword arguments
        adapter: Optional async adapter, or a blocking one to run in threads
        **option_kwargs: WalkOptions fields (max_depth, exts, match, skip, ...)

    Yields:
        Entry objects in the same order as the blocking walk()

    Example:
        >>> async for entry in walk_async("src", exts=[".py"]):
        ...     print(entry.path)
    """
    return AsyncWalker(root, resolve_options(options, **option_kwargs), adapter).__aiter__()


async def walk_paths_async(root: Union[str, os.PathLike],
                           options: Optional[WalkOptions] = None,
                           *,
                           adapter: Optional[Any] = None,
                           **option_kwargs) -> List[str]:
    """Collect the posix paths of an async walk, sorted."""
    paths = [entry.posix_path
             async for entry in walk_async(root, options, adapter=adapter, **option_kwargs)]
    return sorted(paths)


async def count_entries_async(root: Union[str, os.PathLike],
                              options: Optional[WalkOptions] = None,
                              *,
                              adapter: Optional[Any] = None,
                              **option_kwargs) -> int:
    count = 0
    async for _ in walk_async(root, options, adapter=adapter, **option_kwargs):
        count += 1
    return count


async def find_files_async(root: Union[str, os.PathLike],
                           *exts: str,
                           options: Optional[WalkOptions] = None,
                           adapter: Optional[Any] = None,
                           **option_kwargs) -> List[Entry]:
    """Find files asynchronously, optionally restricted to some suffixes.

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
    return [entry async for entry in AsyncWalker(root, resolved, adapter)]


async def find_directories_async(root: Union[str, os.PathLike],
                                 options: Optional[WalkOptions] = None,
                                 *,
                                 adapter: Optional[Any] = None,
                                 **option_kwargs) -> List[Entry]:
    resolved = _options_with(options, option_kwargs,
                             include_files=False, include_symlinks=False)
    return [entry async for entry in AsyncWalker(root, resolved, adapter)]


async def get_walk_stats_async(root: Union[str, os.PathLike],
                               options: Optional[WalkOptions] = None,
                               *,
                               adapter: Optional[Any] = None,
                               **option_kwargs) -> Dict[str, Any]:
    """Summarize an async walk; same keys as get_walk_stats()."""
    stats = {
        'total_entries': 0,
        'files': 0,
        'directories': 0,
        'symlinks': 0,
        'total_size': 0,
        'max_depth': 0,
    }
    async for entry in walk_async(root, options, adapter=adapter, **option_kwargs):
        _add_to_stats(stats, entry)
    return stats
