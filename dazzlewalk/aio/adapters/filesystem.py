"""Async filesystem adapter for directory walks.

Runs a blocking WalkAdapter's calls in worker threads with
asyncio.to_thread, so the event loop is free between filesystem
operations. Uses composition: any blocking adapter can be wrapped.
"""

import asyncio
import os
from typing import List, Optional

from ..._common.entry import DirChild
from ...sync.adapters.filesystem import FileSystemAdapter
from ...sync.core.adapter import WalkAdapter
from ..core.adapter import AsyncWalkAdapter


class AsyncFileSystemAdapter(AsyncWalkAdapter):
    """Async view over a blocking adapter.

    Each call runs to completion in one worker thread. A listing is
    materialized and its scandir handle closed inside that thread, so an
    abandoned walk never leaves a handle or a pending task behind.
    """

    def __init__(self, base_adapter: Optional[WalkAdapter] = None):
        """Initialize async filesystem adapter.

        Args:
            base_adapter: Blocking adapter to wrap (creates FileSystemAdapter if None)
        """
        self._adapter = base_adapter or FileSystemAdapter()

    @property
    def base_adapter(self) -> WalkAdapter:
        return self._adapter

    async def list_children(self, path: str) -> List[DirChild]:
        return await asyncio.to_thread(self._adapter.list_children, path)

    async def stat(self, path: str, follow_symlinks: bool = False) -> os.stat_result:
        return await asyncio.to_thread(self._adapter.stat, path, follow_symlinks)

    async def real_path(self, path: str) -> str:
        return await asyncio.to_thread(self._adapter.real_path, path)

    def __repr__(self) -> str:
        return f"AsyncFileSystemAdapter({self._adapter!r})"
