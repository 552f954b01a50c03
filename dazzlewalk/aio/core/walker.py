"""Async depth-first walker.

Same algorithm as the blocking Walker, with every adapter call awaited.
The walker suspends only at filesystem operations: listing, stat and
symlink resolution.
"""

import os
from typing import AsyncIterator, Iterator, List, Optional, Tuple, Union

import structlog

from ..._common.config import WalkOptions
from ..._common.entry import DirChild, Entry
from ..._common.errors import BrokenSymlinkError, is_unresolvable_link
from ..._common.walking import WalkContext
from ...sync.core.adapter import WalkAdapter
from ..adapters.filesystem import AsyncFileSystemAdapter
from .adapter import AsyncWalkAdapter

log = structlog.get_logger(__name__)


class AsyncWalker:
    """Async iterable over the entries below a root directory.

    Each ``async for`` starts a fresh walk. Stop consuming (or call
    ``aclose()`` on the iterator) to abandon it; pending work is plain
    in-memory lists, so nothing is left running.

    Example:
        async for entry in AsyncWalker("src", WalkOptions(exts=[".py"])):
            print(entry.path)
    """

    def __init__(self,
                 root: Union[str, os.PathLike],
                 options: Optional[WalkOptions] = None,
                 adapter: Optional[Union[AsyncWalkAdapter, WalkAdapter]] = None):
        """Initialize async walker.

        Args:
            root: Directory to walk; yielded paths start with it as given
            options: Walk configuration (defaults to WalkOptions())
            adapter: Async adapter, or a blocking one to run in threads
        """
        self.root = os.fspath(root)
        self.options = options or WalkOptions()
        if adapter is None or isinstance(adapter, WalkAdapter):
            adapter = AsyncFileSystemAdapter(adapter)
        self.adapter = adapter

    def __aiter__(self) -> AsyncIterator[Entry]:
        return self._walk(WalkContext(self.root, self.options))

    async def _walk(self, ctx: WalkContext) -> AsyncIterator[Entry]:
        log.debug("walk_started", root=ctx.root, mode="async",
                  follow_symlinks=ctx.follow_symlinks)

        if not ctx.should_list_root():
            return

        if ctx.follow_symlinks:
            real_root = await self._real_path(ctx, ctx.root)
            if real_root is not None:
                ctx.visited.add(real_root)

        children = await self._list(ctx, ctx.root)
        if not children:
            return

        stack: List[Tuple[Iterator[DirChild], int]] = [(iter(children), 1)]
        while stack:
            pending, depth = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                continue

            entry = await self._entry(ctx, child, depth)
            if entry is None:
                continue

            descend = ctx.should_descend(entry)
            if descend and ctx.follow_symlinks:
                descend = ctx.enter_directory(entry, await self._real_path(ctx, entry.path))

            if ctx.accepts(entry):
                yield entry

            if descend:
                grandchildren = await self._list(ctx, entry.path)
                if grandchildren:
                    stack.append((iter(grandchildren), depth + 1))

    async def _entry(self, ctx: WalkContext, child: DirChild, depth: int) -> Optional[Entry]:
        """Stat a child and build its entry, or report why we can't."""
        followed = ctx.follows(child)
        try:
            st = await self.adapter.stat(child.path, follow_symlinks=followed)
        except OSError as e:
            if followed and is_unresolvable_link(e):
                await ctx.policy.handle(BrokenSymlinkError(child.path), child.path)
            else:
                await ctx.policy.handle(e, child.path)
            return None
        return Entry.from_stat(child, depth, st, followed=followed)

    async def _list(self, ctx: WalkContext, path: str) -> Optional[List[DirChild]]:
        try:
            return await self.adapter.list_children(path)
        except OSError as e:
            log.debug("directory_listing_failed", path=path, error=str(e))
            await ctx.policy.handle(e, path)
            return None

    async def _real_path(self, ctx: WalkContext, path: str) -> Optional[str]:
        try:
            return await self.adapter.real_path(path)
        except OSError as e:
            await ctx.policy.handle(e, path)
            return None

    def __repr__(self) -> str:
        return f"AsyncWalker(root={self.root!r}, adapter={self.adapter!r})"
