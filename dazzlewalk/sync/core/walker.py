"""Blocking depth-first walker.

Walks a directory tree pre-order: each directory entry is yielded before
its contents, and every subdirectory is fully expanded before the next
sibling. Pending work is an explicit stack of child lists, so abandoning
the iterator leaves nothing open behind it.
"""

import os
from typing import Iterator, List, Optional, Tuple, Union

import structlog

from ..._common.config import WalkOptions
from ..._common.entry import DirChild, Entry
from ..._common.errors import BrokenSymlinkError, is_unresolvable_link
from ..._common.walking import WalkContext
from ..adapters.filesystem import FileSystemAdapter
from .adapter import WalkAdapter

log = structlog.get_logger(__name__)


class Walker:
    """Iterable over the entries below a root directory.

    Each call to ``iter()`` starts a fresh walk with its own state. The
    root itself is never yielded.

    Example:
        for entry in Walker("src", WalkOptions(exts=[".py"])):
            print(entry.path)
    """

    def __init__(self,
                 root: Union[str, os.PathLike],
                 options: Optional[WalkOptions] = None,
                 adapter: Optional[WalkAdapter] = None):
        """Initialize walker.

        Args:
            root: Directory to walk; yielded paths start with it as given
            options: Walk configuration (defaults to WalkOptions())
            adapter: Filesystem access (defaults to FileSystemAdapter())
        """
        self.root = os.fspath(root)
        self.options = options or WalkOptions()
        self.adapter = adapter or FileSystemAdapter()

    def __iter__(self) -> Iterator[Entry]:
        return self._walk(WalkContext(self.root, self.options))

    def _walk(self, ctx: WalkContext) -> Iterator[Entry]:
        log.debug("walk_started", root=ctx.root, mode="sync",
                  follow_symlinks=ctx.follow_symlinks)

        if not ctx.should_list_root():
            return

        if ctx.follow_symlinks:
            real_root = self._real_path(ctx, ctx.root)
            if real_root is not None:
                ctx.visited.add(real_root)

        children = self._list(ctx, ctx.root)
        if not children:
            return

        stack: List[Tuple[Iterator[DirChild], int]] = [(iter(children), 1)]
        while stack:
            pending, depth = stack[-1]
            child = next(pending, None)
            if child is None:
                stack.pop()
                continue

            entry = self._entry(ctx, child, depth)
            if entry is None:
                continue

            descend = ctx.should_descend(entry)
            if descend and ctx.follow_symlinks:
                descend = ctx.enter_directory(entry, self._real_path(ctx, entry.path))

            if ctx.accepts(entry):
                yield entry

            if descend:
                grandchildren = self._list(ctx, entry.path)
                if grandchildren:
                    stack.append((iter(grandchildren), depth + 1))

    def _entry(self, ctx: WalkContext, child: DirChild, depth: int) -> Optional[Entry]:
        """Stat a child and build its entry, or report why we can't."""
        followed = ctx.follows(child)
        try:
            st = self.adapter.stat(child.path, follow_symlinks=followed)
        except OSError as e:
            if followed and is_unresolvable_link(e):
                ctx.policy.handle_sync(BrokenSymlinkError(child.path), child.path)
            else:
                ctx.policy.handle_sync(e, child.path)
            return None
        return Entry.from_stat(child, depth, st, followed=followed)

    def _list(self, ctx: WalkContext, path: str) -> Optional[List[DirChild]]:
        try:
            return self.adapter.list_children(path)
        except OSError as e:
            log.debug("directory_listing_failed", path=path, error=str(e))
            ctx.policy.handle_sync(e, path)
            return None

    def _real_path(self, ctx: WalkContext, path: str) -> Optional[str]:
        try:
            return self.adapter.real_path(path)
        except OSError as e:
            ctx.policy.handle_sync(e, path)
            return None

    def __repr__(self) -> str:
        return f"Walker(root={self.root!r}, adapter={self.adapter!r})"
