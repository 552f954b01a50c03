"""Per-walk state shared by the sync and async walkers.

Both walkers run the same algorithm and differ only in whether adapter
calls are awaited. Everything that does not touch the filesystem lives
here so the two cannot drift apart.
"""

import os
from typing import Optional, Set, Union

import structlog

from .config import WalkOptions
from .entry import DirChild, Entry
from .error_policies import resolve_error_policy

log = structlog.get_logger(__name__)


class WalkContext:
    """State owned by one walk invocation.

    Holds the compiled filters, the error policy and, when following
    symlinks, the set of real directory paths already entered. A context
    is created per iteration and discarded with it; nothing is shared
    between walks.
    """

    def __init__(self, root: Union[str, os.PathLike], options: WalkOptions):
        self.root = os.fspath(root)
        self.options = options
        self.depth = options.depth_config()
        self.filters = options.filter_config()
        self.policy = resolve_error_policy(options.on_error)
        self.visited: Optional[Set[str]] = set() if options.follow_symlinks else None

    @property
    def follow_symlinks(self) -> bool:
        return self.visited is not None

    def should_list_root(self) -> bool:
        return self.depth.should_explore(0)

    def follows(self, child: DirChild) -> bool:
        """Check if the walker should look through this child's link."""
        return self.follow_symlinks and child.is_symlink

    def should_descend(self, entry: Entry) -> bool:
        """Check if a directory entry's contents are within reach.

        Filters are deliberately not consulted: a skipped directory is
        still walked.
        """
        return entry.is_directory and self.depth.should_explore(entry.depth)

    def enter_directory(self, entry: Entry, real_path: Optional[str]) -> bool:
        """Record a directory as entered while following symlinks.

        Only a symlinked directory is refused when its real path was
        already entered; plain directories cannot form cycles on their own.

        Args:
            entry: Directory entry about to be descended into
            real_path: Canonical path of the directory, None if unresolved

        Returns:
            True if the walker should descend into the directory
        """
        if real_path is None:
            return not entry.is_symlink
        if entry.is_symlink and real_path in self.visited:
            log.debug("symlink_cycle_skipped", path=entry.path, real_path=real_path)
            return False
        self.visited.add(real_path)
        return True

    def accepts(self, entry: Entry) -> bool:
        return self.depth.should_yield(entry.depth) and self.filters.accepts(entry)
