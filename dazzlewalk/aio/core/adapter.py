"""Async adapter interface for directory walks.

Mirrors the blocking WalkAdapter with awaitable methods. Every method
is a suspension point of the async walker.
"""

import os
from abc import ABC, abstractmethod
from typing import List

from ..._common.entry import DirChild


class AsyncWalkAdapter(ABC):
    """Abstract adapter giving non-blocking access to a directory tree.

    Implementations raise ``OSError`` subclasses on failure, exactly like
    their blocking counterparts, so both walkers report the same errors.
    """

    @abstractmethod
    async def list_children(self, path: str) -> List[DirChild]:
        """List the immediate children of a directory.

        Args:
            path: Directory to list

        Returns:
            Fully materialized children in listing order
        """
        pass

    @abstractmethod
    async def stat(self, path: str, follow_symlinks: bool = False) -> os.stat_result:
        """Stat a path, optionally through its symlink."""
        pass

    @abstractmethod
    async def real_path(self, path: str) -> str:
        """Return the canonical path with every symlink resolved."""
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
