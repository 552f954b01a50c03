"""WalkAdapter abstraction for dazzlewalk.

The adapter is the filesystem capability surface the walker consumes:
directory listing, stat and symlink resolution. The walker never calls
``os`` directly, which keeps traversal logic independent of where the
tree lives and lets tests inject failures.
"""

import os
from abc import ABC, abstractmethod
from typing import List

from ..._common.entry import DirChild


class WalkAdapter(ABC):
    """Abstract adapter giving blocking access to a directory tree.

    Implementations raise ``OSError`` subclasses on failure; the walker
    routes them through the walk's error policy.
    """

    @abstractmethod
    def list_children(self, path: str) -> List[DirChild]:
        """List the immediate children of a directory.

        The listing must be fully materialized before returning so no
        directory handle outlives the call.

        Args:
            path: Directory to list

        Returns:
            Children in the order the underlying listing produced them

        Raises:
            FileNotFoundError: If the directory does not exist
            NotADirectoryError: If the path is not a directory
            PermissionError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def stat(self, path: str, follow_symlinks: bool = False) -> os.stat_result:
        """Stat a path.

        Args:
            path: Path to stat
            follow_symlinks: Stat the target instead of the link itself

        Returns:
            Stat result
        """
        pass

    @abstractmethod
    def real_path(self, path: str) -> str:
        """Return the canonical path with every symlink resolved.

        Args:
            path: Path to resolve

        Returns:
            Canonical absolute path
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
