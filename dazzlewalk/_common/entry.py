"""Entry value object yielded by both walker implementations.

An Entry is a plain snapshot of what the walker learned about one child
while listing its parent. It never touches the filesystem after creation.
"""

import os
import stat as stat_module  # To avoid name collision with Entry.stat
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, NamedTuple, Optional


class DirChild(NamedTuple):
    """One raw directory listing result, before the walker stats it.

    ``is_symlink`` comes from the listing itself; the walker uses it to
    decide whether to stat through the link.
    """
    name: str
    path: str
    is_symlink: bool = False


class EntryType(Enum):
    """What kind of filesystem object an entry is."""
    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"        # Unfollowed, or followed to a non-directory/non-file
    OTHER = "other"            # Sockets, fifos, devices


@dataclass(frozen=True)
class Entry:
    """One filesystem object discovered during a walk.

    Attributes:
        path: Root joined with the relative segments, as given by the caller
        name: Final path component
        depth: Distance from the walk root (root's children are depth 1)
        is_file: Regular file (or symlink to one, when following)
        is_directory: Directory (or symlink to one, when following)
        is_symlink: The entry itself is a symbolic link
        stat: lstat result, or the target's stat for a followed symlink
    """
    path: str
    name: str
    depth: int
    is_file: bool = False
    is_directory: bool = False
    is_symlink: bool = False
    stat: Optional[os.stat_result] = field(default=None, compare=False, repr=False)

    @property
    def posix_path(self) -> str:
        """Path with separators normalized to forward slashes."""
        return self.path.replace("\\", "/")

    @property
    def entry_type(self) -> EntryType:
        if self.is_directory:
            return EntryType.DIRECTORY
        if self.is_file:
            return EntryType.FILE
        if self.is_symlink:
            return EntryType.SYMLINK
        return EntryType.OTHER

    @property
    def size(self) -> Optional[int]:
        """Size in bytes, or None when no stat result is available."""
        return self.stat.st_size if self.stat is not None else None

    def metadata(self) -> Dict[str, Any]:
        """Return a metadata dictionary for this entry.

        Returns:
            Dictionary with path, name, type, depth and, when the stat
            result is known, size, mtime and mode
        """
        metadata = {
            'path': self.path,
            'name': self.name,
            'type': self.entry_type.value,
            'depth': self.depth,
            'is_symlink': self.is_symlink,
        }
        if self.stat is not None:
            metadata.update({
                'size': self.stat.st_size,
                'modified_time': self.stat.st_mtime,
                'mode': stat_module.filemode(self.stat.st_mode),
            })
        return metadata

    def __str__(self) -> str:
        return self.path

    @classmethod
    def from_stat(cls, child: DirChild, depth: int, st: os.stat_result,
                  followed: bool = False) -> 'Entry':
        """Build an entry from a listing result and its stat.

        Args:
            child: Listing result for the entry
            depth: Depth of the entry
            st: lstat of the entry, or the target's stat when followed
            followed: True when st describes a symlink's target

        Returns:
            New Entry
        """
        mode = st.st_mode
        return cls(
            path=child.path,
            name=child.name,
            depth=depth,
            is_file=stat_module.S_ISREG(mode),
            is_directory=stat_module.S_ISDIR(mode),
            is_symlink=followed or stat_module.S_ISLNK(mode),
            stat=st,
        )
