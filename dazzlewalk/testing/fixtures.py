"""Test fixtures for dazzlewalk consumers.

Helpers to lay out small directory trees and to make an adapter fail on
chosen paths, so error handling can be tested without changing file
permissions (which root ignores anyway).
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .._common.entry import DirChild
from ..sync.adapters.filesystem import FileSystemAdapter
from ..sync.core.adapter import WalkAdapter


def touch(path: Union[str, Path]) -> Path:
    """Create an empty file, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


def build_tree(root: Union[str, Path], layout: Iterable[str]) -> Path:
    """Create files and directories below root.

    Entries ending with '/' become directories, everything else becomes
    an empty file.

    Example:
        build_tree(tmp_path, ["a/x", "a/y", "b/z", "empty/"])

    Args:
        root: Existing directory to build in
        layout: Relative paths, posix style

    Returns:
        root as a Path
    """
    root = Path(root)
    for relative in layout:
        target = root / relative
        if relative.endswith('/'):
            target.mkdir(parents=True, exist_ok=True)
        else:
            touch(target)
    return root


def symlinks_supported() -> bool:
    """Check if this platform lets unprivileged tests create symlinks."""
    return hasattr(os, 'symlink') and os.name != 'nt'


def make_symlink(target: Union[str, Path], link: Union[str, Path]) -> Path:
    """Create a symlink at ``link`` pointing to ``target``.

    Returns:
        The link path
    """
    link = Path(link)
    os.symlink(os.fspath(target), os.fspath(link),
               target_is_directory=Path(target).is_dir())
    return link


class FaultInjectingAdapter(WalkAdapter):
    """Adapter that raises chosen errors for chosen paths.

    Wraps a real adapter and fails list/stat/real_path calls whose path
    is registered. Calls are recorded in ``calls`` as (operation, path).

    Example:
        adapter = FaultInjectingAdapter(list_errors={str(tmp_path / "a"): PermissionError(13, "denied")})
        walk(tmp_path, adapter=adapter, on_error=errors.append)
    """

    def __init__(self,
                 base_adapter: Optional[WalkAdapter] = None,
                 list_errors: Optional[Dict[str, OSError]] = None,
                 stat_errors: Optional[Dict[str, OSError]] = None,
                 real_path_errors: Optional[Dict[str, OSError]] = None):
        self._adapter = base_adapter or FileSystemAdapter()
        self.list_errors = dict(list_errors or {})
        self.stat_errors = dict(stat_errors or {})
        self.real_path_errors = dict(real_path_errors or {})
        self.calls: List[Tuple[str, str]] = []

    def list_children(self, path: str) -> List[DirChild]:
        self.calls.append(('list_children', path))
        if path in self.list_errors:
            raise self.list_errors[path]
        return self._adapter.list_children(path)

    def stat(self, path: str, follow_symlinks: bool = False) -> os.stat_result:
        self.calls.append(('stat', path))
        if path in self.stat_errors:
            raise self.stat_errors[path]
        return self._adapter.stat(path, follow_symlinks=follow_symlinks)

    def real_path(self, path: str) -> str:
        self.calls.append(('real_path', path))
        if path in self.real_path_errors:
            raise self.real_path_errors[path]
        return self._adapter.real_path(path)

    def listed_paths(self) -> List[str]:
        return [path for op, path in self.calls if op == 'list_children']
