"""Configuration system for dazzlewalk.

This module defines how callers describe a walk: how deep to go, which
entries to yield and what to do when the filesystem fails underneath it.
"""

import re
from dataclasses import dataclass, field
from pathlib import PurePosixPath
from typing import Any, Callable, Iterable, Optional, Pattern, Sequence, Tuple, Union

from .entry import Entry, EntryType
from .error_policies import ErrorPolicy
from .errors import InvalidOptionsError


# A path predicate is a compiled regex (searched), a glob string (matched
# with pathlib's right-anchored rules) or any callable taking the path.
PathPredicate = Union[str, Pattern, Callable[[str], bool]]


def compile_predicate(predicate: PathPredicate) -> Callable[[str], bool]:
    """Turn a user supplied predicate into a callable over posix paths.

    Args:
        predicate: Regex pattern, glob string or callable

    Returns:
        Callable returning True when the path matches

    Raises:
        InvalidOptionsError: If the predicate is none of the supported kinds
    """
    if isinstance(predicate, re.Pattern):
        return lambda path: predicate.search(path) is not None
    if isinstance(predicate, str):
        if not predicate:
            raise InvalidOptionsError("Empty glob pattern")
        return lambda path: PurePosixPath(path).match(predicate)
    if callable(predicate):
        return lambda path: bool(predicate(path))
    raise InvalidOptionsError(
        f"Unsupported path predicate {predicate!r}: "
        f"expected a regex pattern, a glob string or a callable"
    )


def _as_tuple(value: Any) -> Tuple:
    """Accept a single value or any iterable of values."""
    if value is None:
        return ()
    if isinstance(value, (str, re.Pattern)) or callable(value):
        return (value,)
    return tuple(value)


@dataclass
class DepthConfig:
    """Configuration for depth-based pruning.

    Depth 0 is the walk root; its direct children are depth 1.
    """

    max_depth: Optional[int] = None  # None = unbounded

    def should_yield(self, depth: int) -> bool:
        """Check if entries at this depth may be yielded.

        Args:
            depth: Depth of the entry

        Returns:
            True if within the configured limit
        """
        if self.max_depth is None:
            return True
        return depth <= self.max_depth

    def should_explore(self, depth: int) -> bool:
        """Check if a directory at this depth should be listed.

        A directory is only listed when its children could still be
        yielded, so subtrees beyond the cutoff are never touched.

        Args:
            depth: Depth of the directory

        Returns:
            True if we should go deeper
        """
        if self.max_depth is None:
            return True
        return depth < self.max_depth


@dataclass
class FilterConfig:
    """Compiled filter pipeline deciding which entries are yielded.

    Filters only decide output; they never stop the walker from
    descending into a directory.
    """

    skip: Tuple[Callable[[str], bool], ...] = ()
    exts: Tuple[str, ...] = ()
    match: Tuple[Callable[[str], bool], ...] = ()
    include_files: bool = True
    include_dirs: bool = True
    include_symlinks: bool = True

    def accepts(self, entry: Entry) -> bool:
        """Check if an entry passes every filter.

        Order: type gates, skip (takes precedence), exts, match.

        Args:
            entry: Entry to check

        Returns:
            True if the entry should be yielded
        """
        entry_type = entry.entry_type
        if entry_type is EntryType.DIRECTORY and not self.include_dirs:
            return False
        if entry_type is EntryType.SYMLINK and not self.include_symlinks:
            return False
        if entry_type in (EntryType.FILE, EntryType.OTHER) and not self.include_files:
            return False

        path = entry.posix_path

        # Exclusion takes precedence
        if any(predicate(path) for predicate in self.skip):
            return False

        if self.exts and not path.endswith(self.exts):
            return False

        if self.match:
            return any(predicate(path) for predicate in self.match)

        return True


@dataclass
class WalkOptions:
    """Everything a caller can configure about one walk.

    Attributes:
        max_depth: Deepest entry to yield (None = unbounded)
        exts: Suffixes an entry's path must end with (any of)
        match: Path predicates an entry must match (any of)
        skip: Path predicates that exclude an entry (any of)
        follow_symlinks: Descend into symlinked directories
        on_error: ``callable(error, path)`` or an ErrorPolicy
        include_files: Yield regular files
        include_dirs: Yield directories
        include_symlinks: Yield symlinks that are not followed into directories
    """

    max_depth: Optional[int] = None
    exts: Sequence[str] = field(default_factory=tuple)
    match: Sequence[PathPredicate] = field(default_factory=tuple)
    skip: Sequence[PathPredicate] = field(default_factory=tuple)
    follow_symlinks: bool = False
    on_error: Optional[Callable[[OSError, str], Any]] = None
    include_files: bool = True
    include_dirs: bool = True
    include_symlinks: bool = True

    def __post_init__(self):
        if self.max_depth is not None:
            if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
                raise InvalidOptionsError(f"max_depth must be an int, got {self.max_depth!r}")
            if self.max_depth < 0:
                raise InvalidOptionsError(f"max_depth must be >= 0, got {self.max_depth}")

        self.exts = _as_tuple(self.exts)
        for ext in self.exts:
            if not isinstance(ext, str):
                raise InvalidOptionsError(f"exts must contain strings, got {ext!r}")

        self.match = _as_tuple(self.match)
        self.skip = _as_tuple(self.skip)
        for predicate in self.match + self.skip:
            compile_predicate(predicate)  # raises on unsupported kinds

        if self.on_error is not None:
            if not (callable(self.on_error) or isinstance(self.on_error, ErrorPolicy)):
                raise InvalidOptionsError(
                    f"on_error must be callable or an ErrorPolicy, got {self.on_error!r}"
                )

    def depth_config(self) -> DepthConfig:
        return DepthConfig(max_depth=self.max_depth)

    def filter_config(self) -> FilterConfig:
        """Compile the path filters for one walk."""
        return FilterConfig(
            skip=tuple(compile_predicate(p) for p in self.skip),
            exts=tuple(self.exts),
            match=tuple(compile_predicate(p) for p in self.match),
            include_files=self.include_files,
            include_dirs=self.include_dirs,
            include_symlinks=self.include_symlinks,
        )


def resolve_options(options: Optional[WalkOptions] = None, **option_kwargs) -> WalkOptions:
    """Build WalkOptions from either an options object or keyword arguments.

    Raises:
        TypeError: If both an options object and keyword options are given
    """
    if options is not None and option_kwargs:
        raise TypeError("Pass either a WalkOptions object or keyword options, not both")
    if options is None:
        return WalkOptions(**option_kwargs)
    if not isinstance(options, WalkOptions):
        raise TypeError(f"options must be WalkOptions, got {type(options).__name__}")
    return options


__all__ = [
    'PathPredicate',
    'compile_predicate',
    'DepthConfig',
    'FilterConfig',
    'WalkOptions',
    'resolve_options',
]
