"""Error kinds raised or reported during a walk.

Walk failures reuse the builtin ``OSError`` hierarchy so callers can catch
them the way they catch any filesystem error. Only the cases the builtins
do not name get their own class here.
"""

import errno


class WalkError(Exception):
    """Base class for errors raised by dazzlewalk itself."""
    pass


class InvalidOptionsError(WalkError, ValueError):
    """Raised when WalkOptions are given values the walker cannot use."""
    pass


class ErrorThresholdExceeded(WalkError, RuntimeError):
    """Raised by ThresholdPolicy once too many errors have been reported."""
    pass


class BrokenSymlinkError(FileNotFoundError):
    """A symlink whose target cannot be reached.

    Only reported when following symlinks, for dangling links and for
    links that loop back onto themselves. It is a not-found kind, so the
    default policy suppresses it just like a vanished directory.
    """

    def __init__(self, path: str):
        super().__init__(errno.ENOENT, "Broken symlink", path)


def is_not_found(error: BaseException) -> bool:
    """Check whether an error means the path is simply gone.

    Args:
        error: Exception raised by a filesystem operation

    Returns:
        True for FileNotFoundError (and subclasses) or an ENOENT errno
    """
    if isinstance(error, FileNotFoundError):
        return True
    return isinstance(error, OSError) and error.errno == errno.ENOENT


def is_unresolvable_link(error: BaseException) -> bool:
    """Check whether following a symlink failed because it leads nowhere.

    A dangling link raises ENOENT; a link that points to itself, or a
    loop made only of links, raises ELOOP.
    """
    if is_not_found(error):
        return True
    return isinstance(error, OSError) and error.errno == errno.ELOOP
