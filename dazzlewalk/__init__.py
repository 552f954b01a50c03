"""dazzlewalk - Lazy, filtered directory walks in sync and async form.

dazzlewalk yields the files, directories and symlinks below a root path
one entry at a time, with depth limits, suffix/pattern filters, symlink
following with cycle protection and pluggable error handling.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from dazzlewalk.sync import walk

Asynchronous:
    from dazzlewalk.aio import walk_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Both implementations run the same algorithm and yield the same entries
for the same tree and options.
"""

__version__ = "0.1.0"

from . import sync
from . import aio

from ._common import (
    Entry,
    EntryType,
    WalkOptions,
    WalkError,
    InvalidOptionsError,
    ErrorThresholdExceeded,
    BrokenSymlinkError,
    ErrorPolicy,
    DefaultPolicy,
    FailFastPolicy,
    CallbackPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .sync import walk, Walker
from .aio import walk_async, AsyncWalker

__all__ = [
    "__version__",
    "sync",
    "aio",
    "Entry",
    "EntryType",
    "WalkOptions",
    "WalkError",
    "InvalidOptionsError",
    "ErrorThresholdExceeded",
    "BrokenSymlinkError",
    "ErrorPolicy",
    "DefaultPolicy",
    "FailFastPolicy",
    "CallbackPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    "walk",
    "Walker",
    "walk_async",
    "AsyncWalker",
]
