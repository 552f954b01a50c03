"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration classes (WalkOptions, DepthConfig, FilterConfig)
- The Entry value object
- Error kinds and error policies

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .entry import DirChild, Entry, EntryType
from .errors import (
    WalkError,
    InvalidOptionsError,
    ErrorThresholdExceeded,
    BrokenSymlinkError,
    is_not_found,
    is_unresolvable_link,
)
from .error_policies import (
    ErrorPolicy,
    DefaultPolicy,
    FailFastPolicy,
    CallbackPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    resolve_error_policy,
)
from .config import (
    PathPredicate,
    compile_predicate,
    DepthConfig,
    FilterConfig,
    WalkOptions,
    resolve_options,
)

__all__ = [
    'DirChild',
    'Entry',
    'EntryType',
    'WalkError',
    'InvalidOptionsError',
    'ErrorThresholdExceeded',
    'BrokenSymlinkError',
    'is_not_found',
    'is_unresolvable_link',
    'ErrorPolicy',
    'DefaultPolicy',
    'FailFastPolicy',
    'CallbackPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    'resolve_error_policy',
    'PathPredicate',
    'compile_predicate',
    'DepthConfig',
    'FilterConfig',
    'WalkOptions',
    'resolve_options',
]
