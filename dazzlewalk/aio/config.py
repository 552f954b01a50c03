"""Configuration re-export for the async implementation."""

from .._common.config import (
    PathPredicate,
    DepthConfig,
    FilterConfig,
    WalkOptions,
)

__all__ = [
    'PathPredicate',
    'DepthConfig',
    'FilterConfig',
    'WalkOptions',
]
