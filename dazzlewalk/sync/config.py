"""Configuration re-export for the blocking implementation."""

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
