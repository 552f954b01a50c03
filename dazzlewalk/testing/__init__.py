"""Testing utilities for dazzlewalk and projects that use it."""

from .fixtures import (
    touch,
    build_tree,
    make_symlink,
    symlinks_supported,
    FaultInjectingAdapter,
)

__all__ = [
    'touch',
    'build_tree',
    'make_symlink',
    'symlinks_supported',
    'FaultInjectingAdapter',
]
