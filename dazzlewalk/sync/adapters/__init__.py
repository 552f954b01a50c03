"""Adapters giving the blocking walker access to concrete trees."""

from .filesystem import FileSystemAdapter

__all__ = ['FileSystemAdapter']
