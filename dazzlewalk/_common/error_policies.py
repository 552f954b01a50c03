"""
Error handling policies for dazzlewalk.

This module provides a flexible error handling system through the Policy pattern,
allowing callers to define how errors should be handled during a walk. Every
failed listing, stat or symlink resolution is handed to exactly one policy;
the policy either returns (the walk skips that path and continues) or raises
(the walk ends and the error reaches the consumer).
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

import structlog

from .errors import ErrorThresholdExceeded, is_not_found

log = structlog.get_logger(__name__)


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    that occur during filesystem operations.
    """

    @abstractmethod
    def handle_sync(self, error: OSError, path: str) -> None:
        """
        Handle an error from the blocking walker.

        Args:
            error: The exception that was raised
            path: The path being listed, stat'ed or resolved

        Raises:
            The error (or another exception) to stop the walk.
        """
        pass

    async def handle(self, error: OSError, path: str) -> None:
        """
        Handle an error from the async walker.

        The default implementation delegates to handle_sync so both
        walkers apply the same rules.
        """
        self.handle_sync(error, path)


class DefaultPolicy(ErrorPolicy):
    """
    Policy used when no on_error is given.

    Missing paths are silently skipped; everything else stops the walk.
    """

    def handle_sync(self, error: OSError, path: str) -> None:
        if is_not_found(error):
            log.debug("error_suppressed", path=path, error=str(error))
            return
        raise error


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, stopping the walk.

    Unlike DefaultPolicy this also stops on missing paths. Useful when
    a partial listing is not acceptable.
    """

    def handle_sync(self, error: OSError, path: str) -> None:
        """Re-raise the error immediately."""
        raise error


class CallbackPolicy(ErrorPolicy):
    """
    Policy wrapping a plain ``on_error(error, path)`` callable.

    Every error is routed to the callback and the walk continues, unless
    the callback itself raises. The async walker awaits the callback's
    result when it is awaitable.
    """

    def __init__(self, callback: Callable[[OSError, str], Any]):
        self.callback = callback

    def handle_sync(self, error: OSError, path: str) -> None:
        result = self.callback(error, path)
        if inspect.isawaitable(result):
            if asyncio.iscoroutine(result):
                result.close()  # Never awaited; avoid the RuntimeWarning
            raise TypeError(
                "on_error returned an awaitable; async callbacks need walk_async()"
            )

    async def handle(self, error: OSError, path: str) -> None:
        result = self.callback(error, path)
        if inspect.isawaitable(result):
            await result

    def __repr__(self) -> str:
        return f"CallbackPolicy({self.callback!r})"


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that logs errors and continues the walk.

    Errors are collected for later inspection. This is useful when you
    want to process as much as possible despite some failures.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, log a warning when an error occurs
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle_sync(self, error: OSError, path: str) -> None:
        self.errors.append(_error_record(error, path))
        self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                log.warning("path_inaccessible", path=path, error=str(error))
            else:
                log.warning("walk_error_recorded", path=path,
                            error_type=type(error).__name__, error=str(error))

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_found_errors': sum(1 for e in self.errors if is_not_found(e['error'])),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without logging, for batch processing.

    Similar to ContinueOnErrorsPolicy but without any output.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle_sync(self, error: OSError, path: str) -> None:
        """Silently collect the error."""
        self.errors.append(_error_record(error, path))

    @property
    def paths(self) -> List[str]:
        return [e['path'] for e in self.errors]


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt the walk.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, log a warning for each tolerated error
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[OSError] = []

    def handle_sync(self, error: OSError, path: str) -> None:
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise ErrorThresholdExceeded(
                f"Error threshold exceeded ({self.max_errors} errors)"
            ) from error

        if self.verbose:
            log.warning("walk_error_tolerated", path=path, error=str(error),
                        count=self.error_count, max_errors=self.max_errors)


def _error_record(error: OSError, path: str) -> Dict[str, Any]:
    return {
        'path': path,
        'error': error,
        'error_type': type(error).__name__,
        'error_message': str(error),
    }


def resolve_error_policy(on_error: Optional[Any]) -> ErrorPolicy:
    """
    Pick the policy for a walk from its on_error option.

    Args:
        on_error: None, an ErrorPolicy instance, or an ``(error, path)`` callable

    Returns:
        The ErrorPolicy both walkers will report to
    """
    if on_error is None:
        return DefaultPolicy()
    if isinstance(on_error, ErrorPolicy):
        return on_error
    return CallbackPolicy(on_error)
