"""
Error handling policies for orderedtreelib.

This module provides a flexible error handling system through the Policy
pattern, allowing callers to decide what happens when a key source contains
a token that cannot be parsed.

A policy's ``handle`` either raises, or returns a boolean telling the loader
whether to keep reading (True) or stop and keep what was read so far (False).
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys

from .exceptions import KeyParseError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    that occur while reading keys.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, source: Any) -> bool:
        """
        Handle an error that occurred while loading keys.

        Args:
            error: The exception that was raised
            operation: Name of the operation that failed (e.g., 'parse_key')
            source: Where the keys were being read from

        Returns:
            True to continue reading, False to stop reading.
            May instead re-raise the exception to abort the load.
        """
        pass

    @staticmethod
    def _record(error: Exception, operation: str, source: Any) -> Dict[str, Any]:
        record = {
            'source': source,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        if isinstance(error, KeyParseError):
            record['token'] = error.token
            record['position'] = error.position
        return record


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error, aborting the load.

    Useful when data integrity is critical and partial results are not acceptable.
    """

    def handle(self, error: Exception, operation: str, source: Any) -> bool:
        """Re-raise the error immediately."""
        raise error


class StopOnErrorPolicy(ErrorPolicy):
    """
    Policy that stops reading at the first invalid token.

    Keys read before the bad token are kept. This mirrors how a formatted
    stream read behaves: extraction fails and the loop simply ends. This is
    the loader's default.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, operation: str, source: Any) -> bool:
        self.errors.append(self._record(error, operation, source))
        return False


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that warns about errors and keeps reading.

    Errors are collected for later inspection and the offending token is
    skipped. This is useful when you want to load as much as possible
    despite some bad input.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_tokens: List[str] = []
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, source: Any) -> bool:
        """Record the error, skip the token and continue."""
        record = self._record(error, operation, source)
        self.errors.append(record)

        if 'token' in record:
            self.skipped_tokens.append(record['token'])

        if self.verbose:
            print(f"\nWARNING: Error in {operation} for '{source}': {error}", file=sys.stderr)

        return True

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'parse_errors': sum(1 for e in self.errors if e['error_type'] == 'KeyParseError'),
            'skipped_tokens': len(self.skipped_tokens),
            'errors': self.errors  # Full error details
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without output, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        """Initialize the policy."""
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails.

    Useful when some errors are expected but too many indicate
    the wrong file (or the wrong key type) was given.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def handle(self, error: Exception, operation: str, source: Any) -> bool:
        """Skip the token if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING: Error {self.error_count}/{self.max_errors} in {operation} "
                  f"for '{source}': {error}", file=sys.stderr)

        return True
