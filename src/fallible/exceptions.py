"""Exceptions raised by fallible.

Recoverable failures live inside an error ``Result``. Everything here signals either misuse of
the type or an explicit request to escalate an error into an exception.
"""

from __future__ import annotations


class FallibleException(Exception):
    """Base class for all exceptions raised by fallible."""


class ConstructionError(FallibleException):
    """Raised when a Result is instantiated outside of its factories."""


class InvalidAccessError(FallibleException):
    """Raised when the value of an error Result is read."""


class ConfigurationError(FallibleException):
    """Raised when configuration values are invalid."""


class ResultFault(FallibleException):
    """Raised by ``Result.throw`` when the held error is not itself an exception."""

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Error Result: {error!r}")
