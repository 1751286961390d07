"""Explicit value-or-error results."""

from fallible.exceptions import (
    ConfigurationError,
    ConstructionError,
    FallibleException,
    InvalidAccessError,
    ResultFault,
)
from fallible.result import Result, ResultType, combine_all

__all__ = [
    "ConfigurationError",
    "ConstructionError",
    "FallibleException",
    "InvalidAccessError",
    "Result",
    "ResultFault",
    "ResultType",
    "combine_all",
]
