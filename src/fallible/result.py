"""Result type for explicit, composable error handling.

A ``Result[T, E]`` holds either a value of type ``T`` (a "Just" result) or an error of type ``E``.
Results are only created through the factories below and are never mutated; every transforming
operation returns a new Result.

Operations with the ``allow_null`` suffix accept ``None`` as a legitimate value. Their
counterparts treat ``None`` as "no value" and turn it into an error Result.

Usage:
    def lookup(settings: dict[str, str], key: str) -> Result[str, str]:
        return Result.null_to_result(settings.get(key), f"missing setting {key}")

    port = (
        lookup(settings, "port")
        .filter(str.isdigit, "port must be numeric")
        .map(int, "invalid port")
        .default_to(8080)
    )
"""

from __future__ import annotations

import logging
import types
from dataclasses import InitVar, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeGuard, Union, cast, final, get_origin, overload

from fallible.exceptions import ConstructionError, InvalidAccessError, ResultFault

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)

# Passed by the factories to Result.__init__; nothing outside this module holds it.
_CONSTRUCTION_TOKEN: Final = object()


class ResultType(Enum):
    JUST = "Just"
    ERROR = "Error"


class _ErrorAttribute:
    """``Result.error(err)`` creates an error Result; ``result.error`` reads the held error."""

    @overload
    def __get__(self, instance: None, owner: type[Any]) -> Callable[[Any], Result[Any, Any]]: ...

    @overload
    def __get__(self, instance: Result[Any, Any], owner: type[Any]) -> Any: ...

    def __get__(self, instance: Result[Any, Any] | None, owner: type[Any]) -> Any:
        if instance is None:
            return _error_result
        return instance._error


def _error_result(error: Any) -> Result[Any, Any]:
    return Result(ResultType.ERROR, None, error, _CONSTRUCTION_TOKEN)


def _type_predicate(target: Any) -> Callable[[Any], object]:
    origin = get_origin(target)
    if origin is not None and origin not in (Union, types.UnionType):
        raise TypeError(
            f"Cannot check values against parameterized type {target!r}; pass {origin!r} or a TypeGuard"
        )
    if isinstance(target, type | tuple | types.UnionType) or origin is Union:
        return lambda value: isinstance(value, target)
    return cast("Callable[[Any], object]", target)


@final
@dataclass(frozen=True, slots=True, repr=False)
class Result[T, E]:
    """An immutable value-or-error container.

    Use the factories ``just_allow_null``, ``error``, ``null_to_result`` and ``if_``;
    calling the constructor directly raises ``ConstructionError``.
    """

    _type: ResultType
    _value: T | None
    _error: E | None
    guard: InitVar[object]

    error = _ErrorAttribute()

    def __post_init__(self, guard: object) -> None:
        if guard is not _CONSTRUCTION_TOKEN:
            raise ConstructionError(
                "Direct construction of Result is not possible. "
                "Use Result.just_allow_null, Result.error or Result.null_to_result instead."
            )

    def __repr__(self) -> str:
        if self.has_error:
            return f"Result.error({self._error!r})"
        return f"Result.just_allow_null({self._value!r})"

    # Factories

    @staticmethod
    def just_allow_null[V](value: V) -> Result[V, Any]:
        """Creates a Result holding ``value``, which may be None."""
        return Result(ResultType.JUST, value, None, _CONSTRUCTION_TOKEN)

    @staticmethod
    def null_to_result[V, F](value: V | None, error: F) -> Result[V, F]:
        """Creates a Result holding ``value``, or an error Result if ``value`` is None."""
        if value is None:
            return Result.error(error)
        return Result(ResultType.JUST, value, None, _CONSTRUCTION_TOKEN)

    @staticmethod
    def if_[V, F](test: bool, value: V | None, error: F) -> Result[V, F]:
        """Creates a Result holding ``value`` when ``test`` is true.

        A false test gives an error Result, and so does a true test with a None value.
        """
        if not test:
            return Result.error(error)
        return Result.null_to_result(value, error)

    # Inspection

    @property
    def result_type(self) -> ResultType:
        """The discriminant: JUST or ERROR."""
        return self._type

    @property
    def has_value(self) -> bool:
        """True if this is a Just Result."""
        return self._type is ResultType.JUST

    @property
    def has_error(self) -> bool:
        """True if this is an error Result."""
        return self._type is ResultType.ERROR

    @property
    def value(self) -> T:
        """Returns the held value.

        Raises InvalidAccessError on an error Result. Prefer ``default_to``, ``map`` or ``and_``,
        which never raise.
        """
        if self.has_error:
            logger.debug("Rejected value access on %r", self)
            raise InvalidAccessError("Unable to access value of an error Result. Use default_to instead.")
        return cast("T", self._value)

    # Transformation

    def map[U](self, selector: Callable[[T], U | None], error: E) -> Result[U, E]:
        """Maps the value with ``selector``; a None return gives an error Result holding ``error``."""
        if self.has_error:
            return Result.error(self._error)
        return Result.null_to_result(selector(cast("T", self._value)), error)

    def map_allow_null[U](self, selector: Callable[[T], U]) -> Result[U, E]:
        """Maps the value with ``selector``; a None return is kept as the value."""
        if self.has_error:
            return Result.error(self._error)
        return Result.just_allow_null(selector(cast("T", self._value)))

    def map_error[F](self, selector: Callable[[E | None], F]) -> Result[T, F]:
        """Maps the held error with ``selector``. Just Results are returned unchanged."""
        if self.has_error:
            return Result.error(selector(self._error))
        return cast("Result[T, F]", self)

    def do(self, action: Callable[[T], object]) -> Result[T, E]:
        """Calls ``action`` with the value of a Just Result. Returns self."""
        if self.has_value:
            action(cast("T", self._value))
        return self

    def else_do(self, action: Callable[[E | None], object]) -> Result[T, E]:
        """Calls ``action`` with the error of an error Result. Returns self."""
        if self.has_error:
            action(self._error)
        return self

    def or_else(self, value: T | None, error: E) -> Result[T, E]:
        """Replaces an error Result with ``null_to_result(value, error)``."""
        if self.has_error:
            return Result.null_to_result(value, error)
        return self

    def or_else_allow_null(self, value: T) -> Result[T, E]:
        """Replaces an error Result with ``just_allow_null(value)``."""
        if self.has_error:
            return Result.just_allow_null(value)
        return self

    def and_[U](self, selector: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chains a Result-returning ``selector``; an error Result short-circuits."""
        if self.has_error:
            return Result.error(self._error)
        return selector(cast("T", self._value))

    def or_(self, other: Result[T, E]) -> Result[T, E]:
        """Returns ``other`` if this is an error Result, otherwise self."""
        if self.has_error:
            return other
        return self

    def default_to[D](self, default: D) -> T | D:
        """Returns the held value, or ``default`` for an error Result."""
        if self.has_error:
            return default
        return cast("T", self._value)

    def filter(self, predicate: Callable[[T], object], error: E) -> Result[T, E]:
        """Turns a Just Result into an error Result holding ``error`` when ``predicate`` is false."""
        return self.and_(lambda value: Result.just_allow_null(value) if predicate(value) else Result.error(error))

    @overload
    def filter_type[U](self, target: type[U] | tuple[type[U], ...], error: E) -> Result[U, E]: ...

    @overload
    def filter_type[U](self, target: Callable[[Any], TypeGuard[U]], error: E) -> Result[U, E]: ...

    @overload
    def filter_type(self, target: types.UnionType, error: E) -> Result[Any, E]: ...

    def filter_type(self, target: Any, error: E) -> Result[Any, E]:
        """Narrows the value's type, or gives an error Result holding ``error`` on mismatch.

        ``target`` is a class, tuple of classes or union (``int | str``) checked with ``isinstance``,
        or a ``TypeGuard`` predicate. Parameterized generics such as ``list[int]`` raise TypeError::

            Result.just_allow_null(str_or_int).filter_type(str, "not a string")
        """
        matches = _type_predicate(target)
        return self.and_(lambda value: Result.just_allow_null(value) if matches(value) else Result.error(error))

    @overload
    def combine[A](self, first: Result[A, E], /) -> Result[tuple[T, A], tuple[E | None, ...]]: ...

    @overload
    def combine[A, B](
        self, first: Result[A, E], second: Result[B, E], /
    ) -> Result[tuple[T, A, B], tuple[E | None, ...]]: ...

    @overload
    def combine[A, B, C](
        self, first: Result[A, E], second: Result[B, E], third: Result[C, E], /
    ) -> Result[tuple[T, A, B, C], tuple[E | None, ...]]: ...

    @overload
    def combine[A, B, C, D](
        self, first: Result[A, E], second: Result[B, E], third: Result[C, E], fourth: Result[D, E], /
    ) -> Result[tuple[T, A, B, C, D], tuple[E | None, ...]]: ...

    @overload
    def combine[A, B, C, D, F](
        self,
        first: Result[A, E],
        second: Result[B, E],
        third: Result[C, E],
        fourth: Result[D, E],
        fifth: Result[F, E],
        /,
    ) -> Result[tuple[T, A, B, C, D, F], tuple[E | None, ...]]: ...

    def combine(self, *others: Result[Any, E]) -> Result[tuple[Any, ...], tuple[E | None, ...]]:
        """Combines this Result with ``others`` into a Result holding a tuple of every value.

        If any of them is an error Result, the combined Result holds a tuple of every error,
        self first, with None in the position of each Just Result.
        """
        return combine_all((self, *others))

    # Escalation

    def throw(self) -> None:
        """Raises the held error if this is an error Result.

        Exceptions and exception classes are raised as they are; any other error is wrapped in
        ResultFault.
        """
        if self.has_error:
            logger.debug("Raising held error of %r", self)
            if isinstance(self._error, BaseException) or (
                isinstance(self._error, type) and issubclass(self._error, BaseException)
            ):
                raise self._error
            raise ResultFault(self._error)

    def value_or_throw(self) -> T:
        """Returns the held value, or raises the held error via ``throw``."""
        self.throw()
        return cast("T", self._value)


def combine_all[E](results: Iterable[Result[Any, E]]) -> Result[tuple[Any, ...], tuple[E | None, ...]]:
    """Combines Results in order into one Result.

    All Just: a Just Result holding the tuple of values. Otherwise an error Result holding the
    tuple of every ``error`` field, None for each Just Result.
    """
    operands = tuple(results)
    if any(result.has_error for result in operands):
        return Result.error(tuple(result.error for result in operands))
    return Result.just_allow_null(tuple(result.value for result in operands))
