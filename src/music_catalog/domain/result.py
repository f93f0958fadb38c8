"""Result pattern and domain errors for the catalog.

Store operations raise ``DomainError`` subclasses; the service layer turns
them into ``Result`` values so callers can branch without try/except.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Generic, TypeVar, cast

from ..exceptions import MusicCatalogError

T = TypeVar('T')  # Success type
E = TypeVar('E', bound=Exception)  # Error type


class Result(ABC, Generic[T, E]):
    """Either a successful value or an error."""

    @abstractmethod
    def is_success(self) -> bool:
        ...

    @abstractmethod
    def is_failure(self) -> bool:
        ...

    @abstractmethod
    def value(self) -> T:
        """Get the success value.

        Raises:
            ValueError: If the result is a failure.
        """
        ...

    @abstractmethod
    def error(self) -> E:
        """Get the error.

        Raises:
            ValueError: If the result is a success.
        """
        ...

    @abstractmethod
    def map(self, fn: Callable[[T], Any]) -> Result[Any, E]:
        ...

    @abstractmethod
    def flat_map(self, fn: Callable[[T], Result[Any, E]]) -> Result[Any, E]:
        ...

    def or_else(self, default: T) -> T:
        """Get the success value or return a default."""
        return self.value() if self.is_success() else default

    def or_else_raise(self) -> T:
        """Get the success value or raise the error."""
        if self.is_failure():
            raise self.error()
        return self.value()

    def match(self, *, success: Callable[[T], Any] | None = None,
              failure: Callable[[E], Any] | None = None) -> Any:
        """Dispatch to ``success`` or ``failure`` depending on the outcome."""
        if self.is_success() and success:
            return success(self.value())
        elif self.is_failure() and failure:
            return failure(self.error())
        return None


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def value(self) -> T:
        return self._value

    def error(self) -> E:
        raise ValueError("Cannot get error from Success result")

    def map(self, fn: Callable[[T], Any]) -> Result[Any, E]:
        return Success(fn(self._value))

    def flat_map(self, fn: Callable[[T], Result[Any, E]]) -> Result[Any, E]:
        return fn(self._value)


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def value(self) -> T:
        raise ValueError(f"Cannot get value from Failure result: {self._error}")

    def error(self) -> E:
        return self._error

    def map(self, fn: Callable[[T], Any]) -> Result[Any, E]:
        return self

    def flat_map(self, fn: Callable[[T], Result[Any, E]]) -> Result[Any, E]:
        return self


def success(value: T) -> Result[T, Any]:
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    return Failure(error)


def try_catch(fn: Callable[[], T], error_class: type[E] | tuple[type[E], ...] = Exception) -> Result[T, E]:
    """Run ``fn`` and capture exceptions of ``error_class`` as a Failure.

    Exceptions outside ``error_class`` propagate unchanged.
    """
    try:
        return Success(fn())
    except error_class as e:
        return Failure(cast(E, e))


def as_result(error_class: type[E] | tuple[type[E], ...] = Exception):
    """Decorator form of :func:`try_catch`.

    Example:
        @as_result(NotFoundError)
        def lookup(key: str) -> Song:
            ...
    """
    def decorator(fn: Callable[..., T]) -> Callable[..., Result[T, E]]:
        @wraps(fn)
        def wrapper(*args, **kwargs) -> Result[T, E]:
            return try_catch(lambda: fn(*args, **kwargs), error_class)
        return wrapper
    return decorator


def collect(results: list[Result[T, E]]) -> Result[list[T], list[E]]:
    """Success with every value, or Failure with every error."""
    values, errors = partition(results)
    return Success(values) if not errors else Failure(errors)


def partition(results: list[Result[T, E]]) -> tuple[list[T], list[E]]:
    """Split results into (success_values, failure_errors)."""
    successes = []
    failures = []

    for result in results:
        if result.is_success():
            successes.append(result.value())
        else:
            failures.append(result.error())

    return successes, failures


class DomainError(MusicCatalogError):
    """Base class for catalog rule violations."""
    kind = "domain_error"


class InvalidArgumentError(DomainError):
    """Raised for empty, non-positive or otherwise malformed input."""
    kind = "invalid_argument"


class DuplicateError(InvalidArgumentError):
    """Raised when a unique business key is already taken."""
    kind = "invalid_argument"


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""
    kind = "not_found"
