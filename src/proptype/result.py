"""Result type: Success[V] | Failure[E] for validation without exceptions-as-control-flow.

Example:
    ```python
    from proptype.result import Failure, Success

    def positive(value: int) -> Result[int, str]:
        if value > 0:
            return Success(value)
        return Failure(f'must be positive, but was: {value}')

    positive(3).and_then(lambda v: Success(v * 2))   # Success(6)
    positive(-1).map_failure(str.upper)              # Failure('MUST BE POSITIVE, BUT WAS: -1')
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, NoReturn

import wrapt

from proptype.equality import Equality
from proptype.errors import UnwrapError, UnwrapFailureError
from proptype.freeze import deep_freeze

__all__ = ['Failure', 'Result', 'Success', 'collect', 'safe']


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Success[V](Equality):
    """Success variant of Result containing a value of type V.

    The value is deep-frozen on construction, so a Success can be handed to
    any number of independent callers.

    Examples:
        >>> Success(42).unwrap()
        42
        >>> Success(5).map(lambda x: x * 2)
        Success(10)
    """

    value: V
    __match_args__ = ('value',)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'value', deep_freeze(self.value))

    @property
    def frozen(self) -> bool:
        return True

    def object_state(self) -> Mapping[str, Any]:
        return {'value': self.value}

    def is_success(self) -> bool:
        """Return True, indicating this is a successful result."""
        return True

    def is_failure(self) -> bool:
        """Return False, indicating this is not a failed result."""
        return False

    def and_then[U, E](self, f: Callable[[V], Success[U] | Failure[E]]) -> Success[U] | Failure[E]:
        """Chain a computation that may fail.

        Args:
            f: A callable that takes the value and returns a Result.

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def or_else[E](self, f: Callable[[Any], Success[V] | Failure[E]]) -> Success[V]:  # noqa: ARG002
        """Return self unchanged since this is a Success."""
        return self

    def map[U](self, f: Callable[[V], U]) -> Success[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the value.

        Returns:
            Success containing the result of applying f to the value.
        """
        return Success(f(self.value))

    def map_failure(self, f: Callable[[Any], Any]) -> Success[V]:  # noqa: ARG002
        """Return self unchanged since this is a Success."""
        return self

    def unwrap(self) -> V:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: V) -> V:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_failure(self) -> NoReturn:
        """Raise since a Success holds no error.

        Raises:
            UnwrapFailureError: Always.
        """
        raise UnwrapFailureError

    def __repr__(self) -> str:
        return f'Success({self.value!r})'


@dataclass(slots=True, frozen=True, eq=False, repr=False)
class Failure[E](Equality):
    """Failure variant of Result containing an error of type E.

    The error is usually a human-readable message or an exception. Like
    Success, the payload is deep-frozen on construction.

    Examples:
        >>> failure = Failure('must be positive, but was: -1')
        >>> failure.is_failure()
        True
        >>> failure.unwrap_or(0)
        0
    """

    error: E
    __match_args__ = ('error',)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'error', deep_freeze(self.error))

    @property
    def frozen(self) -> bool:
        return True

    def object_state(self) -> Mapping[str, Any]:
        return {'error': self.error}

    def is_success(self) -> bool:
        """Return False, indicating this is not a successful result."""
        return False

    def is_failure(self) -> bool:
        """Return True, indicating this is a failed result."""
        return True

    def and_then(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged since this is a Failure."""
        return self

    def or_else[V, F](self, f: Callable[[E], Success[V] | Failure[F]]) -> Success[V] | Failure[F]:
        """Apply a recovery function to the error.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def map(self, f: Callable[[Any], Any]) -> Failure[E]:  # noqa: ARG002
        """Return self unchanged since this is a Failure."""
        return self

    def map_failure[F](self, f: Callable[[E], F]) -> Failure[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error.

        Returns:
            Failure containing the transformed error.
        """
        return Failure(f(self.error))

    def unwrap(self) -> NoReturn:
        """Raise the contained error.

        Exceptions are raised as they are; any other error is wrapped in
        UnwrapError with the error as its message.

        Raises:
            BaseException: The contained exception.
            UnwrapError: If the error is not an exception.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise UnwrapError(self.error)

    def unwrap_or[V](self, default: V) -> V:
        """Return the default value since this is a Failure."""
        return default

    def unwrap_failure(self) -> E:
        """Return the contained error."""
        return self.error

    def __repr__(self) -> str:
        return f'Failure({self.error!r})'


type Result[V, E = str] = Success[V] | Failure[E]


def collect[V, E](results: Iterable[Success[V] | Failure[E]]) -> Success[tuple[V, ...]] | Failure[E]:
    """Collect an iterable of Results into a Result of tuple.

    Short-circuits on the first Failure encountered.

    Examples:
        >>> collect([Success(1), Success(2)])
        Success((1, 2))
        >>> collect([Success(1), Failure('boom'), Success(3)])
        Failure('boom')
    """
    values: list[V] = []
    for result in results:
        if isinstance(result, Failure):
            return result
        values.append(result.value)
    return Success(tuple(values))


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that turns raised exceptions into Failure.

    Wraps a function so that it returns Success(value) on return and
    Failure(exception) if one of ``exceptions`` is raised. Anything else
    propagates.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns a Result instead of raising.
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,  # noqa: ARG001
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Success[Any] | Failure[BaseException]:
        try:
            return Success(wrapped(*args, **kwargs))
        except catch as e:
            return Failure(e)

    if func is not None:
        return wrapper(func)
    return wrapper
