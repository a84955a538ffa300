"""Result type for flat error handling (like Rust's Result<T, E>).

A ``Result`` is either ``Success(value)`` or ``Failure(error)``. Failures are
plain values: they pass through ``map``/``flat_map`` untouched, and only
``attempt``/``attempt_sync`` turn a raised exception into one.

    parse = attempt_sync(int)
    match parse("42"):
        case Success(n):
            ...
        case Failure(e):
            ...
"""

from collections.abc import Awaitable, Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, Generic, ParamSpec, TypeAlias, TypeVar

import structlog
from typing_extensions import TypeIs

from fallible.config import settings
from fallible.logging_config import get_logger

T = TypeVar("T")
E = TypeVar("E")
F = TypeVar("F")
U = TypeVar("U")
R1 = TypeVar("R1")
R2 = TypeVar("R2")
P = ParamSpec("P")

__all__ = [
    "AsyncResult",
    "Failure",
    "Result",
    "Success",
    "UnwrapError",
    "attempt",
    "attempt_sync",
    "flat_map",
    "flat_match",
    "is_failure",
    "is_success",
    "map",
    "match",
    "unwrap",
    "unwrap_failure",
    "unwrap_or",
]


@dataclass(frozen=True)
class Success(Generic[T]):
    """Success result."""

    value: T


@dataclass(frozen=True)
class Failure(Generic[E]):
    """Failure result.

    ``None`` is reserved to mean "no payload": ``Failure()`` and ``Failure(None)``
    are the same value. Falsy payloads such as ``0`` or ``""`` are kept as-is.
    """

    error: E | None = None


Result: TypeAlias = Success[T] | Failure[E]
AsyncResult: TypeAlias = Awaitable[Result[T, E]]


class UnwrapError(RuntimeError):
    """Raised when unwrapping the wrong variant of a Result."""

    def __init__(self, result: Result[Any, Any], message: str):
        super().__init__(message)
        self.result = result


def is_success(result: Result[T, E]) -> TypeIs[Success[T]]:
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeIs[Failure[E]]:
    return isinstance(result, Failure)


def map(result: Result[T, E], fn: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Apply ``fn`` to a Success value; return a Failure unchanged."""
    if isinstance(result, Success):
        return Success(fn(result.value))
    return result


def flat_map(
    result: Result[T, E], fn: Callable[[T], Result[U, F]]
) -> Result[U, E | F]:
    """Chain a Result-returning ``fn`` onto a Success; return a Failure unchanged."""
    if isinstance(result, Success):
        return fn(result.value)
    return result


def match(
    result: Result[T, E],
    *,
    if_success: Callable[[T], R1],
    if_failure: Callable[[E | None], R2],
) -> R1 | R2:
    """Call exactly one handler and return what it returns."""
    if isinstance(result, Success):
        return if_success(result.value)
    return if_failure(result.error)


def _identity(value: Any) -> Any:
    return value


def flat_match(
    result: Result[T, E],
    *,
    if_success: Callable[[T], R1] = _identity,
    if_failure: Callable[[E | None], R2] = _identity,
) -> Result[R1, R2]:
    """Like ``match``, but wrap the handler's return value in the same variant.

    A missing handler passes its payload through, so
    ``flat_match(r, if_failure=str)`` only rewrites failures.
    """
    if isinstance(result, Success):
        return Success(if_success(result.value))
    return Failure(if_failure(result.error))


def _log_failure(fn: Callable[..., Any], exc: Exception) -> None:
    # Stay silent until the application has configured structlog.
    if not settings.log_attempt_failures or not structlog.is_configured():
        return
    get_logger(__name__).debug(
        "attempt_failed",
        fn=getattr(fn, "__qualname__", repr(fn)),
        error_type=type(exc).__name__,
    )


def attempt(
    fn: Callable[P, Awaitable[T]],
) -> Callable[P, Coroutine[Any, Any, Result[T, Exception]]]:
    """Wrap an async callable so it returns a Result instead of raising.

    Only ``Exception`` subclasses are captured; cancellation and other
    ``BaseException`` signals still propagate to the caller.
    """

    @wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Success(await fn(*args, **kwargs))
        except Exception as e:
            _log_failure(fn, e)
            return Failure(e)

    return wrapper


def attempt_sync(fn: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Wrap a plain callable so it returns a Result instead of raising."""

    @wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        try:
            return Success(fn(*args, **kwargs))
        except Exception as e:
            _log_failure(fn, e)
            return Failure(e)

    return wrapper


def unwrap(result: Result[T, E]) -> T:
    """Extract the value from a Success. Raises UnwrapError on a Failure."""
    if isinstance(result, Success):
        return result.value
    raise UnwrapError(result, f"Called unwrap on failure: {result.error!r}")


def unwrap_or(result: Result[T, E], default: T) -> T:
    """Extract the value from a Success, or return ``default``."""
    return result.value if isinstance(result, Success) else default


def unwrap_failure(result: Result[T, E]) -> E | None:
    """Extract the payload from a Failure. Raises UnwrapError on a Success."""
    if isinstance(result, Failure):
        return result.error
    raise UnwrapError(result, "Called unwrap_failure on success")
