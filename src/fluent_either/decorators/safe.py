"""@safe decorator for turning raised exceptions into Left payloads."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ParamSpec, TypeVar, overload

import wrapt

from fluent_either.either import Either, Left, Right

__all__ = ['safe']

P = ParamSpec('P')
T = TypeVar('T')
E = TypeVar('E', bound=BaseException)


@overload
def safe(
    func: Callable[P, T],
) -> Callable[P, Either[T | Exception]]: ...


@overload
def safe(
    *,
    exceptions: tuple[type[E], ...],
) -> Callable[[Callable[P, T]], Callable[P, Either[T | E]]]: ...


@overload
def safe(
    func: None = None,
    *,
    exceptions: tuple[type[E], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Either[T | E]]]: ...


def safe(
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[Any], ...] | None = None,
) -> Any:
    """Decorator that returns Right(result), or Left(exception) when one is caught.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(exceptions=(ValueError, KeyError))
        def specific(): ...

    Exceptions outside `exceptions` propagate unchanged.

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to catch. Defaults to (Exception,).

    Returns:
        A wrapped function that returns an Either instead of raising.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Right(5.0)
        divide(10, 0)
        # Left(ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Either[Any]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return Left(e)
        return Right(result)

    if func is not None:
        return wrapper(func)
    return wrapper
