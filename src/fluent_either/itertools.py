"""Helpers for working with many Eithers at once."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from fluent_either.either import Either, Right

__all__ = ['lefts', 'partition', 'rights', 'sequence', 'traverse']

T = TypeVar('T')
U = TypeVar('U')


def sequence(eithers: Iterable[Either[T]]) -> Either[Any]:
    """Collect the payloads of an iterable of Eithers into one Right.

    Stops at the first Left and returns it; later items are not consumed.

    Example:
        ```python
        sequence([Right(1), Right(2)])          # Right([1, 2])
        sequence([Right(1), Left('x'), Right(3)])  # Left(x)
        ```
    """
    values: list[T] = []
    for either in eithers:
        if either.is_left():
            return either
        values.append(either.get())
    return Right(values)


def traverse(items: Iterable[U], fn: Callable[[U], Either[T]]) -> Either[Any]:
    """Map `fn` over `items` and sequence the results.

    `fn` is not called on items after the first Left.
    """
    return sequence(fn(item) for item in items)


def partition(eithers: Iterable[Either[T]]) -> tuple[list[T], list[T]]:
    """Split payloads into `(left_payloads, right_payloads)`, preserving order."""
    left_values: list[T] = []
    right_values: list[T] = []
    for either in eithers:
        (left_values if either.is_left() else right_values).append(either.get())
    return left_values, right_values


def lefts(eithers: Iterable[Either[T]]) -> list[T]:
    """Payloads of the Left items, in order."""
    return [either.get() for either in eithers if either.is_left()]


def rights(eithers: Iterable[Either[T]]) -> list[T]:
    """Payloads of the Right items, in order."""
    return [either.get() for either in eithers if either.is_right()]
