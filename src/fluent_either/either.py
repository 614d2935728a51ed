"""Fluent Either container for Python 3.13+.

An Either holds a single payload tagged as Left (the failed track) or Right
(the success track). Combinators transform Right payloads and let Left
payloads flow through untouched, so a chain of steps never needs to branch
on failure by hand.

Example:
    ```python
    from fluent_either import Either, Left, Right

    def parse_age(raw: str) -> Either[int]:
        return Right(int(raw)) if raw.isdigit() else Left(f'not a number: {raw}')

    parse_age('41').map(lambda age: age + 1)        # Right(42)
    parse_age('x').map(lambda age: age + 1)         # Left(not a number: x)

    add = Either.lift_n(lambda a: lambda b: a + b, Right(1), Right(2))
    print(add)  # Right(3)
    ```
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterator
from enum import StrEnum
from types import MethodType
from typing import Any, Generic, TypeVar

import msgspec

from fluent_either import _logging

__all__ = ['Either', 'Left', 'Right', 'Tag']

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
D = TypeVar('D')


class Tag(StrEnum):
    """Discriminant of an Either."""

    LEFT = 'left'
    """Failure track."""

    RIGHT = 'right'
    """Success track."""


class _CurriedMethod:
    """Method that doubles as a curried lifter when looked up on the class.

    ``instance.name(fn)`` behaves like the wrapped method, while
    ``Either.name(fn)`` returns a function that applies the method to
    whatever Either it is later given.
    """

    def __init__(self, method: Callable[..., Any]) -> None:
        self._method = method
        functools.update_wrapper(self, method)

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self._lift
        return MethodType(self._method, instance)

    def _lift(self, fn: Callable[[Any], Any]) -> Callable[[Either[Any]], Either[Any]]:
        method = self._method

        def lifted(either: Either[Any]) -> Either[Any]:
            return method(either, fn)

        return lifted


class Either(msgspec.Struct, Generic[A]):
    """A payload tagged as either Left (failure) or Right (success).

    Build instances with `Left`, `Right` or `Either.of`. Every combinator
    except `swap` leaves the receiver untouched.

    Attributes:
        value: The payload, never inspected by the container.
        tag: Which track the payload is on.
    """

    value: A
    tag: Tag

    def __post_init__(self) -> None:
        try:
            self.tag = Tag(self.tag)
        except ValueError:
            raise ValueError(f"Unknown Either tag {self.tag!r}, expected 'left' or 'right'") from None

    # -----------------------------------------------------------------
    # Inspection
    # -----------------------------------------------------------------

    def is_left(self) -> bool:
        """Return True if this is a Left."""
        return self.tag is Tag.LEFT

    def is_right(self) -> bool:
        """Return True if this is a Right."""
        return self.tag is Tag.RIGHT

    def get(self) -> A:
        """Return the payload regardless of the tag.

        Nothing is raised for a Left; check `is_right()` first when it matters.
        """
        return self.value

    def exists(self, predicate: Callable[[A], bool]) -> bool:
        """Test a Right payload against a predicate.

        Args:
            predicate: Called with the payload, only for a Right.

        Returns:
            bool: True if and only if this is a Right whose payload passes.
        """
        return self.is_right() and bool(predicate(self.value))

    # -----------------------------------------------------------------
    # Fallback & recovery
    # -----------------------------------------------------------------

    def get_or_else(self, fallback: B) -> A | B:
        """Return the payload of a Right, or `fallback` for a Left."""
        return self.value if self.is_right() else fallback

    def or_else(self, other: Either[B]) -> Either[A | B]:
        """Return self if Right, otherwise `other` as given.

        Chaining several calls yields the first Right in the chain:

            first_ok = load_cache().or_else(load_disk()).or_else(load_remote())
        """
        return self if self.is_right() else other

    def filter_or_else(self, predicate: Callable[[A], bool], other_left: Either[B]) -> Either[A | B]:
        """Keep a Right only if its payload passes `predicate`.

        Args:
            predicate: Called with the payload, only for a Right.
            other_left: Returned when a Right fails the predicate.

        Returns:
            Either: self for a Left or a passing Right, `other_left` otherwise.
        """
        if self.is_left() or predicate(self.value):
            return self
        return other_left

    # -----------------------------------------------------------------
    # Transformation
    # -----------------------------------------------------------------

    @_CurriedMethod
    def map(self, fn: Callable[[A], B]) -> Either[A | B]:
        """Transform a Right payload, rewrapping the result in Right.

        A Left is returned unchanged and `fn` is never called. Prefer this to
        `flat_map` when `fn` does not return an Either.

        Looked up on the class, `Either.map(fn)` returns a function over
        Eithers instead:

            to_email = Either.map(lambda name: name + '@example.com')
            to_email(Right('jsmith'))       # Right(jsmith@example.com)
            to_email(Left('no name'))       # Left(no name)
        """
        if self.is_left():
            return self
        return Right(fn(self.value))

    @staticmethod
    def lift(fn: Callable[[A], B]) -> Callable[[Either[A]], Either[A | B]]:
        """Lift `fn` to work on Eithers. Same as the class-level `Either.map`.

        Example:
            ```python
            add_five = Either.lift(lambda x: x + 5)
            add_five(Right(3))  # Right(8)
            ```
        """

        def lifted(either: Either[A]) -> Either[A | B]:
            return either.map(fn)

        return lifted

    @_CurriedMethod
    def flat_map(self, fn: Callable[[A], Either[B]]) -> Either[A | B]:
        """Chain a step that itself returns an Either.

        A Left is returned unchanged. For a Right, the Either produced by `fn`
        is returned as-is, never wrapped a second time. `Either.flat_map(fn)`
        on the class returns the curried form.
        """
        if self.is_left():
            return self
        return fn(self.value)

    def then(self, fn: Callable[[A], B | Either[B]]) -> Either[A | B]:
        """Chain a step whose result may or may not be an Either.

        Behaves like `flat_map` when `fn` returns an Either and like `map`
        otherwise. When unsure which of the three to use, `then` always works.
        """
        if self.is_left():
            return self
        result = fn(self.value)
        if isinstance(result, Either):
            return result
        return Right(result)

    def flatten(self) -> Either[Any]:
        """Collapse one level of nesting from a Right wrapping an Either."""
        if self.is_right() and isinstance(self.value, Either):
            return self.value
        return self

    def fold(self, on_left: Callable[[A], B], on_right: Callable[[A], B]) -> B:
        """Leave the Either track by applying the function matching the tag.

        Example:
            ```python
            Left(7).fold(lambda x: x * 2, lambda x: x * 3)   # 14
            Right(7).fold(lambda x: x * 2, lambda x: x * 3)  # 21
            ```
        """
        if self.is_left():
            return on_left(self.value)
        return on_right(self.value)

    # -----------------------------------------------------------------
    # Applicative
    # -----------------------------------------------------------------

    def ap(self, other: Either[B]) -> Either[Any]:
        """Apply the function held by this Right to the payload of `other`.

        - A Left receiver is returned unchanged.
        - A Right receiver whose payload is not callable is returned unchanged.
        - Otherwise `other` is returned if it is a Left, and
          `Right(fn(other.value))` if it is a Right.

        Example:
            ```python
            Right(lambda x: x * 2).ap(Right(42))     # Right(84)
            Left('bad luck').ap(Right(42))           # Left(bad luck)
            Right(lambda x: x * 2).ap(Left(42))      # Left(42)
            ```
        """
        if self.is_left() or not callable(self.value):
            return self
        return other.map(self.value)

    @staticmethod
    def lift_n(fn: Callable[[Any], Any], first: Either[Any], /, *rest: Either[Any]) -> Either[Any]:
        """Apply a curried function to the payloads of several Eithers.

        `fn` must be fully curried, taking one argument per Either. If any of
        the arguments is a Left, the first such Left is returned. Argument
        types are not checked against the parameters of `fn`.

        Example:
            ```python
            Either.lift_n(lambda a: lambda b: lambda c: a + b + c, Right(18), Right(4), Right(6))
            # Right(28)
            Either.lift_n(lambda a: lambda b: a + b['age'], Right(78), Right({'age': 22}))
            # Right(100)
            ```
        """
        initial = first.map(lambda _: fn)
        return functools.reduce(Either.ap, (first, *rest), initial)

    @staticmethod
    def lift2(fn: Callable[[A, B], C]) -> Callable[[Either[A], Either[B]], Either[Any]]:
        """Lift a two-argument function to work on two Eithers."""

        def lifted(a: Either[A], b: Either[B]) -> Either[Any]:
            return Either.lift_n(lambda x: lambda y: fn(x, y), a, b)

        return lifted

    @staticmethod
    def lift3(fn: Callable[[A, B, C], D]) -> Callable[[Either[A], Either[B], Either[C]], Either[Any]]:
        """Lift a three-argument function to work on three Eithers."""

        def lifted(a: Either[A], b: Either[B], c: Either[C]) -> Either[Any]:
            return Either.lift_n(lambda x: lambda y: lambda z: fn(x, y, z), a, b, c)

        return lifted

    # -----------------------------------------------------------------
    # Equality & conversion
    # -----------------------------------------------------------------

    def contains(self, value: Any, equality_fn: Callable[[Any, Any], bool] = operator.eq) -> bool:
        """Compare the payload with `value`, whatever the tag.

        Unlike `exists`, a Left payload is compared too: `Left(5).contains(5)`
        is True.

        Args:
            value: The value to compare against.
            equality_fn: Called as `equality_fn(payload, value)`. Defaults to `==`.
        """
        return bool(equality_fn(self.value, value))

    def swap(self) -> Either[A]:
        """Flip the tag of this instance in place and return it.

        This is the only mutating operation; every alias of the instance
        sees the new tag.
        """
        self.tag = Tag.RIGHT if self.tag is Tag.LEFT else Tag.LEFT
        return self

    def to_list(self) -> list[A]:
        """Return `[value]` for a Right and `[]` for a Left."""
        return [self.value] if self.is_right() else []

    def to_set(self) -> set[A]:
        """Return `{value}` for a Right and an empty set for a Left.

        The payload of a Right must be hashable: `Right([1]).to_set()` raises
        `TypeError`, while a Left never touches its payload.
        """
        return {self.value} if self.is_right() else set()

    def __iter__(self) -> Iterator[A]:
        if self.is_right():
            yield self.value

    def to_str(self) -> str:
        """Render as `Left(<value>)` or `Right(<value>)`."""
        return f'{"Left" if self.is_left() else "Right"}({self.value})'

    def __str__(self) -> str:
        return self.to_str()

    def __repr__(self) -> str:
        return f'{"Left" if self.is_left() else "Right"}({self.value!r})'

    # -----------------------------------------------------------------
    # Diagnostics
    # -----------------------------------------------------------------

    def log(self, render: Callable[[Either[A]], str] | None = None) -> None:
        """Write `to_str()` as a single diagnostic line.

        Args:
            render: Optional function given this Either; the string it returns
                is written in place of `to_str()`. It should not mutate the
                instance.

        Example:
            ```python
            Right(3).log()                                  # Right(3)
            Left(-1).log(lambda e: f'~~ {e.to_str()} ~~')   # ~~ Left(-1) ~~
            Right(3).log(lambda _: '-- I AM HERE --')       # -- I AM HERE --
            ```
        """
        line = self.to_str() if render is None else render(self)
        _logging.emit_diagnostic(line, tag=self.tag.value)

    def log_and_continue(self, render: Callable[[Either[A]], str] | None = None) -> Either[A]:
        """Write the diagnostic line and return self, for mid-chain inspection.

        `render` works as in `log`.

        Example:
            ```python
            Right(2).map(double).log_and_continue().map(square)
            # prints "Right(4)", evaluates to Right(16)
            ```
        """
        self.log(render)
        return self

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------

    @staticmethod
    def of(value: B, tag: Tag | str) -> Either[B]:
        """Build an Either whose tag is decided at runtime.

        Only an exact `'left'` (or `Tag.LEFT`) builds a Left; any other tag,
        including `'LEFT'` or `'oops'`, builds a Right. Nothing is raised.

        Args:
            value: The payload.
            tag: A `Tag` or its string value.
        """
        return Left(value) if tag == Tag.LEFT else Right(value)


def Left(value: A) -> Either[A]:  # noqa: N802
    """Build a Left, the failed track."""
    return Either(value, Tag.LEFT)


def Right(value: A) -> Either[A]:  # noqa: N802
    """Build a Right, the success track."""
    return Either(value, Tag.RIGHT)
