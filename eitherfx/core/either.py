"""
Either monad for handling success/error cases in functional programming.

This module provides a closed Either type for representing computations that
may fail, with Left representing failure and Right representing success, and
the combinators derived from those two constructors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar, cast

from .errors import UnwrapError

if TYPE_CHECKING:
    from eitherfx.scopes.comprehension import ComprehensionScope
    from eitherfx.scopes.dispatch import AtScope, RecoverScope

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")
U = TypeVar("U")


class Either(Generic[L, R], ABC):
    """Abstract base class for Either monad.

    The type is closed: ``Left`` and ``Right`` are the only variants.
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"Either is closed, cannot subclass it as {cls.__name__}")

    @abstractmethod
    def is_left(self) -> bool:
        """Check if this is a Left (error) value."""

    @abstractmethod
    def is_right(self) -> bool:
        """Check if this is a Right (success) value."""

    @abstractmethod
    def map(self, func: Callable[[R], T]) -> Either[L, T]:
        """Map function over Right value, preserving Left."""

    @abstractmethod
    def flat_map(self, func: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Flat map function over Right value."""

    @abstractmethod
    def map_left(self, func: Callable[[L], T]) -> Either[T, R]:
        """Map function over Left value, preserving Right."""

    @abstractmethod
    def flat_map_left(self, func: Callable[[L], Either[T, R]]) -> Either[T, R]:
        """Flat map function over Left value."""

    @abstractmethod
    def swap(self) -> Either[R, L]:
        """Exchange the variant tag, keeping the payload."""

    @abstractmethod
    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        """Fold Either by applying appropriate function."""

    @property
    def left(self) -> L | None:
        """Left payload, or None for a Right."""
        return self.fold(lambda value: value, lambda _: None)

    @property
    def right(self) -> R | None:
        """Right payload, or None for a Left."""
        return self.fold(lambda _: None, lambda value: value)

    def merge(self: Either[T, T]) -> T:
        """Return the payload whichever side holds it."""
        return self.fold(lambda value: value, lambda value: value)

    def on_left(self, action: Callable[[L], Any]) -> Either[L, R]:
        """Run action on the Left payload, then return self."""
        if isinstance(self, Left):
            action(self.value)
        return self

    def on_right(self, action: Callable[[R], Any]) -> Either[L, R]:
        """Run action on the Right payload, then return self."""
        if isinstance(self, Right):
            action(self.value)
        return self

    def get_or_else(self, default: R) -> R:
        """Get Right value or return default."""
        if isinstance(self, Right):
            return self.value
        return default

    def or_else(self, other: Either[L, R]) -> Either[L, R]:
        """Return this if Right, otherwise return other."""
        return self if self.is_right() else other

    def zip(self, other: Either[L, T]) -> Either[L, tuple[R, T]]:
        """Pair two successes; the first Left wins."""
        return self.flat_map(lambda r: other.map(lambda t: (r, t)))

    def tailrec(self, step: Callable[[L], Either[L, R]]) -> R:
        """Step on the Left payload until a Right appears."""
        if isinstance(self, Right):
            return self.value
        return tailrec(cast("Left[L, R]", self).value, step)

    def unwrap(self) -> R:
        """Extract the Right value.

        A Left holding an exception re-raises it; any other Left raises
        UnwrapError.
        """
        if isinstance(self, Right):
            return self.value
        value = cast("Left[L, R]", self).value
        if isinstance(value, BaseException):
            raise value
        raise UnwrapError(value)

    def to_list(self) -> list[R]:
        return list(self)

    def to_set(self) -> set[R]:
        return set(self)

    def __iter__(self) -> Iterator[R]:
        if isinstance(self, Right):
            yield self.value

    def fx(
        self, block: Callable[[ComprehensionScope[L, T], R], T]
    ) -> Either[L, T]:
        """Flat map into a comprehension that receives the Right payload."""
        from eitherfx.scopes.comprehension import fx

        return self.flat_map(lambda value: fx(lambda scope: block(scope, value)))

    def poly_map(self, block: Callable[[AtScope[T]], Any]) -> Either[L, T]:
        """Dispatch the Right payload on its runtime type."""
        from eitherfx.scopes.dispatch import poly_map

        return poly_map(self, block)

    def recover_with(
        self: Either[BaseException, R], block: Callable[[RecoverScope[R]], Any]
    ) -> Either[BaseException, R]:
        """Recover a Left exception on its runtime kind."""
        from eitherfx.scopes.dispatch import recover_with

        return recover_with(self, block)


@dataclass(frozen=True, repr=False)
class Left(Either[L, R]):
    """Left side of Either representing an error/failure."""

    value: L

    def is_left(self) -> bool:
        return True

    def is_right(self) -> bool:
        return False

    def map(self, func: Callable[[R], T]) -> Either[L, T]:
        return cast("Either[L, T]", self)

    def flat_map(self, func: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return cast("Either[L, T]", self)

    def map_left(self, func: Callable[[L], T]) -> Either[T, R]:
        return Left(func(self.value))

    def flat_map_left(self, func: Callable[[L], Either[T, R]]) -> Either[T, R]:
        return func(self.value)

    def swap(self) -> Either[R, L]:
        return Right(self.value)

    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        return left_func(self.value)

    def __str__(self) -> str:
        return f"Left({self.value})"

    def __repr__(self) -> str:
        return f"Left({self.value!r})"


@dataclass(frozen=True, repr=False)
class Right(Either[L, R]):
    """Right side of Either representing success."""

    value: R

    def is_left(self) -> bool:
        return False

    def is_right(self) -> bool:
        return True

    def map(self, func: Callable[[R], T]) -> Either[L, T]:
        return Right(func(self.value))

    def flat_map(self, func: Callable[[R], Either[L, T]]) -> Either[L, T]:
        return func(self.value)

    def map_left(self, func: Callable[[L], T]) -> Either[T, R]:
        return cast("Either[T, R]", self)

    def flat_map_left(self, func: Callable[[L], Either[T, R]]) -> Either[T, R]:
        return cast("Either[T, R]", self)

    def swap(self) -> Either[R, L]:
        return Left(self.value)

    def fold(self, left_func: Callable[[L], T], right_func: Callable[[R], T]) -> T:
        return right_func(self.value)

    def __str__(self) -> str:
        return f"Right({self.value})"

    def __repr__(self) -> str:
        return f"Right({self.value!r})"


# Shared failure returned for every absent optional
EMPTY_LEFT: Left[None, Any] = Left(None)


# Utility functions for creating Either instances
def left_of(value: L) -> Either[L, Any]:
    """Create a Left Either."""
    return Left(value)


def right_of(value: R) -> Either[Any, R]:
    """Create a Right Either."""
    return Right(value)


def option(value: R | None) -> Either[None, R]:
    """Right for a present value, the shared EMPTY_LEFT for None."""
    if value is None:
        return EMPTY_LEFT
    return Right(value)


def catch(attempt: Callable[[], R]) -> Either[Exception, R]:
    """Run attempt, turning any raised exception into a Left.

    Only ``Exception`` subclasses are captured; interpreter control signals
    such as KeyboardInterrupt and SystemExit keep propagating.
    """
    try:
        return Right(attempt())
    except Exception as e:
        return Left(e)


from_optional = option
from_fallible = catch


def cond(
    on_false: Callable[[], L], on_true: Callable[[], R]
) -> Callable[[bool], Either[L, R]]:
    """Build a constructor that picks a side from a boolean."""

    def choose(condition: bool) -> Either[L, R]:
        if condition:
            return Right(on_true())
        return Left(on_false())

    return choose


def tailrec(initial: L, step: Callable[[L], Either[L, R]]) -> R:
    """Apply step to successive Left payloads until it returns a Right.

    Runs as a plain loop so arbitrarily long retry chains use constant stack.
    """
    current = step(initial)
    while isinstance(current, Left):
        current = step(current.value)
    return cast("Right[L, R]", current).value


def lift(func: Callable[[R], T]) -> Callable[[Either[L, R]], Either[L, T]]:
    """Lift a plain function to operate on Either values."""
    return lambda either: either.map(func)


def sequence_either(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Transform a list of Eithers into an Either of list.

    Returns the first Left found, or Right with all values in order.
    """
    results = []
    for either in eithers:
        if isinstance(either, Left):
            return cast("Either[L, list[R]]", either)
        results.append(cast("Right[L, R]", either).value)
    return Right(results)


def traverse_either(
    items: Iterable[T], func: Callable[[T], Either[L, R]]
) -> Either[L, list[R]]:
    """Apply function to each item and sequence results."""
    return sequence_either([func(item) for item in items])


def unzip_either(eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Partition Eithers into their Left and Right payloads, keeping order."""
    lefts: list[L] = []
    rights: list[R] = []
    for either in eithers:
        if isinstance(either, Left):
            lefts.append(either.value)
        else:
            rights.append(cast("Right[L, R]", either).value)
    return lefts, rights


__all__ = [
    "EMPTY_LEFT",
    "Either",
    "Left",
    "Right",
    "catch",
    "cond",
    "from_fallible",
    "from_optional",
    "left_of",
    "lift",
    "option",
    "right_of",
    "sequence_either",
    "tailrec",
    "traverse_either",
    "unzip_either",
]
