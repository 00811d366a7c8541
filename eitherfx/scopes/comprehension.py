"""
Either comprehensions: fallible steps written as straight-line code.

    def load(scope):
        user = scope.bind(find_user(user_id))
        scope.ensure(user.active, lambda: "inactive")
        return scope.bind(find_account(user))

    result = fx(load)

The first Left bound (or declared with ``fail``) becomes the result and the
rest of the block never runs.
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Iterable
from typing import Any, Generic, NoReturn, TypeVar

from eitherfx.config import EitherSettings
from eitherfx.core.either import Either, Left, Right

from .base import Scope, WriteOnceSlot

L = TypeVar("L")
R = TypeVar("R")
T = TypeVar("T")


class ComprehensionScope(Scope, Generic[L, R]):
    """Scope handed to a comprehension block."""

    name = "comprehension"

    def __init__(self, settings: EitherSettings | None = None) -> None:
        super().__init__(settings)
        self._result: WriteOnceSlot[Either[L, R]] = WriteOnceSlot(self.name)

    def bind(self, either: Either[L, T]) -> T:
        """Unwrap a Right, or abort the block with a Left."""
        self._check_active("bind")
        if isinstance(either, Right):
            return either.value
        self.fail(either.value)  # type: ignore[union-attr]

    def __call__(self, either: Either[L, T]) -> T:
        return self.bind(either)

    def bind_all(self, eithers: Iterable[Either[L, T]]) -> list[T]:
        """Bind each element in order; the first Left aborts."""
        return [self.bind(either) for either in eithers]

    def fail(self, value: L) -> NoReturn:
        """End the block with Left(value)."""
        self._check_active("fail")
        self._result.write(Left(value))
        self._abort()

    def succeed(self, value: R) -> NoReturn:
        """End the block early with Right(value)."""
        self._check_active("succeed")
        self._result.write(Right(value))
        self._abort()

    def ensure(self, condition: bool, failure: Callable[[], L]) -> None:
        """Abort with Left(failure()) unless condition holds."""
        self._check_active("ensure")
        if not condition:
            self.fail(failure())

    def ensure_not(self, condition: bool, failure: Callable[[], L]) -> None:
        """Abort with Left(failure()) if condition holds."""
        self._check_active("ensure_not")
        if condition:
            self.fail(failure())

    def run(self, block: Callable[[ComprehensionScope[L, R]], R]) -> Either[L, R]:
        aborted, value = self._evaluate(block)
        if not aborted:
            # A block that swallowed its own abort lands here with a full slot
            self._result.write(Right(value))
        return self._result.read()


def fx(
    block: Callable[[ComprehensionScope[L, R]], R],
    settings: EitherSettings | None = None,
) -> Either[L, R]:
    """Run block in a fresh comprehension scope."""
    return ComprehensionScope(settings).run(block)


def comprehension(
    func: Callable[..., R],
) -> Callable[..., Either[Any, R]]:
    """Decorator: call func inside a fresh scope and return an Either.

    The scope is passed as the first argument, or right after ``self``/``cls``
    when func's first parameter carries one of those names, so methods read
    ``def load(self, scope, user_id)``. Callers never pass the scope.
    """
    params = list(inspect.signature(func).parameters)
    bound = bool(params) and params[0] in ("self", "cls")

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Either[Any, R]:
        if bound:
            owner, *rest = args
            return fx(lambda scope: func(owner, scope, *rest, **kwargs))
        return fx(lambda scope: func(scope, *args, **kwargs))

    return wrapper


__all__ = ["ComprehensionScope", "comprehension", "fx"]
