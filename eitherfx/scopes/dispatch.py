"""
Typed dispatch scopes.

``poly_map`` matches a Right payload against cases registered with
``scope.at(kind, handler)``; ``recover_with`` matches a Left exception against
cases registered with ``scope.case(kind, handler)``. In both, cases are tried
in registration order, the first match wins and the rest of the block is
skipped. The matched handler runs after the block has unwound.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from eitherfx.config import EitherSettings
from eitherfx.core.either import Either, Left, Right
from eitherfx.core.errors import NoMatchingCaseError, ScopeStateError

from .base import Scope, WriteOnceSlot, violation

logger = logging.getLogger(__name__)

L = TypeVar("L")
R = TypeVar("R")

type Kind = type | tuple[type, ...]

# Contract violations reach the caller even from inside a recovery scope
_SURFACED = (ScopeStateError,)


class _CaseScope(Scope, Generic[R]):
    """Holds the subject and the closure of the first matching case."""

    def __init__(self, subject: Any, settings: EitherSettings | None = None) -> None:
        super().__init__(settings)
        self._subject = subject
        self._closure: WriteOnceSlot[Callable[[], R]] = WriteOnceSlot(self.name)

    def _match(self, operation: str, kind: Kind, handler: Callable[[Any], R]) -> None:
        self._check_active(operation)
        if not isinstance(self._subject, kind):
            return
        subject = self._subject
        self._closure.write(lambda: handler(subject))
        logger.debug(
            "%s case %s matched %s", self.name, _kind_name(kind), type(subject).__name__
        )
        self._abort()

    def _matched(self, block: Callable[[Any], Any]) -> bool:
        aborted, _ = self._evaluate(block)
        if not aborted and self._closure.is_written:
            raise violation(self.name, f"{self.name} block swallowed its own abort")
        return aborted


class AtScope(_CaseScope[R]):
    """Scope handed to a ``poly_map`` block."""

    name = "at"

    def at(self, kind: Kind, handler: Callable[[Any], R]) -> None:
        """Register a case; if the payload is a ``kind``, it wins."""
        self._match("at", kind, handler)

    def map_as_right(self, block: Callable[[AtScope[R]], Any]) -> Either[Any, R]:
        if not self._matched(block):
            logger.debug("No at case matched %r", self._subject)
            raise NoMatchingCaseError(self._subject)
        return Right(self._closure.read()())


class RecoverScope(_CaseScope[R]):
    """Scope handed to a ``recover_with`` block."""

    name = "recover"

    def case(self, kind: Kind, handler: Callable[[Any], R]) -> None:
        """Register a recovery; if the failure is a ``kind``, it wins."""
        self._match("case", kind, handler)

    def recover_case(
        self, block: Callable[[RecoverScope[R]], Any], original: Left[Any, R]
    ) -> Either[BaseException, R]:
        try:
            matched = self._matched(block)
        except _SURFACED:
            raise
        except Exception as fault:
            logger.debug("recover block raised %s", type(fault).__name__)
            return Left(fault)

        if not matched:
            return original

        recovery = self._closure.read()
        try:
            return Right(recovery())
        except _SURFACED:
            raise
        except Exception as failure:
            logger.warning(
                "Recovery handler raised %s while recovering from %s",
                type(failure).__name__,
                type(self._subject).__name__,
            )
            return Left(self._attach_original(failure))

    def _attach_original(self, failure: Exception) -> Exception:
        """Keep the recovered failure inspectable from the handler's failure."""
        original = self._subject
        if failure is original:
            return failure
        failure.recovered_from = original  # type: ignore[attr-defined]
        if failure.__cause__ is None and isinstance(original, BaseException):
            failure.__cause__ = original
        if self._settings.annotate_recovery_failures:
            failure.add_note(f"raised while recovering from {original!r}")
        return failure


def _kind_name(kind: Kind) -> str:
    if isinstance(kind, tuple):
        return "(" + ", ".join(k.__name__ for k in kind) + ")"
    return kind.__name__


def poly_map(
    either: Either[L, Any],
    block: Callable[[AtScope[R]], Any],
    settings: EitherSettings | None = None,
) -> Either[L, R]:
    """Map a Right payload through the first ``at`` case matching its type.

    A Left is returned as is without running block. Raises
    NoMatchingCaseError when no case matches.
    """
    if isinstance(either, Left):
        return either
    return AtScope(either.value, settings).map_as_right(block)  # type: ignore[union-attr]


def recover_with(
    either: Either[BaseException, R],
    block: Callable[[RecoverScope[R]], Any],
    settings: EitherSettings | None = None,
) -> Either[BaseException, R]:
    """Turn a Left into a Right through the first ``case`` matching its kind.

    A Right, or a Left no case matches, is returned unchanged. If the matching
    handler raises, the new exception becomes the Left with the original
    failure attached as its cause.
    """
    if isinstance(either, Right):
        return either
    return RecoverScope(either.value, settings).recover_case(block, either)  # type: ignore[arg-type]


__all__ = ["AtScope", "Kind", "RecoverScope", "poly_map", "recover_with"]
