"""
Abortable evaluation shared by every scope.

A scope runs a user block with itself as the only argument. Declaring a
terminal outcome raises a private signal that unwinds the rest of the block
and is caught only by the scope that raised it, so nothing after the abort
point ever runs and nested scopes never consume each other's signals.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, NoReturn, TypeVar

from eitherfx.config import EitherSettings, get_settings
from eitherfx.core.errors import ScopeStateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ScopeAbort(BaseException):
    """Unwinds a step sequence up to the scope that raised it.

    Derives from BaseException so ``except Exception`` inside a block does not
    intercept it.
    """

    def __init__(self, owner: Scope) -> None:
        super().__init__(f"{owner.name} scope aborted")
        self.owner = owner


class WriteOnceSlot(Generic[T]):
    """A cell that must be written exactly once and read exactly once."""

    __slots__ = ("_name", "_read", "_value", "_written")

    def __init__(self, name: str) -> None:
        self._name = name
        self._value: T | None = None
        self._written = False
        self._read = False

    @property
    def is_written(self) -> bool:
        return self._written

    def write(self, value: T) -> None:
        if self._written:
            raise violation(self._name, f"{self._name} slot written twice")
        self._value = value
        self._written = True

    def read(self) -> T:
        if not self._written:
            raise violation(self._name, f"{self._name} slot read before being written")
        if self._read:
            raise violation(self._name, f"{self._name} slot read twice")
        self._read = True
        return self._value  # type: ignore[return-value]


def violation(scope: str, message: str) -> ScopeStateError:
    """Log a contract violation and build the error to raise."""
    error = ScopeStateError(message, scope=scope)
    logger.error("Scope contract violation: %s", message)
    return error


class Scope:
    """Single-use abortable evaluation of a block."""

    name = "scope"

    def __init__(self, settings: EitherSettings | None = None) -> None:
        self._settings = settings or get_settings()
        self._active = False
        self._finished = False

    def _evaluate(self, block: Callable[[Any], Any]) -> tuple[bool, Any]:
        """Run block once. Returns (aborted, returned value)."""
        if self._active or self._finished:
            raise violation(self.name, f"{self.name} scope evaluated twice")
        self._trace("%s scope started", self.name)
        self._active = True
        try:
            value = block(self)
        except ScopeAbort as signal:
            if signal.owner is not self:
                raise
            self._trace("%s scope aborted", self.name)
            return True, None
        finally:
            self._active = False
            self._finished = True
        self._trace("%s scope completed", self.name)
        return False, value

    def _abort(self) -> NoReturn:
        raise ScopeAbort(self)

    def _check_active(self, operation: str) -> None:
        if not self._active:
            state = "finished" if self._finished else "unstarted"
            raise violation(
                self.name, f"{operation}() called on a {state} {self.name} scope"
            )

    def _trace(self, message: str, *args: Any) -> None:
        if self._settings.trace_scopes:
            logger.debug(message, *args)


__all__ = ["Scope", "ScopeAbort", "WriteOnceSlot", "violation"]
