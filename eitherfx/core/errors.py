"""
Raised-fault hierarchy for the Either library.

Modeled failures live in ``Left`` payloads and are never raised. The classes
here cover the other side of the boundary: programming errors and contract
violations that must surface immediately instead of being folded into an
Either.
"""

from typing import Any

# Type alias for error context data
type ErrorContextData = str | int | float | bool | None
type ErrorContextDict = dict[str, ErrorContextData]


class EitherError(Exception):
    """
    Base exception for all eitherfx errors.

    Carries an error code and a flat context mapping so callers can log the
    failure in a structured way.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        context: ErrorContextDict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def get_error_context(self) -> ErrorContextDict:
        """Get structured error context for logging and debugging."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": str(self.context),
        }


class ScopeStateError(EitherError, RuntimeError):
    """A scope's write-once/read-once discipline was broken.

    Raised when a result slot is written twice, read before being written, or
    when a scope is used after its evaluation has finished.
    """

    def __init__(
        self,
        message: str,
        scope: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.scope = scope

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context["scope"] = self.scope
        return context


class NoMatchingCaseError(EitherError, ValueError):
    """No registered ``at`` case accepted the dispatched value."""

    def __init__(self, value: Any, **kwargs: Any):
        super().__init__(f"No such at case for argument=[{value!r}]", **kwargs)
        self.value = value

    def get_error_context(self) -> ErrorContextDict:
        context = super().get_error_context()
        context["value_type"] = type(self.value).__name__
        return context


class UnwrapError(EitherError, ValueError):
    """``unwrap`` was called on a Left whose payload is not an exception."""

    def __init__(self, value: Any, **kwargs: Any):
        super().__init__(f"Called unwrap on Left: {value!r}", **kwargs)
        self.value = value


__all__ = [
    "EitherError",
    "ErrorContextData",
    "ErrorContextDict",
    "NoMatchingCaseError",
    "ScopeStateError",
    "UnwrapError",
]
