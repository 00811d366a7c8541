"""
Either value and combinators.

This module provides the closed Either type, its construction helpers and the
combinators derived from its two constructors, together with the raised-fault
hierarchy used when a contract is broken.
"""

from .either import (
    EMPTY_LEFT,
    Either,
    Left,
    Right,
    catch,
    cond,
    from_fallible,
    from_optional,
    left_of,
    lift,
    option,
    right_of,
    sequence_either,
    tailrec,
    traverse_either,
    unzip_either,
)
from .errors import EitherError, NoMatchingCaseError, ScopeStateError, UnwrapError

__all__ = [
    "EMPTY_LEFT",
    "Either",
    "EitherError",
    "Left",
    "NoMatchingCaseError",
    "Right",
    "ScopeStateError",
    "UnwrapError",
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
