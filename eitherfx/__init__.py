"""
eitherfx: an Either type with comprehensions and typed dispatch.

Left holds a failure, Right a success. ``fx`` runs fallible steps as
straight-line code that stops at the first Left; ``poly_map`` and
``recover_with`` dispatch on the runtime type of the success or failure.
"""

import logging

from .config import EitherSettings, configure_logging, get_settings, reset_settings
from .core import (
    EMPTY_LEFT,
    Either,
    EitherError,
    Left,
    NoMatchingCaseError,
    Right,
    ScopeStateError,
    UnwrapError,
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
from .scopes import (
    AtScope,
    ComprehensionScope,
    RecoverScope,
    comprehension,
    fx,
    poly_map,
    recover_with,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EMPTY_LEFT",
    "AtScope",
    "ComprehensionScope",
    "Either",
    "EitherError",
    "EitherSettings",
    "Left",
    "NoMatchingCaseError",
    "RecoverScope",
    "Right",
    "ScopeStateError",
    "UnwrapError",
    "catch",
    "comprehension",
    "cond",
    "configure_logging",
    "from_fallible",
    "from_optional",
    "fx",
    "get_settings",
    "left_of",
    "lift",
    "option",
    "poly_map",
    "recover_with",
    "reset_settings",
    "right_of",
    "sequence_either",
    "tailrec",
    "traverse_either",
    "unzip_either",
]
