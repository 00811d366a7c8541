"""Control-flow builders that produce an Either from a block of steps."""

from .comprehension import ComprehensionScope, comprehension, fx
from .dispatch import AtScope, RecoverScope, poly_map, recover_with

__all__ = [
    "AtScope",
    "ComprehensionScope",
    "RecoverScope",
    "comprehension",
    "fx",
    "poly_map",
    "recover_with",
]
