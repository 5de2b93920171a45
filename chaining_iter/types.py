"""
Chaining Iter Common Types - Shared Type Definitions
====================================================

This module contains the type variables and the "no value" sentinel shared by
the protocol, segment and chain modules. Keeping them here avoids circular
imports between those modules.
"""

from typing import TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# ============================================================================
# SENTINEL VALUES
# ============================================================================


class _EXHAUSTED:
    """Sentinel for 'no value' returned by a chain pull that found no item."""

    __slots__ = ()

    def __repr__(self):
        return "EXHAUSTED"

    def __bool__(self):
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return "EXHAUSTED"


EXHAUSTED = _EXHAUSTED()
