"""Kernel value types – public re-export surface.

Modules:
  field_state.py – Inherited, Overridden, NotApplicable, FieldState
"""

from mp_phonemeta.kernel.types.field_state import (
    NOT_APPLICABLE,
    FieldState,
    Inherited,
    NotApplicable,
    Overridden,
)

__all__ = [
    "NOT_APPLICABLE",
    "FieldState",
    "Inherited",
    "NotApplicable",
    "Overridden",
]
