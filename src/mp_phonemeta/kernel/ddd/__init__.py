"""Kernel DDD helpers used by the compiler."""

from mp_phonemeta.kernel.ddd.invariant import Invariant, ensure

__all__ = ["Invariant", "ensure"]
