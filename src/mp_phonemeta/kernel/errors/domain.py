"""Domain errors – metadata rule and invariant violations."""

from __future__ import annotations

from mp_phonemeta.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a metadata rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A whole-record invariant of compiled metadata was violated."""

    default_code = "invariant_violation"


__all__ = ["DomainError", "InvariantViolationError"]
