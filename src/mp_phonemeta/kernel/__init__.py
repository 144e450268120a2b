"""Kernel – framework-agnostic building blocks shared by the compiler."""

from mp_phonemeta.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvariantViolationError,
    SerializationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "SerializationError",
]
