"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── InvariantViolationError
    ├── ApplicationError     (application.py)
    └── InfrastructureError  (infrastructure.py)
        └── SerializationError

Compiler failures (``mp_phonemeta.metadata.errors``) hang off ``DomainError``;
configuration failures (``mp_phonemeta.config.validation``) off ``ApplicationError``.
"""

from mp_phonemeta.kernel.errors.application import ApplicationError
from mp_phonemeta.kernel.errors.base import BaseError
from mp_phonemeta.kernel.errors.domain import DomainError, InvariantViolationError
from mp_phonemeta.kernel.errors.infrastructure import (
    InfrastructureError,
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
