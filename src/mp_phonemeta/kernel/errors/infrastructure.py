"""Infrastructure errors – document reading failures."""

from __future__ import annotations

from typing import Any

from mp_phonemeta.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a metadata rule violation."""

    default_code = "infrastructure_error"


class SerializationError(InfrastructureError):
    """Failed to deserialize a source document."""

    default_code = "serialization_error"

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = ["InfrastructureError", "SerializationError"]
