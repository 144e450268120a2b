"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
import typing


@dataclasses.dataclass(frozen=True)
class Settings:
    """Base class for env-driven settings."""

    _prefix: typing.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
