"""Config settings – CompilerSettings."""
from __future__ import annotations

import dataclasses

from mp_phonemeta.config.settings.base import Settings
from mp_phonemeta.config.validation.errors import InvalidSettingValueError


@dataclasses.dataclass(frozen=True)
class CompilerSettings(Settings):
    """Flags selecting which flavour of metadata a compile pass produces.

    ``lite_build`` drops example numbers. ``short_number_metadata`` compiles
    short-code territories; ``alternate_formats_metadata`` keeps formatting
    rules only. The last two select different record shapes and may not be
    combined.
    """

    _prefix = "PHONEMETA"

    lite_build: bool = False
    short_number_metadata: bool = False
    alternate_formats_metadata: bool = False

    def _validate(self) -> None:
        if self.short_number_metadata and self.alternate_formats_metadata:
            raise InvalidSettingValueError(
                "alternate_formats_metadata",
                self.alternate_formats_metadata,
                "cannot be combined with short_number_metadata",
            )


__all__ = ["CompilerSettings"]
