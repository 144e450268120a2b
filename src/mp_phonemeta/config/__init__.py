"""Config – compiler settings, loaders and validation errors."""

from mp_phonemeta.config.settings import (
    CompilerSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from mp_phonemeta.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "CompilerSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
