"""Config settings – env-based compiler configuration."""
from mp_phonemeta.config.settings.base import Settings
from mp_phonemeta.config.settings.compiler import CompilerSettings
from mp_phonemeta.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["CompilerSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
