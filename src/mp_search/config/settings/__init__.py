"""Config settings – 12-factor env-based configuration."""
from mp_search.config.settings.base import SearchSettings, Settings
from mp_search.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SearchSettings", "Settings", "SettingsLoader"]
