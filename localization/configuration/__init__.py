"""Configuration module - public API.

Centralized configuration for the localization package using Pydantic
BaseSettings.

Exports:
    Settings: Main settings class
    I18nSettings: Translation resolver settings class

Example:
    ```python
    from localization.providers import get_settings

    settings = get_settings()
    language = settings.i18n.default_language
    ```
"""

from localization.configuration.i18n import I18nSettings
from localization.configuration.settings import Settings

__all__ = ["Settings", "I18nSettings"]
