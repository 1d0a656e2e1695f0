"""Translation resolver settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator

from localization.configuration.base import FeatureSettings


class I18nSettings(FeatureSettings):
    """Configuration for the translation resolver.

    Environment Variables:
        I18N_TRANSLATIONS_DIR: Directory of translation files loaded at
            startup (default: none, nothing is preloaded)
        I18N_DEFAULT_LANGUAGE: Language selected once loading is done
            (default: the language of the last file loaded)
        I18N_PATH_DELIMITER: Separator between path segments (default: ".")
        I18N_LEGACY_UPPER_BOUND: Compare ",N" plural ranges against 0
            instead of N (default: False)

    Example:
        ```python
        from localization.providers import get_settings

        settings = get_settings()

        if settings.i18n.translations_dir:
            resolver.load_directory(settings.i18n.translations_dir)
        ```
    """

    translations_dir: Optional[Path] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory of translation files loaded at startup",
    )
    default_language: Optional[str] = Field(
        default=None,
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language selected after startup loading",
    )
    path_delimiter: str = Field(
        default=".",
        alias="I18N_PATH_DELIMITER",
        description="Separator between translation path segments",
    )
    legacy_upper_bound: bool = Field(
        default=False,
        alias="I18N_LEGACY_UPPER_BOUND",
        description="Compare upper-bound-only plural ranges against 0",
    )

    @field_validator("path_delimiter")
    @classmethod
    def validate_path_delimiter(cls, v: str) -> str:
        """Ensure the delimiter is not empty."""
        if not v:
            raise ValueError("I18N_PATH_DELIMITER must not be empty")
        return v
