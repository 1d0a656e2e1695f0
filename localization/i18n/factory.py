"""Factory functions for creating i18n components.

Provides a convenience function for building a Resolver from settings.
"""

import structlog
from localization.configuration import I18nSettings
from localization.i18n.resolver import Resolver

logger = structlog.get_logger()


def create_resolver(
    settings: I18nSettings | None = None,
    preload: bool = True,
) -> Resolver:
    """Create and configure a Resolver instance.

    Args:
        settings: Resolver settings (default: loaded from the environment).
        preload: Whether to load settings.translations_dir immediately
            (default: True). Ignored when no directory is configured.

    Returns:
        Resolver: Configured resolver instance

    Raises:
        FileNotFoundError: If the configured translations directory does not exist
        ValueError: If a translation file cannot be parsed

    Usage:
        # Use settings from the environment
        resolver = create_resolver()

        # Explicit settings, lazy loading
        resolver = create_resolver(I18nSettings(I18N_PATH_DELIMITER="/"), preload=False)
        resolver.load_file("locales/en.yml", "en")
    """
    if settings is None:
        settings = I18nSettings()

    resolver = Resolver(
        delimiter=settings.path_delimiter,
        legacy_upper_bound=settings.legacy_upper_bound,
    )

    if preload and settings.translations_dir is not None:
        languages = resolver.load_directory(settings.translations_dir)
        logger.info(
            "resolver_created_with_preload",
            translations_dir=str(settings.translations_dir),
            languages=languages,
        )
    else:
        logger.info("resolver_created_lazy")

    if settings.default_language:
        resolver.set_language(settings.default_language)

    return resolver
