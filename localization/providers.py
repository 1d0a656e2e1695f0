"""
Factory functions for dependency injection.

Provides process-wide singleton providers for settings and the resolver.
Prefer passing a Resolver explicitly; these providers serve hosts that want
one shared instance.
"""

from functools import lru_cache

from localization.configuration import Settings
from localization.i18n import Resolver, create_resolver


@lru_cache
def get_settings() -> Settings:
    """
    Get process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_resolver() -> Resolver:
    """
    Get process-wide resolver singleton.

    Created on first use from ``get_settings().i18n``.

    Returns:
        Resolver: Cached resolver instance.

    Usage:
        resolver = get_resolver()
        resolver.translate("errors.notfound", default="Not found")
    """
    return create_resolver(get_settings().i18n)
