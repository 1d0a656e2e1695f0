"""Translation lookup for per-language, file-based translation trees."""

from localization.i18n import Resolver, create_resolver

__all__ = ["Resolver", "create_resolver"]
