"""i18n system - translation loading and resolution.

Loads per-language translation trees from YAML or JSON files, resolves
dotted paths with plural-range selection, and substitutes ``:name``
placeholders.

Main components:
- models: Leaf, PluralSet, Node (the translation tree)
- loader: TranslationLoader, YAMLTranslationLoader, JSONTranslationLoader
- plurals: PluralRange and candidate selection
- resolver: Resolver service
- factory: create_resolver
"""

from localization.i18n.factory import create_resolver
from localization.i18n.interpolation import replace_named_variables
from localization.i18n.loader import (
    JSONTranslationLoader,
    TranslationLoader,
    YAMLTranslationLoader,
)
from localization.i18n.models import Leaf, Node, PluralSet, TreeNode
from localization.i18n.plurals import PluralRange, select_candidate
from localization.i18n.resolver import Resolver

__all__ = [
    "Leaf",
    "PluralSet",
    "Node",
    "TreeNode",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "JSONTranslationLoader",
    "PluralRange",
    "select_candidate",
    "replace_named_variables",
    "Resolver",
    "create_resolver",
]
