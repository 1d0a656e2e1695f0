"""Translation resolver: loads language trees and resolves translated messages.

Core component of the i18n system. Owns the per-language translation trees
and the current language, and resolves paths with plural-range selection
and ``:name`` variable substitution.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from localization.i18n.interpolation import replace_named_variables
from localization.i18n.loader import (
    discover_translation_files,
    get_loader,
    language_from_filename,
)
from localization.i18n.models import Node
from localization.i18n.paths import DEFAULT_DELIMITER, get_value
from localization.i18n.plurals import select_candidate
from localization.logging import get_module_logger

logger = get_module_logger()


class Resolver:
    """Resolves translated messages from loaded translation trees.

    Lookups never raise: a missing language, a missing path or a plural
    count no form matches all resolve to the caller's default (or "").

    Attributes:
        translations: Loaded trees by language code.
        delimiter: Separator between path segments.
        legacy_upper_bound: Compare upper-bound-only plural ranges (",5")
            against 0 instead of their upper bound.

    Usage:
        resolver = Resolver()
        resolver.load_file("locales/messages.en.yml", "en")
        resolver.translate("apples", variables={"count": 3}, plural=3)
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        legacy_upper_bound: bool = False,
    ):
        """Initialize Resolver.

        Args:
            delimiter: Separator between path segments (default: ".").
            legacy_upper_bound: Legacy comparison for ",N" plural ranges.
        """
        self.translations: Dict[str, Node] = {}
        self.delimiter = delimiter
        self.legacy_upper_bound = legacy_upper_bound
        self._language: Optional[str] = None

    def translate(
        self,
        path: str,
        variables: Optional[Mapping[str, Any]] = None,
        plural: int = 0,
        language: Optional[str] = None,
        default: Optional[str] = None,
    ) -> str:
        """Resolve and interpolate a translated message.

        Plural forms are checked last-declared first and the first form
        whose range matches ``plural`` is used. Forms whose key is not a
        range specifier match any count. A plain string matches any count.

        Args:
            path: Dotted path to the message (e.g. "errors.notfound").
            variables: Optional mapping of placeholder name to value.
            plural: Count used to select a plural form (default: 0).
            language: Language to use instead of the current language.
            default: Text used when nothing is found or matches.

        Returns:
            Translated message with ``:name`` placeholders replaced.
        """
        language = language if language is not None else self._language
        tree = self.translations.get(language) if language is not None else None

        value = get_value(tree, path, self.delimiter)
        candidates = value.candidates() if value is not None else {}

        text = select_candidate(
            candidates, plural, legacy_upper_bound=self.legacy_upper_bound
        )
        if text is None:
            logger.debug(
                "translation_not_found",
                path=path,
                language=language,
                plural=plural,
                has_default=default is not None,
            )
            text = default if default is not None else ""

        return replace_named_variables(text, variables)

    def has_translation(self, path: str, language: Optional[str] = None) -> bool:
        """Check if a translation exists for a path.

        Args:
            path: Dotted path to check.
            language: Language to check (default: current language).

        Returns:
            True if the path names a message or a set of plural forms.
        """
        language = language if language is not None else self._language
        tree = self.translations.get(language) if language is not None else None
        return get_value(tree, path, self.delimiter) is not None

    def set_language(self, language: str) -> None:
        """Set the current language.

        No check is made that translations exist for it.

        Args:
            language: Language code (e.g. "en", "fr").
        """
        self._language = language
        logger.debug("language_set", language=language)

    def get_language(self) -> Optional[str]:
        """Get the current language, or None if none was set or loaded."""
        return self._language

    def load_file(self, source_file: Union[str, Path], language: str) -> None:
        """Load a translation file and merge it into a language's tree.

        Keys already loaded for the language win over keys from the new
        file, so repeated loads only add new top-level keys. The language
        becomes the current language.

        Args:
            source_file: Path to a YAML or JSON translation file.
            language: Language code the file's translations belong to.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If the file cannot be parsed or is not a mapping.
        """
        tree = get_loader(source_file).load(source_file)

        existing = self.translations.get(language)
        self.translations[language] = tree.merged_with(existing)
        self._language = language

        logger.info(
            "loaded_translation_file",
            file=str(source_file),
            language=language,
            key_count=len(tree),
            total_key_count=len(self.translations[language]),
        )

    def load_directory(self, directory: Union[str, Path]) -> List[str]:
        """Load every translation file in a directory.

        Files are loaded in name order, and each file's language is taken
        from its name ("messages.fr.yml" -> "fr"). The current language ends
        up as the language of the last file loaded.

        Args:
            directory: Directory holding .yml, .yaml or .json files.

        Returns:
            Sorted list of languages that were loaded.

        Raises:
            FileNotFoundError: If the directory does not exist.
            ValueError: If a file cannot be parsed.
        """
        languages = set()
        for source_file in discover_translation_files(directory):
            language = language_from_filename(source_file)
            self.load_file(source_file, language)
            languages.add(language)

        if not languages:
            logger.warning("no_translation_files_found", directory=str(directory))

        return sorted(languages)

    def get_available_languages(self) -> List[str]:
        """Get the languages that have loaded translations."""
        return list(self.translations.keys())

    def get_tree(self, language: str) -> Optional[Node]:
        """Get the loaded translation tree for a language.

        Args:
            language: Language code.

        Returns:
            Root Node, or None if nothing was loaded for the language.
        """
        return self.translations.get(language)
