"""Translation file loading interface and implementations.

Defines the contract for parsing translation files into trees and provides
YAML and JSON loaders.
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Union

import yaml

import structlog
from localization.i18n.models import Node

logger = structlog.get_logger()

TRANSLATION_FILE_SUFFIXES = (".yml", ".yaml", ".json")

YAML_BOOL_TAG = "tag:yaml.org,2002:bool"


class TranslationYAMLLoader(yaml.SafeLoader):
    """SafeLoader that reads yes/no/on/off/true/false as plain strings.

    Keys such as ``on`` or ``no`` (a language code) stay addressable by path.
    """


TranslationYAMLLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != YAML_BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class TranslationLoader(ABC):
    """Abstract base for translation file loaders.

    Implementations define how a single file is read and parsed. Turning
    the parsed document into a tree is shared.
    """

    @abstractmethod
    def parse(self, content: str, source_file: Path) -> Any:
        """Parse raw file content into a Python structure.

        Args:
            content: File content.
            source_file: File the content was read from (for messages).

        Returns:
            Parsed document.

        Raises:
            ValueError: If the content cannot be parsed.
        """
        pass

    def load(self, source_file: Union[str, Path]) -> Node:
        """Load a translation file into a tree.

        Args:
            source_file: Path to the translation file.

        Returns:
            Root Node of the parsed tree. An empty document gives an empty
            Node.

        Raises:
            FileNotFoundError: If the file does not exist.
            ValueError: If parsing fails or the document is not a mapping.
        """
        source_file = Path(source_file)
        if not source_file.is_file():
            raise FileNotFoundError(
                f'Translation file "{source_file}" does not exist'
            )

        content = source_file.read_text(encoding="utf-8")
        data = self.parse(content, source_file)
        if data is None:
            return Node()

        if not isinstance(data, dict):
            logger.error(
                "invalid_translation_format",
                file=str(source_file),
                expected="dict",
                got=type(data).__name__,
            )
            raise ValueError(
                f"Translation file {source_file} must contain a mapping, got {type(data).__name__}"
            )

        tree = Node.from_dict(data)
        logger.debug(
            "parsed_translation_file",
            file=str(source_file),
            key_count=len(tree),
        )
        return tree


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML translation files.

    Expected format:
    errors:
      notfound: "Page :page not found"
    apples:
      "0": "no apples"
      "1": "one apple"
      "2,": ":count apples"
    """

    def parse(self, content: str, source_file: Path) -> Any:
        try:
            return yaml.load(content, Loader=TranslationYAMLLoader)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(source_file), error=str(e))
            raise ValueError(f"Failed to parse {source_file}: {e}") from e


class JSONTranslationLoader(TranslationLoader):
    """Loader for JSON translation files."""

    def parse(self, content: str, source_file: Path) -> Any:
        if not content.strip():
            return None
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.error("json_parse_error", file=str(source_file), error=str(e))
            raise ValueError(f"Failed to parse {source_file}: {e}") from e


_LOADERS: Dict[str, TranslationLoader] = {
    ".json": JSONTranslationLoader(),
}
_DEFAULT_LOADER: TranslationLoader = YAMLTranslationLoader()


def get_loader(source_file: Union[str, Path]) -> TranslationLoader:
    """Pick the loader for a file based on its suffix.

    JSON files use the JSON loader, anything else is read as YAML.

    Args:
        source_file: Path to the translation file.

    Returns:
        TranslationLoader instance.
    """
    return _LOADERS.get(Path(source_file).suffix.lower(), _DEFAULT_LOADER)


def language_from_filename(source_file: Union[str, Path]) -> str:
    """Extract the language code from a translation filename.

    The language is the last dot-separated part of the stem:
    "messages.fr.yml" -> "fr", "en.json" -> "en".

    Args:
        source_file: Path to the translation file.

    Returns:
        Language code.
    """
    return Path(source_file).stem.split(".")[-1]


def discover_translation_files(directory: Union[str, Path]) -> List[Path]:
    """List translation files in a directory, sorted by name.

    Args:
        directory: Directory to scan (not recursive).

    Returns:
        Sorted list of files with a YAML or JSON suffix.

    Raises:
        FileNotFoundError: If the directory does not exist.
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Translations directory not found: {directory}")

    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in TRANSLATION_FILE_SUFFIXES
    )
