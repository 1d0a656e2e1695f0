"""Feature-level fixtures for i18n system tests."""

import pytest

from localization.i18n import Resolver
from tests.factories.i18n import (
    make_resolver,
    make_translation_data,
    write_translation_file,
)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample translation files.

    Returns a directory structure like:
    - messages.en.yml
    - messages.fr.yml
    - extra.en.json
    """
    directory = tmp_path / "locales"
    directory.mkdir()
    write_translation_file(directory, "messages.en.yml", make_translation_data("en"))
    write_translation_file(directory, "messages.fr.yml", make_translation_data("fr"))
    write_translation_file(
        directory,
        "extra.en.json",
        {"goodbye": "Goodbye :name", "greeting": "Hi :name"},
    )
    return directory


@pytest.fixture
def en_file(temp_translations_dir):
    return temp_translations_dir / "messages.en.yml"


@pytest.fixture
def fr_file(temp_translations_dir):
    return temp_translations_dir / "messages.fr.yml"


@pytest.fixture
def resolver():
    """Empty Resolver with default options."""
    return Resolver()


@pytest.fixture
def loaded_resolver():
    """Resolver holding English and French samples, English selected."""
    return make_resolver()
