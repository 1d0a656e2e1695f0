"""Tests for localization.i18n.loader module."""

import pytest

from localization.i18n.loader import (
    JSONTranslationLoader,
    YAMLTranslationLoader,
    discover_translation_files,
    get_loader,
    language_from_filename,
)
from localization.i18n.models import Leaf, Node, PluralSet
from tests.factories.i18n import make_translation_data, write_translation_file


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_load_file(self, en_file):
        """load() parses a YAML file into a tree."""
        tree = YAMLTranslationLoader().load(en_file)

        assert isinstance(tree, Node)
        assert tree.get("greeting") == Leaf("Hello :name")
        assert isinstance(tree.get("apples"), PluralSet)

    def test_load_preserves_structure(self, en_file):
        """load() keeps the nested shape of the document."""
        tree = YAMLTranslationLoader().load(en_file)
        assert tree.to_dict() == make_translation_data("en")

    def test_load_accepts_string_path(self, en_file):
        tree = YAMLTranslationLoader().load(str(en_file))
        assert "greeting" in tree

    def test_load_unquoted_numeric_keys(self, tmp_path):
        """Integer keys written without quotes are read as strings."""
        path = tmp_path / "counts.en.yml"
        path.write_text("items:\n  0: none\n  1: one\n  2,: many\n", encoding="utf-8")

        tree = YAMLTranslationLoader().load(path)

        assert tree.get("items").forms == {"0": "none", "1": "one", "2,": "many"}

    def test_load_yes_no_on_off_stay_strings(self, tmp_path):
        """YAML 1.1 boolean words are kept as written, as keys and values."""
        path = tmp_path / "switch.en.yml"
        path.write_text(
            "switch:\n  on: Enabled\n  off: Disabled\nno: Norsk\nanswer: yes\n",
            encoding="utf-8",
        )

        tree = YAMLTranslationLoader().load(path)

        assert tree.get("switch").forms == {"on": "Enabled", "off": "Disabled"}
        assert tree.get("no") == Leaf("Norsk")
        assert tree.get("answer") == Leaf("yes")

    def test_load_null_values_left_out(self, tmp_path):
        """Null values in YAML are not loaded as translations."""
        path = tmp_path / "nulls.en.yml"
        path.write_text("greeting: ~\nbye: Bye\n", encoding="utf-8")

        tree = YAMLTranslationLoader().load(path)

        assert "greeting" not in tree
        assert tree.get("bye") == Leaf("Bye")

    def test_load_missing_file_raises(self, tmp_path):
        """load() raises FileNotFoundError naming the file."""
        missing = tmp_path / "missing.en.yml"
        with pytest.raises(FileNotFoundError, match="missing.en.yml"):
            YAMLTranslationLoader().load(missing)

    def test_load_directory_path_raises(self, tmp_path):
        """A directory is not a translation file."""
        with pytest.raises(FileNotFoundError):
            YAMLTranslationLoader().load(tmp_path)

    def test_load_invalid_yaml_raises_error(self, tmp_path):
        """load() raises ValueError for invalid YAML."""
        invalid_yaml = tmp_path / "invalid.en.yml"
        invalid_yaml.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(ValueError):
            YAMLTranslationLoader().load(invalid_yaml)

    def test_load_non_dict_yaml_raises_error(self, tmp_path):
        """load() raises ValueError for a document that is not a mapping."""
        write_translation_file(tmp_path, "list.en.yml", ["item1", "item2"])
        with pytest.raises(ValueError):
            YAMLTranslationLoader().load(tmp_path / "list.en.yml")

    def test_load_empty_file(self, tmp_path):
        """An empty file gives an empty tree."""
        empty = tmp_path / "empty.en.yml"
        empty.write_text("", encoding="utf-8")
        assert YAMLTranslationLoader().load(empty) == Node()


class TestJSONTranslationLoader:
    """Tests for JSONTranslationLoader."""

    def test_load_file(self, temp_translations_dir):
        tree = JSONTranslationLoader().load(temp_translations_dir / "extra.en.json")
        assert tree.get("goodbye") == Leaf("Goodbye :name")

    def test_load_invalid_json_raises_error(self, tmp_path):
        invalid = tmp_path / "bad.en.json"
        invalid.write_text('{"a": ', encoding="utf-8")
        with pytest.raises(ValueError):
            JSONTranslationLoader().load(invalid)

    def test_load_empty_file(self, tmp_path):
        empty = tmp_path / "empty.en.json"
        empty.write_text("  \n", encoding="utf-8")
        assert JSONTranslationLoader().load(empty) == Node()


class TestLoaderHelpers:
    """Tests for module-level helpers."""

    @pytest.mark.parametrize(
        "filename,loader_class",
        [
            ("messages.en.json", JSONTranslationLoader),
            ("messages.en.JSON", JSONTranslationLoader),
            ("messages.en.yml", YAMLTranslationLoader),
            ("messages.en.yaml", YAMLTranslationLoader),
            ("messages.en.txt", YAMLTranslationLoader),
        ],
    )
    def test_get_loader(self, filename, loader_class):
        assert isinstance(get_loader(filename), loader_class)

    @pytest.mark.parametrize(
        "filename,language",
        [
            ("messages.fr.yml", "fr"),
            ("en.json", "en"),
            ("app.errors.pt-BR.yaml", "pt-BR"),
        ],
    )
    def test_language_from_filename(self, filename, language):
        assert language_from_filename(filename) == language

    def test_discover_translation_files(self, temp_translations_dir):
        (temp_translations_dir / "notes.txt").write_text("ignored", encoding="utf-8")

        files = discover_translation_files(temp_translations_dir)

        assert [path.name for path in files] == [
            "extra.en.json",
            "messages.en.yml",
            "messages.fr.yml",
        ]

    def test_discover_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            discover_translation_files(tmp_path / "nonexistent")
