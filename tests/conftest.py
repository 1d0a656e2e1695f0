"""Shared fixtures for the localization test suite."""

import pytest

from localization.providers import get_resolver, get_settings


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear cached singletons so each test sees its own environment."""
    get_settings.cache_clear()
    get_resolver.cache_clear()
    yield
    get_settings.cache_clear()
    get_resolver.cache_clear()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Remove settings variables that could leak in from the shell.

    Also moves into an empty directory so no stray .env file is read.
    """
    for name in (
        "I18N_TRANSLATIONS_DIR",
        "I18N_DEFAULT_LANGUAGE",
        "I18N_PATH_DELIMITER",
        "I18N_LEGACY_UPPER_BOUND",
        "PREFIX",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "workdir"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir
