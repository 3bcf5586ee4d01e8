from pathlib import Path

import pytest
from pydantic import ValidationError

from polypost.core.config import LanguageSettings, PathsSettings, PolypostConfig, SupportedLanguages


def test_default_languages_match_the_original_site():
    languages = SupportedLanguages()

    assert languages.codes == ("zh-hans", "en")
    assert languages.canonical == "zh-hans"
    assert "en" in languages
    assert "fr" not in languages


def test_index_path_maps_canonical_to_root():
    languages = SupportedLanguages()

    assert languages.index_path("zh-hans") == "/"
    assert languages.index_path("en") == "/en/"


def test_canonical_must_be_configured():
    with pytest.raises(ValidationError, match="Canonical language"):
        SupportedLanguages(languages={"en": LanguageSettings(name="English")}, canonical="zh-hans")


def test_empty_language_set_is_rejected():
    with pytest.raises(ValidationError, match="At least one"):
        SupportedLanguages(languages={}, canonical="en")


def test_supported_languages_are_immutable():
    languages = SupportedLanguages()

    with pytest.raises(ValidationError):
        languages.canonical = "en"


def test_paths_resolve_against_site_root(tmp_path: Path):
    paths = PathsSettings(site_root=tmp_path)

    assert paths.abs_content_dir == tmp_path / "content" / "blog"
    assert paths.abs_output_path == tmp_path / ".polypost" / "routes.json"


def test_absolute_paths_are_kept(tmp_path: Path):
    paths = PathsSettings(site_root=tmp_path, content_dir=Path("/srv/posts"))

    assert paths.abs_content_dir == Path("/srv/posts")


def test_env_overrides_nested_settings(monkeypatch):
    monkeypatch.setenv("POLYPOST_I18N__CANONICAL", "en")
    monkeypatch.setenv("POLYPOST_ROUTING__UNIFORM_POST_CONTEXT", "true")

    config = PolypostConfig()

    assert config.i18n.canonical == "en"
    assert config.routing.uniform_post_context is True
    assert config.routing.rewrite_translated_links is False
