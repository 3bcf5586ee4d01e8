from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CANONICAL_LANGUAGE = "zh-hans"


class LanguageSettings(BaseModel):
    """Display and locale metadata for one supported language."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Human readable language name")
    locale: str | None = Field(default=None, description="Locale used for date formatting")


def _default_languages() -> dict[str, LanguageSettings]:
    return {
        "zh-hans": LanguageSettings(name="中文", locale="zh-CN"),
        "en": LanguageSettings(name="English", locale="en-US"),
    }


class SupportedLanguages(BaseModel):
    """Read-only mapping of language codes to their metadata.

    One code is the canonical language: its posts and index live at the
    site root, every other language lives under ``/<code>/``.
    """

    model_config = ConfigDict(frozen=True)

    languages: dict[str, LanguageSettings] = Field(default_factory=_default_languages)
    canonical: str = Field(default=DEFAULT_CANONICAL_LANGUAGE, description="Canonical language code")

    @model_validator(mode="after")
    def _check_canonical(self) -> "SupportedLanguages":
        if not self.languages:
            msg = "At least one supported language must be configured."
            raise ValueError(msg)
        if self.canonical not in self.languages:
            msg = f"Canonical language '{self.canonical}' is not one of {sorted(self.languages)}"
            raise ValueError(msg)
        return self

    def __contains__(self, code: object) -> bool:
        return code in self.languages

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self.languages)

    def is_canonical(self, code: str | None) -> bool:
        return code == self.canonical

    def index_path(self, code: str) -> str:
        """Root path for ``/`` for the canonical code, ``/<code>/`` otherwise."""
        if self.is_canonical(code):
            return "/"
        return f"/{code}/"


class PathsSettings(BaseModel):
    """Path configuration.

    All paths are relative to the 'site_root' unless absolute.
    site_root defaults to current working directory.
    """

    site_root: Path = Field(
        default_factory=Path.cwd,
        description="Root directory of the site (defaults to current working directory)",
    )
    content_dir: Path = Field(default=Path("content/blog"), description="Directory holding post folders")
    output_path: Path = Field(default=Path(".polypost/routes.json"), description="Route table output file")

    @property
    def abs_content_dir(self) -> Path:
        return self._resolve(self.content_dir)

    @property
    def abs_output_path(self) -> Path:
        return self._resolve(self.output_path)

    def _resolve(self, path: Path) -> Path:
        if path.is_absolute():
            return path
        return self.site_root / path


class RoutingSettings(BaseModel):
    """Switches for the optional parts of post route contexts."""

    uniform_post_context: bool = Field(
        default=False,
        description="Attach previous/next placeholders to every post, not only canonical ones",
    )
    rewrite_translated_links: bool = Field(
        default=False,
        description="Record internal links that have a translation in the post's language",
    )


class PolypostConfig(BaseSettings):
    """Root configuration for Polypost.

    Supports environment variable overrides with the pattern:
    POLYPOST_SECTION__KEY (e.g., POLYPOST_I18N__CANONICAL)
    """

    i18n: SupportedLanguages = Field(default_factory=SupportedLanguages)
    paths: PathsSettings = Field(default_factory=PathsSettings)
    routing: RoutingSettings = Field(default_factory=RoutingSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="POLYPOST_",
        env_nested_delimiter="__",
    )
