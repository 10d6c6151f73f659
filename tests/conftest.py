"""Shared pytest fixtures for localeroute tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from localeroute.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME
from localeroute.domain.i18n import DomainLocale, I18nConfig
from localeroute.domain.normalizer import LocaleRouteNormalizer

SITE_TOML = """\
[i18n]
locales = ["en-US", "fr", "nl-NL", "nl-BE"]
default_locale = "en-US"

[[i18n.domains]]
domain = "example.fr"
default_locale = "fr"
locales = ["fr"]

[[i18n.domains]]
domain = "example.nl:8080"
default_locale = "nl-NL"
locales = ["nl-NL", "nl-BE"]
http = true
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def i18n_config() -> I18nConfig:
    """The three-locale site used throughout the docs."""
    return I18nConfig(locales=("en-US", "fr", "nl-NL"), default_locale="en-US")


@pytest.fixture
def domain_config() -> I18nConfig:
    """Locales split across two country domains plus the global default."""
    return I18nConfig(
        locales=("en-US", "fr", "nl-NL", "nl-BE"),
        default_locale="en-US",
        domains=(
            DomainLocale(domain="example.fr", default_locale="fr", locales=("fr",)),
            DomainLocale(
                domain="Example.NL:8080",
                default_locale="nl-NL",
                locales=("nl-NL", "nl-BE"),
                http=True,
            ),
        ),
    )


@pytest.fixture
def normalizer(i18n_config: I18nConfig) -> LocaleRouteNormalizer:
    return LocaleRouteNormalizer(i18n_config)


@pytest.fixture
def domain_normalizer(domain_config: I18nConfig) -> LocaleRouteNormalizer:
    return LocaleRouteNormalizer(domain_config)


@pytest.fixture
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip LOCALEROUTE_* variables so the host env cannot leak in."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    for name in (
        "LOCALEROUTE_I18N",
        "LOCALEROUTE_I18N__LOCALES",
        "LOCALEROUTE_I18N__DEFAULT_LOCALE",
        "LOCALEROUTE_I18N__DOMAINS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def site_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, _isolated_env: None) -> Path:
    """A project directory with localeroute.toml, used as the CWD."""
    (tmp_path / CONFIG_FILENAME).write_text(SITE_TOML)
    monkeypatch.chdir(tmp_path)
    return tmp_path
