"""Tests for the i18n configuration models."""

import pytest
from pydantic import ValidationError

from localeroute.domain.i18n import DomainLocale, I18nConfig


class TestI18nConfig:
    def test_defaults(self) -> None:
        config = I18nConfig()
        assert config.locales == ()
        assert config.default_locale == ""
        assert config.domains is None

    def test_lists_become_tuples(self) -> None:
        config = I18nConfig.model_validate(
            {
                "locales": ["en-US", "fr"],
                "default_locale": "en-US",
                "domains": [{"domain": "example.fr", "default_locale": "fr", "locales": ["fr"]}],
            }
        )
        assert config.locales == ("en-US", "fr")
        assert config.domains is not None
        assert config.domains[0] == DomainLocale(
            domain="example.fr", default_locale="fr", locales=("fr",)
        )

    def test_frozen(self) -> None:
        config = I18nConfig(locales=("en",), default_locale="en")
        with pytest.raises(ValidationError):
            config.default_locale = "fr"  # type: ignore[misc]

    def test_no_semantic_validation(self) -> None:
        """Duplicates and an unlisted default locale are accepted as given."""
        config = I18nConfig(
            locales=("en", "EN", "fr"),
            default_locale="de",
            domains=(
                DomainLocale(domain="a.example", default_locale="fr", locales=("fr",)),
                DomainLocale(domain="b.example", default_locale="fr", locales=("fr",)),
            ),
        )
        assert config.locales == ("en", "EN", "fr")
        assert config.default_locale == "de"

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            I18nConfig.model_validate({"locales": "en-US"})


class TestDomainLocale:
    def test_optional_fields(self) -> None:
        domain = DomainLocale(domain="example.com:3000", default_locale="en")
        assert domain.locales is None
        assert domain.http is None

    def test_requires_domain_and_default(self) -> None:
        with pytest.raises(ValidationError):
            DomainLocale.model_validate({"domain": "example.com"})
