"""i18n configuration models.

Structural shape only: pydantic enforces field types, nothing else.
Duplicate locales, locales repeated across domains, or a default locale
missing from ``locales`` are accepted as-is.
"""

from __future__ import annotations

from pydantic import BaseModel


class DomainLocale(BaseModel):
    """A hostname bound to its own default locale and locale subset."""

    model_config = {"frozen": True}

    domain: str
    default_locale: str
    locales: tuple[str, ...] | None = None
    http: bool | None = None  # read by callers building URLs, never by matching


class I18nConfig(BaseModel):
    """[i18n] section: the locales a site is served in."""

    model_config = {"frozen": True}

    locales: tuple[str, ...] = ()
    default_locale: str = ""
    domains: tuple[DomainLocale, ...] | None = None
