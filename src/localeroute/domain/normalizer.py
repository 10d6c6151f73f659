"""Locale route matching — detect the locale of a pathname and strip it.

Pure functions over an immutable :class:`I18nConfig`. Lower-cased lookup
tables are built once at construction and stay index-aligned with the
configured values, so a case-insensitive hit maps straight back to the
canonical spelling.

INVARIANT: nothing is mutated after ``__init__``; one instance may be
shared by any number of threads.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from localeroute.domain.i18n import DomainLocale, I18nConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class Normalizer(Protocol):
    """Anything that rewrites a pathname into its canonical route form."""

    def normalize(self, pathname: str) -> str: ...


@dataclass(frozen=True)
class LocaleMatch:
    """The pathname without its locale prefix, and the locale chosen."""

    pathname: str
    detected_locale: str | None = None


@dataclass(frozen=True)
class HostnameFallback:
    """Fall back to the locale inferred from *hostname*.

    *default_locale* is carried for callers that have one at hand, but the
    hostname-derived locale always wins when this variant is chosen.
    """

    hostname: str
    default_locale: str | None = None


@dataclass(frozen=True)
class DefaultLocaleFallback:
    """Fall back to *default_locale* verbatim (``None`` allowed)."""

    default_locale: str | None = None


MatchOptions = HostnameFallback | DefaultLocaleFallback


def match_options(
    hostname: str | None = None,
    default_locale: str | None = None,
) -> MatchOptions:
    """Pick the fallback variant for loose inputs.

    A hostname (even an empty one) selects :class:`HostnameFallback`.

    Examples:
        >>> match_options(hostname="example.fr")
        HostnameFallback(hostname='example.fr', default_locale=None)
        >>> match_options(default_locale="en-US")
        DefaultLocaleFallback(default_locale='en-US')
    """
    if hostname is not None:
        return HostnameFallback(hostname=hostname, default_locale=default_locale)
    return DefaultLocaleFallback(default_locale=default_locale)


@dataclass(frozen=True)
class _LowerCaseDomain:
    domain: str
    hostname: str  # domain without ``:port``
    default_locale: str
    locales: tuple[str, ...] | None
    http: bool | None


def _fold_domain(domain_locale: DomainLocale) -> _LowerCaseDomain:
    domain = domain_locale.domain.lower()
    locales = domain_locale.locales
    return _LowerCaseDomain(
        domain=domain,
        hostname=domain.split(":")[0],
        default_locale=domain_locale.default_locale.lower(),
        locales=tuple(locale.lower() for locale in locales) if locales is not None else None,
        http=domain_locale.http,
    )


class LocaleRouteNormalizer:
    """Match locale aware routes.

    Detects the locale from the pathname and hostname, and normalizes the
    pathname by removing the locale prefix.

    Usage::

        normalizer = LocaleRouteNormalizer(config)
        normalizer.match("/FR/about", DefaultLocaleFallback())
        # LocaleMatch(pathname='/about', detected_locale='fr')
    """

    def __init__(self, config: I18nConfig) -> None:
        self.config = config
        self.lower_case_locales: tuple[str, ...] = tuple(
            locale.lower() for locale in config.locales
        )
        self.lower_case_domains: tuple[_LowerCaseDomain, ...] | None = (
            tuple(_fold_domain(d) for d in config.domains) if config.domains is not None else None
        )
        logger.debug(
            "Built locale tables: %d locales, %d domains",
            len(self.lower_case_locales),
            len(self.lower_case_domains or ()),
        )

    def detect_domain_locale(
        self,
        hostname: str | None = None,
        detected_locale: str | None = None,
    ) -> DomainLocale | None:
        """Find the domain entry for *hostname* or *detected_locale*.

        *hostname* must already be lower-cased. The first entry in
        configured order wins; the configured (original-case) entry is
        returned.

        An entry matches when its hostname equals *hostname*, when its own
        default locale equals *hostname*, or when *detected_locale* is in
        its locale subset.
        """
        if not hostname or self.lower_case_domains is None or self.config.domains is None:
            return None

        if detected_locale:
            detected_locale = detected_locale.lower()

        for index, domain_locale in enumerate(self.lower_case_domains):
            if (
                domain_locale.hostname == hostname
                # Compared against the hostname argument, not a locale.
                or domain_locale.default_locale == hostname
                # Locales are assumed not to repeat across domains.
                or (
                    detected_locale is not None
                    and domain_locale.locales is not None
                    and detected_locale in domain_locale.locales
                )
            ):
                return self.config.domains[index]

        return None

    def infer_default_locale(self, hostname: str | None = None) -> str:
        """Default locale for *hostname*, else the configured default."""
        if not hostname:
            return self.config.default_locale

        domain_locale = self.detect_domain_locale(hostname)
        if domain_locale is None:
            return self.config.default_locale

        return domain_locale.default_locale

    def match(self, pathname: str, options: MatchOptions) -> LocaleMatch:
        """Split a leading locale segment off *pathname*.

        Args:
            pathname: Request path, expected to start with ``/``.
            options: Where the locale comes from when the path has none.

        Returns:
            The pathname without ``/<locale>`` (``/`` if nothing remains)
            and the canonical-case locale; or the untouched pathname and
            the fallback locale when no segment matches.
        """
        if isinstance(options, HostnameFallback):
            detected_locale = self.infer_default_locale(options.hostname)
        else:
            detected_locale = options.default_locale

        if not self.config.locales:
            return LocaleMatch(pathname=pathname, detected_locale=detected_locale)

        # Index 0 is the empty string before the leading "/".
        segments = pathname.split("/")
        if len(segments) < 2 or not segments[1]:
            return LocaleMatch(pathname=pathname, detected_locale=detected_locale)

        segment = segments[1].lower()
        try:
            index = self.lower_case_locales.index(segment)
        except ValueError:
            return LocaleMatch(pathname=pathname, detected_locale=detected_locale)

        detected_locale = self.config.locales[index]
        pathname = pathname[len(detected_locale) + 1 :] or "/"

        return LocaleMatch(pathname=pathname, detected_locale=detected_locale)

    def normalize(self, pathname: str) -> str:
        """Return *pathname* without its locale prefix (if any)."""
        return self.match(pathname, DefaultLocaleFallback()).pathname
