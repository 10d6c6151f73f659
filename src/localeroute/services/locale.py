"""LocaleService — locale route operations for the CLI.

Wraps one :class:`LocaleRouteNormalizer` and turns its plain return values
into :class:`ServiceResult` payloads. Hostnames are lower-cased here, at
the boundary, because the normalizer expects them already folded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from localeroute.domain.i18n import DomainLocale, I18nConfig
from localeroute.domain.normalizer import LocaleRouteNormalizer, match_options
from localeroute.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def _domain_payload(domain_locale: DomainLocale) -> dict[str, Any]:
    return domain_locale.model_dump(mode="json", exclude_none=True)


def _pathname_warning(pathname: str) -> str | None:
    if pathname.startswith("/"):
        return None
    return f"Pathname {pathname!r} does not start with '/'; no locale prefix can be detected"


class LocaleService:
    """Locale detection and pathname normalization over one config.

    The normalizer is built once here and reused by every call. Every
    result carries ``meta`` describing the config it was computed against.
    """

    def __init__(self, config: I18nConfig, *, config_path: Path | None = None) -> None:
        self._normalizer = LocaleRouteNormalizer(config)
        self._meta: dict[str, Any] = {
            "config_path": str(config_path) if config_path else None,
            "locales": len(config.locales),
            "domains": len(config.domains or ()),
        }

    @property
    def normalizer(self) -> LocaleRouteNormalizer:
        return self._normalizer

    def match(
        self,
        pathname: str,
        *,
        hostname: str | None = None,
        default_locale: str | None = None,
    ) -> ServiceResult:
        """Detect the locale of *pathname* and strip its prefix."""
        if hostname is not None:
            hostname = hostname.lower()
        options = match_options(hostname=hostname, default_locale=default_locale)
        result = self._normalizer.match(pathname, options)
        logger.debug(
            "match %s -> %s (locale=%s)", pathname, result.pathname, result.detected_locale
        )

        warnings: list[str] = []
        if warning := _pathname_warning(pathname):
            warnings.append(warning)

        return ServiceResult(
            ok=True,
            op="match",
            data={
                "input": pathname,
                "pathname": result.pathname,
                "detected_locale": result.detected_locale,
                "stripped": result.pathname != pathname,
            },
            warnings=warnings,
            meta=self._meta,
        )

    def normalize(self, pathnames: Iterable[str]) -> ServiceResult:
        """Strip the locale prefix from each of *pathnames*."""
        items: list[dict[str, Any]] = []
        warnings: list[str] = []
        for pathname in pathnames:
            normalized = self._normalizer.normalize(pathname)
            items.append({"input": pathname, "pathname": normalized})
            if warning := _pathname_warning(pathname):
                warnings.append(warning)

        logger.debug("normalized %d pathnames", len(items))
        return ServiceResult(
            ok=True,
            op="normalize",
            data={"items": items, "count": len(items)},
            warnings=warnings,
            meta=self._meta,
        )

    def detect_domain(self, hostname: str, *, locale: str | None = None) -> ServiceResult:
        """Resolve the domain entry for *hostname* (or *locale*)."""
        op = "detect_domain"
        folded = hostname.lower()
        domain_locale = self._normalizer.detect_domain_locale(folded, locale)
        if domain_locale is None:
            if not self._normalizer.config.domains:
                message = "No domains are configured"
            else:
                message = f"No domain matches hostname {hostname!r}"
                if locale:
                    message += f" or locale {locale!r}"
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NO_DOMAIN_MATCH",
                    message=message,
                    detail={"hostname": folded, "locale": locale},
                ),
                meta=self._meta,
            )

        logger.debug("hostname %s resolved to domain %s", folded, domain_locale.domain)
        return ServiceResult(ok=True, op=op, data=_domain_payload(domain_locale), meta=self._meta)

    def list_locales(self) -> ServiceResult:
        """Describe the configured locales and domains."""
        config = self._normalizer.config
        items = [
            {"locale": locale, "default": locale == config.default_locale}
            for locale in config.locales
        ]
        domains = [_domain_payload(d) for d in config.domains or ()]

        warnings: list[str] = []
        if not items:
            warnings.append("No locales configured; pathnames are never rewritten")

        return ServiceResult(
            ok=True,
            op="list_locales",
            data={
                "default_locale": config.default_locale,
                "items": items,
                "domains": domains,
            },
            warnings=warnings,
            meta=self._meta,
        )
