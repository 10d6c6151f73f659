"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``LOCALEROUTE_*`` prefix, ``__`` for nesting
                    (``LOCALEROUTE_I18N__DEFAULT_LOCALE=fr``)
  3. TOML file    — ``localeroute.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from localeroute.config.discovery import find_config
from localeroute.domain.i18n import I18nConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``localeroute.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Pydantic builds sources from a classmethod, so the path travels thread-locally.
_tls = threading.local()


class LocaleRouteSettings(BaseSettings):
    """Everything a localeroute invocation needs, frozen.

    Attributes:
        project_root: Directory holding ``localeroute.toml`` (or CWD).
        config_path: The TOML file actually read, or None.
        i18n: Locale configuration handed to the normalizer.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "LOCALEROUTE_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    i18n: I18nConfig = Field(default_factory=I18nConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> LocaleRouteSettings:
        """Construct settings from a CLI invocation.

        An explicit *config_path* that does not exist is an error; without
        one, ``localeroute.toml`` is discovered by walking up from
        *project_root* (or CWD).
        """
        toml_path: Path | None = None
        if config_path:
            toml_path = Path(config_path)
            if not toml_path.is_file():
                raise click.ClickException(f"Config file not found: {config_path}")
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None
