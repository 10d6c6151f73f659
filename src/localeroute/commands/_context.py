"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the locale service lazily and owns result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from localeroute.config.logging import configure_logging
from localeroute.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from localeroute.config.settings import LocaleRouteSettings
    from localeroute.services.locale import LocaleService
    from localeroute.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service (and with it the normalizer's lookup tables) is built on
    first use, so ``--help`` and ``--examples`` never touch the config.
    """

    def __init__(self, settings: LocaleRouteSettings) -> None:
        self.settings = settings
        self._service: LocaleService | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> LocaleService:
        """The locale service for the loaded ``[i18n]`` config."""
        if self._service is None:
            from localeroute.services.locale import LocaleService

            self._service = LocaleService(
                self.settings.i18n, config_path=self.settings.config_path
            )
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout. Warnings go to stderr so piped output stays clean.
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON output already carries its warnings.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
