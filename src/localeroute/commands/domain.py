"""Command: resolve the domain locale entry for a hostname."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from localeroute.commands._base import LocaleCommand

if TYPE_CHECKING:
    from localeroute.commands._context import AppContext


@click.command(
    cls=LocaleCommand,
    examples="""\
  localeroute domain example.fr
  localeroute domain shop.example.com --locale nl-NL""",
)
@click.argument("hostname")
@click.option("--locale", default=None, help="Also match domains serving this locale.")
@click.pass_obj
def domain(app: AppContext, hostname: str, locale: str | None) -> None:
    """Show the domain configuration that serves HOSTNAME."""
    app.emit(app.service.detect_domain(hostname, locale=locale))
