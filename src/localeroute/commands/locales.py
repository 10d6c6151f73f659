"""Command: list configured locales and domains."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from localeroute.commands._base import LocaleCommand

if TYPE_CHECKING:
    from localeroute.commands._context import AppContext


@click.command(
    cls=LocaleCommand,
    examples="""\
  localeroute locales
  localeroute --json locales
  localeroute -c site/localeroute.toml locales""",
)
@click.pass_obj
def locales(app: AppContext) -> None:
    """List the configured locales and domain bindings."""
    app.emit(app.service.list_locales())
