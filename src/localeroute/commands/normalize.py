"""Command: strip locale prefixes from pathnames."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from localeroute.commands._base import LocaleCommand

if TYPE_CHECKING:
    from localeroute.commands._context import AppContext


@click.command(
    cls=LocaleCommand,
    examples="""\
  localeroute normalize /fr/about
  localeroute normalize /en-US/ /nl-NL/docs /about
  localeroute -q normalize /fr/a /fr/b""",
)
@click.argument("pathnames", nargs=-1, required=True)
@click.pass_obj
def normalize(app: AppContext, pathnames: tuple[str, ...]) -> None:
    """Print each of PATHNAMES without its locale prefix."""
    app.emit(app.service.normalize(pathnames))
