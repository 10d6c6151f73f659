"""Command: detect the locale of a pathname and strip its prefix."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from localeroute.commands._base import LocaleCommand

if TYPE_CHECKING:
    from localeroute.commands._context import AppContext


@click.command(
    cls=LocaleCommand,
    examples="""\
  localeroute match /fr/about
  localeroute match /about --default-locale en-US
  localeroute match /about --hostname example.fr
  localeroute --json match /NL-nl/blog/post""",
)
@click.argument("pathname")
@click.option(
    "--hostname",
    default=None,
    help="Request hostname; its domain default locale is the fallback.",
)
@click.option(
    "--default-locale",
    default=None,
    help="Fallback locale when the path has none (ignored with --hostname).",
)
@click.pass_obj
def match(
    app: AppContext,
    pathname: str,
    hostname: str | None,
    default_locale: str | None,
) -> None:
    """Detect the locale in PATHNAME and print the pathname without it."""
    app.emit(app.service.match(pathname, hostname=hostname, default_locale=default_locale))
