"""Subcommand modules for localeroute.

Provides register_commands() which uses deferred imports to keep
``localeroute --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from localeroute.commands.domain import domain
    from localeroute.commands.locales import locales
    from localeroute.commands.match import match
    from localeroute.commands.normalize import normalize

    cli.add_command(match)
    cli.add_command(normalize)
    cli.add_command(domain)
    cli.add_command(locales)
