"""Subcommand modules for bombadil.

Provides register_commands() which uses deferred imports to keep
``bombadil --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register command groups and standalone commands on the root CLI group."""
    from bombadil.commands.install import install
    from bombadil.commands.settings import settings

    cli.add_command(settings)
    cli.add_command(install)
