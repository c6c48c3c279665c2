"""Command group: inspect the loaded configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bombadil.commands._base import examples_option

if TYPE_CHECKING:
    from bombadil.commands._context import AppContext


@click.group()
@examples_option(
    "bombadil settings show",
    "bombadil --json settings show",
    "bombadil -c /tmp/config settings show",
    "bombadil settings path",
    "bombadil settings imports",
)
def settings() -> None:
    """Inspect bombadil.toml and its imports."""


@settings.command()
@click.pass_obj
def show(app: AppContext) -> None:
    """Load bombadil.toml, merge its imports and print the result."""
    from bombadil.services.settings import SettingsService

    app.emit(SettingsService(app.options).show())


@settings.command()
@click.pass_obj
def path(app: AppContext) -> None:
    """Print where bombadil.toml is looked up."""
    from bombadil.services.settings import SettingsService

    app.emit(SettingsService(app.options).path())


@settings.command()
@click.pass_obj
def imports(app: AppContext) -> None:
    """List imports resolved against the dotfiles directory."""
    from bombadil.services.settings import SettingsService

    app.emit(SettingsService(app.options).imports())
