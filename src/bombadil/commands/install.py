"""Command: link a dotfiles repository's bombadil.toml into place."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from bombadil.commands._base import examples_option

if TYPE_CHECKING:
    from bombadil.commands._context import AppContext


@click.command()
@examples_option(
    "bombadil install ~/dotfiles",
    "bombadil install dotfiles",
    "bombadil -c /tmp/config install ~/dotfiles",
)
@click.argument("dotfiles_dir", type=click.Path(path_type=Path))
@click.pass_obj
def install(app: AppContext, dotfiles_dir: Path) -> None:
    """Symlink DOTFILES_DIR/bombadil.toml into the config directory.

    A relative DOTFILES_DIR is taken relative to your home directory.
    Nothing is touched when the config directory is DOTFILES_DIR itself.
    """
    from bombadil.services.settings import SettingsService

    app.emit(SettingsService(app.options).install(dotfiles_dir))
