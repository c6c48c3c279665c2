"""Standard locations: the root config file and the dotfiles directory.

The root config lives at ``$XDG_CONFIG_HOME/bombadil.toml`` (``~/.config``
when the variable is unset). ``dotfiles_dir`` is taken as-is when absolute,
otherwise relative to ``$HOME``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from bombadil.config.errors import (
    ConfigDirNotFoundError,
    DotfilesDirMissingError,
    HomeNotFoundError,
)

if TYPE_CHECKING:
    from bombadil.config.models import Settings

CONFIG_FILENAME = "bombadil.toml"
XDG_CONFIG_ENV_VAR = "XDG_CONFIG_HOME"


def home_dir() -> Path:
    """Return the current user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeNotFoundError() from exc


def config_dir() -> Path:
    """Return the per-user configuration directory.

    A relative ``$XDG_CONFIG_HOME`` is invalid per the XDG spec and is
    ignored, like an unset one.
    """
    xdg = os.environ.get(XDG_CONFIG_ENV_VAR)
    if xdg and Path(xdg).is_absolute():
        return Path(xdg)
    try:
        return home_dir() / ".config"
    except HomeNotFoundError as exc:
        raise ConfigDirNotFoundError() from exc


def config_path(directory: Path | None = None) -> Path:
    """Return the root config path, under *directory* when given."""
    base = directory if directory is not None else config_dir()
    return base / CONFIG_FILENAME


def dotfiles_path(settings: Settings, home: Path | None = None) -> Path:
    """Resolve ``settings.dotfiles_dir`` to an existing directory.

    Home is only looked up when ``dotfiles_dir`` is relative. Raises
    :class:`DotfilesDirMissingError` if the result does not exist, which is
    the only existence check done before linking.
    """
    return resolve_dotfiles_dir(settings.dotfiles_dir, home)


def resolve_dotfiles_dir(path: Path, home: Path | None = None) -> Path:
    """Anchor a relative dotfiles *path* to home and check it exists."""
    if not path.is_absolute():
        path = (home if home is not None else home_dir()) / path
    if not path.exists():
        raise DotfilesDirMissingError(path)
    return path
