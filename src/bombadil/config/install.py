"""Link a dotfiles repository's ``bombadil.toml`` into the config directory."""

from __future__ import annotations

import logging
from pathlib import Path

from bombadil.config.errors import ConfigNotFoundError
from bombadil.config.paths import CONFIG_FILENAME, config_path, resolve_dotfiles_dir

logger = logging.getLogger(__name__)


def link_config(
    dotfiles_dir: Path,
    config_dir: Path | None = None,
    *,
    home: Path | None = None,
) -> Path:
    """Symlink ``<dotfiles_dir>/bombadil.toml`` to the root config path.

    An existing file or link at the destination is replaced, unless it
    already is the source file (config dir and dotfiles dir coincide).
    Returns the link path.
    """
    root = resolve_dotfiles_dir(dotfiles_dir, home)
    source = root / CONFIG_FILENAME
    if not source.is_file():
        raise ConfigNotFoundError(source)

    link = config_path(config_dir)
    if link.exists() and link.resolve() == source.resolve():
        logger.debug("%s already is %s, leaving it in place", link, source)
        return link

    link.parent.mkdir(parents=True, exist_ok=True)
    if link.is_symlink() or link.exists():
        logger.debug("Replacing existing config at %s", link)
        link.unlink()

    link.symlink_to(source.resolve())
    logger.debug("Linked %s -> %s", link, source)
    return link
