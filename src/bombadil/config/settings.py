"""Entry point: load the fully merged bombadil settings.

Order of operations:
  1. Locate ``bombadil.toml`` (explicit *config_dir*, else XDG).
  2. Parse it with the strict root schema.
  3. Resolve the dotfiles directory from the parsed ``dotfiles_dir``.
  4. Merge the root's imports, in order, skipping bad ones.

Steps 1-3 are fatal on failure; step 4 never is.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from bombadil.config.discovery import load_settings
from bombadil.config.imports import ImportFailure, resolve_imports
from bombadil.config.models import Settings
from bombadil.config.paths import config_path, dotfiles_path

logger = logging.getLogger(__name__)


class LoadedSettings(BaseModel):
    """Merged settings plus where they came from.

    Attributes:
        settings: Root settings with every successful import merged in.
        config_path: The root ``bombadil.toml`` that was read.
        dotfiles_root: Resolved, existing dotfiles directory.
        import_failures: Imports that were skipped, in list order.
    """

    model_config = {"frozen": True}

    settings: Settings
    config_path: Path
    dotfiles_root: Path
    import_failures: list[ImportFailure] = Field(default_factory=list)


def get_settings(config_dir: Path | None = None, *, home: Path | None = None) -> LoadedSettings:
    """Load and merge bombadil settings.

    Args:
        config_dir: Directory holding ``bombadil.toml``. Defaults to the
            XDG config directory.
        home: Directory relative ``dotfiles_dir`` values are anchored to.
            Defaults to the user's home.

    Raises:
        ConfigError: A root-level failure (config dir, home, root file,
            format, or missing dotfiles dir).
    """
    path = config_path(config_dir)
    settings = load_settings(path)
    root = dotfiles_path(settings, home)
    logger.debug("Dotfiles root resolved to %s", root)

    failures = resolve_imports(settings, root)
    if failures:
        logger.debug("%d of %d imports skipped", len(failures), len(settings.import_))

    return LoadedSettings(
        settings=settings,
        config_path=path,
        dotfiles_root=root,
        import_failures=failures,
    )
