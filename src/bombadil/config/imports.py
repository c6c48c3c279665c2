"""Import resolution: load each ``[[import]]`` fragment and merge it.

INVARIANT: a bad import never aborts the load. Missing or malformed
fragments are logged, recorded as :class:`ImportFailure` and skipped;
the root settings keep every merge that did succeed.

Only the root's own import list is walked. Imports declared inside a
fragment are appended to ``settings.import_`` but not resolved in the
same pass.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel

from bombadil.config.discovery import load_imported_settings
from bombadil.config.errors import ConfigError
from bombadil.config.merge import merge

if TYPE_CHECKING:
    from bombadil.config.models import ImportPath, Settings

logger = logging.getLogger(__name__)


class ImportFailure(BaseModel):
    """An import that was skipped."""

    model_config = {"frozen": True}

    path: Path
    reason: Literal["missing", "invalid"]
    message: str


def resolve_import_path(import_path: ImportPath, dotfiles_root: Path) -> Path:
    """Anchor a relative import to the dotfiles root (never the cwd)."""
    if import_path.path.is_absolute():
        return import_path.path
    return dotfiles_root / import_path.path


def resolve_imports(settings: Settings, dotfiles_root: Path) -> list[ImportFailure]:
    """Merge every import of *settings* in list order, in place.

    Returns the imports that were skipped; an empty list means every
    fragment was merged.
    """
    failures: list[ImportFailure] = []
    # Snapshot: merged fragments append to settings.import_.
    paths = [resolve_import_path(entry, dotfiles_root) for entry in settings.import_]

    for path in paths:
        if not path.exists():
            msg = f"Unable to find bombadil import file: {path}"
            logger.error(msg)
            failures.append(ImportFailure(path=path, reason="missing", message=msg))
            continue

        try:
            fragment = load_imported_settings(path)
        except ConfigError as exc:
            msg = f"Error loading settings from: {path} {exc}"
            logger.error(msg)
            failures.append(ImportFailure(path=path, reason="invalid", message=msg))
            continue

        merge(settings, fragment)
        logger.debug("Merged import %s", path)

    return failures
