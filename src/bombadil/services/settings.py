"""SettingsService — load, inspect and install the bombadil configuration.

Converts :class:`ConfigError` into failed :class:`ServiceResult` values so
the CLI only has to emit them. Skipped imports become warnings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bombadil.config.discovery import load_settings
from bombadil.config.errors import ConfigError
from bombadil.config.imports import resolve_import_path
from bombadil.config.install import link_config
from bombadil.config.paths import config_path, dotfiles_path
from bombadil.config.settings import get_settings
from bombadil.services.result import ServiceResult

if TYPE_CHECKING:
    from bombadil.config.options import CliOptions

logger = logging.getLogger(__name__)


class SettingsService:
    """Operations on the root config and its imports.

    Usage::

        svc = SettingsService(options)
        result = svc.show()
    """

    def __init__(self, options: CliOptions) -> None:
        self._options = options

    def show(self) -> ServiceResult:
        """Load and merge settings, returning them in TOML shape."""
        op = "show_settings"
        try:
            loaded = get_settings(self._options.config_dir, home=self._options.home)
        except ConfigError as exc:
            return ServiceResult.failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "config_path": str(loaded.config_path),
                "dotfiles_root": str(loaded.dotfiles_root),
                "settings": loaded.settings.model_dump(
                    mode="json", by_alias=True, exclude_none=True
                ),
            },
            warnings=[failure.message for failure in loaded.import_failures],
        )

    def path(self) -> ServiceResult:
        """Report where the root config is expected and whether it exists."""
        op = "config_path"
        try:
            path = config_path(self._options.config_dir)
        except ConfigError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"path": str(path), "exists": path.is_file()})

    def imports(self) -> ServiceResult:
        """List the root's imports as resolved paths, without merging them."""
        op = "list_imports"
        try:
            settings = load_settings(config_path(self._options.config_dir))
            root = dotfiles_path(settings, self._options.home)
        except ConfigError as exc:
            return ServiceResult.failure(op, exc)

        items: list[dict[str, Any]] = []
        for entry in settings.import_:
            resolved = resolve_import_path(entry, root)
            items.append(
                {
                    "path": str(entry.path),
                    "resolved": str(resolved),
                    "exists": resolved.is_file(),
                }
            )
        return ServiceResult(ok=True, op=op, data={"items": items, "count": len(items)})

    def install(self, dotfiles_dir: Path) -> ServiceResult:
        """Link ``<dotfiles_dir>/bombadil.toml`` into the config directory."""
        op = "install"
        try:
            link = link_config(dotfiles_dir, self._options.config_dir, home=self._options.home)
        except ConfigError as exc:
            return ServiceResult.failure(op, exc)

        logger.debug("Installed config link %s", link)
        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(link), "target": str(link.resolve())},
        )
