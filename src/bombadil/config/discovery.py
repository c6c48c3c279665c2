"""Config file loading.

Parses a single TOML file into :class:`Settings` (the strict root schema) or
:class:`ImportedSettings` (the lenient fragment schema).
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from bombadil.config.errors import ConfigFormatError, ConfigNotFoundError
from bombadil.config.models import ImportedSettings, Settings

logger = logging.getLogger(__name__)

_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _load(path: Path, model: type[_ModelT]) -> _ModelT:
    if not path.is_file():
        raise ConfigNotFoundError(path)

    logger.debug("Loading %s from %s", model.__name__, path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigFormatError(path, f"unable to read file: {exc}") from exc

    try:
        data: dict[str, Any] = tomllib.loads(raw)
        return model.model_validate(data)
    except (tomllib.TOMLDecodeError, ValidationError) as exc:
        raise ConfigFormatError(path, str(exc)) from exc


def load_settings(path: Path) -> Settings:
    """Load the root ``bombadil.toml``. Unknown top-level keys are rejected."""
    return _load(path, Settings)


def load_imported_settings(path: Path) -> ImportedSettings:
    """Load an imported fragment. Unknown keys are ignored."""
    return _load(path, ImportedSettings)
