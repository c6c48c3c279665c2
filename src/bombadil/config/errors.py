"""Errors raised while locating and loading the bombadil configuration.

Every error carries a stable ``code`` which the CLI copies into
``ServiceError.code``.
"""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for fatal configuration errors."""

    code = "CONFIG_ERROR"


class ConfigDirNotFoundError(ConfigError):
    """No standard per-user configuration directory on this host."""

    code = "CONFIG_DIR_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("Unable to find `$XDG_CONFIG_HOME/bombadil.toml`")


class HomeNotFoundError(ConfigError):
    """The user's home directory cannot be resolved."""

    code = "HOME_NOT_FOUND"

    def __init__(self) -> None:
        super().__init__("$HOME directory not found")


class ConfigNotFoundError(ConfigError):
    code = "CONFIG_NOT_FOUND"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Unable to find bombadil config file {path}")


class ConfigFormatError(ConfigError):
    """The file exists but is not valid TOML or does not match the schema."""

    code = "CONFIG_FORMAT_ERROR"

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Config format error in {path}: {detail}")


class DotfilesDirMissingError(ConfigError):
    code = "DOTFILES_DIR_MISSING"

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Dotfiles directory {path} does not exist")
