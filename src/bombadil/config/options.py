"""CLI options — flags and ``BOMBADIL_*`` env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``BOMBADIL_*`` prefix
  3. Code defaults

These only steer the command line; the settings themselves always come
from ``bombadil.toml`` via :func:`bombadil.config.settings.get_settings`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic_settings import BaseSettings


class CliOptions(BaseSettings):
    """Options for one ``bombadil`` invocation, frozen after construction.

    Attributes:
        config_dir: Directory holding ``bombadil.toml``; None means XDG.
        home: Anchor for relative ``dotfiles_dir``; None means ``$HOME``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "BOMBADIL_",
    }

    config_dir: Path | None = None
    home: Path | None = None

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> CliOptions:
        """Build options from CLI flags.

        Unset options (None) and flags left off (False) fall back to the
        environment, so a flag can only switch something on.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v not in (None, False)})
