"""Shared pytest fixtures and test helpers for bombadil tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from bombadil.config.paths import CONFIG_FILENAME


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    bombadil_logger = logging.getLogger("bombadil")
    bombadil_level = bombadil_logger.level
    diagnostics = logging.getLogger("bombadil.config.imports")
    diagnostic_handlers = diagnostics.handlers[:]
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    bombadil_logger.setLevel(bombadil_level)
    diagnostics.handlers = diagnostic_handlers


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from the real ``~/.config`` and ``BOMBADIL_*`` vars."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for var in ("CONFIG_DIR", "HOME", "JSON_OUTPUT", "VERBOSE", "LOG_JSON"):
        monkeypatch.delenv(f"BOMBADIL_{var}", raising=False)


@pytest.fixture
def dotfiles(tmp_path: Path) -> Path:
    """Empty dotfiles directory."""
    path = tmp_path / "dotfiles"
    path.mkdir()
    return path


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory standing in for ``$XDG_CONFIG_HOME``."""
    path = tmp_path / "config"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def write_root(config_dir: Path, dotfiles_dir: Path | str, extra: str = "") -> Path:
    """Write a root ``bombadil.toml`` pointing at *dotfiles_dir*."""
    path = config_dir / CONFIG_FILENAME
    path.write_text(f'dotfiles_dir = "{dotfiles_dir}"\n{extra}', encoding="utf-8")
    return path


DOT_FRAGMENT = """\
[settings.dots.sway]
source = "sway"
target = ".config/sway"
"""
