"""Tests for loading a single config file."""

from pathlib import Path

import pytest

from bombadil.config.discovery import load_imported_settings, load_settings
from bombadil.config.errors import ConfigFormatError, ConfigNotFoundError
from bombadil.config.paths import CONFIG_FILENAME


class TestLoadSettings:
    def test_loads_from_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            'dotfiles_dir = "dotfiles"\n'
            'gpg_user_id = "me@example.org"\n'
            "[settings]\n"
            'prehooks = ["echo hi"]\n'
            "[[import]]\n"
            'path = "extra.toml"\n'
        )
        settings = load_settings(config_file)
        assert settings.dotfiles_dir == Path("dotfiles")
        assert settings.gpg_user_id == "me@example.org"
        assert settings.settings.prehooks == ["echo hi"]
        assert [i.path for i in settings.import_] == [Path("extra.toml")]

    def test_inline_import_array(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            'dotfiles_dir = "d"\nimport = [{ path = "a.toml" }, { path = "b.toml" }]\n'
        )
        settings = load_settings(config_file)
        assert [i.path for i in settings.import_] == [Path("a.toml"), Path("b.toml")]

    def test_missing_file(self, tmp_path: Path) -> None:
        missing = tmp_path / CONFIG_FILENAME
        with pytest.raises(ConfigNotFoundError) as exc_info:
            load_settings(missing)
        assert exc_info.value.path == missing
        assert str(missing) in str(exc_info.value)

    def test_unknown_key_is_format_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('dotfiles_dir = "d"\nunknown_key = true\n')
        with pytest.raises(ConfigFormatError) as exc_info:
            load_settings(config_file)
        assert "unknown_key" in exc_info.value.detail
        assert exc_info.value.code == "CONFIG_FORMAT_ERROR"

    def test_invalid_toml_is_format_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('dotfiles_dir = "unterminated\n')
        with pytest.raises(ConfigFormatError):
            load_settings(config_file)

    def test_missing_dotfiles_dir_is_format_error(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[settings]\n")
        with pytest.raises(ConfigFormatError, match="dotfiles_dir"):
            load_settings(config_file)

    def test_python_field_name_is_not_an_alias(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('dotfiles_dir = "d"\nimport_ = [{ path = "a.toml" }]\n')
        with pytest.raises(ConfigFormatError, match="import_"):
            load_settings(config_file)

    def test_unreadable_file_is_format_error(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('dotfiles_dir = "d"\n')

        def deny(self: Path, *args: object, **kwargs: object) -> str:
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", deny)
        with pytest.raises(ConfigFormatError, match="Permission denied") as exc_info:
            load_settings(config_file)
        assert exc_info.value.path == config_file


class TestLoadImportedSettings:
    def test_loads_fragment(self, tmp_path: Path) -> None:
        fragment_file = tmp_path / "import.toml"
        fragment_file.write_text(
            "[settings.dots.sway]\n"
            'source = "sway"\n'
            'target = ".config/sway"\n'
            "[profiles.work]\n"
            'extra_profiles = ["corp"]\n'
        )
        fragment = load_imported_settings(fragment_file)
        assert fragment.settings.dots["sway"].source == Path("sway")
        assert fragment.profiles["work"].extra_profiles == ["corp"]

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        fragment_file = tmp_path / "import.toml"
        fragment_file.write_text('dotfiles_dir = "/elsewhere"\ntypo_key = 1\n')
        fragment = load_imported_settings(fragment_file)
        assert fragment.settings.dots == {}

    def test_empty_fragment(self, tmp_path: Path) -> None:
        fragment_file = tmp_path / "import.toml"
        fragment_file.write_text("")
        fragment = load_imported_settings(fragment_file)
        assert fragment.import_ == []

    def test_missing_fragment(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigNotFoundError):
            load_imported_settings(tmp_path / "nope.toml")
