"""Pydantic models for ``bombadil.toml`` and its imported fragments.

The root file is strict: an unknown top-level key is a hard error.
Imported fragments share the same sections minus ``dotfiles_dir`` and
``gpg_user_id``, and silently ignore keys they don't know.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

# --- Dot entries (consumed by the symlink engine) ---


class Dot(BaseModel):
    """A managed dotfile: ``source`` in the dotfiles dir linked to ``target``."""

    model_config = {"extra": "ignore"}

    source: Path
    target: Path
    ignore: list[str] = Field(default_factory=list)
    vars: Path | None = None


class DotOverride(BaseModel):
    """Per-profile override of a :class:`Dot`, every field optional."""

    model_config = {"extra": "ignore"}

    source: Path | None = None
    target: Path | None = None
    ignore: list[str] | None = None
    vars: Path | None = None


# --- Profiles ---


class ActiveProfile(BaseModel):
    """[settings] section: the default, always-enabled profile."""

    dots: dict[str, Dot] = Field(default_factory=dict)
    prehooks: list[str] = Field(default_factory=list)
    posthooks: list[str] = Field(default_factory=list)
    vars: list[Path] = Field(default_factory=list)


class Profile(BaseModel):
    """[profiles.<name>] section: a named override layer.

    ``extra_profiles`` is carried as-is; activating the chain (and guarding
    against cycles) is up to the consumer.
    """

    dots: dict[str, DotOverride] = Field(default_factory=dict)
    extra_profiles: list[str] = Field(default_factory=list)
    prehooks: list[str] = Field(default_factory=list)
    posthooks: list[str] = Field(default_factory=list)
    vars: list[Path] = Field(default_factory=list)


class ImportPath(BaseModel):
    """[[import]] entry. Relative paths are anchored to the dotfiles dir."""

    path: Path


# --- Documents ---


class ImportedSettings(BaseModel):
    """An imported fragment: ``Settings`` without ``dotfiles_dir``/``gpg_user_id``."""

    model_config = {"extra": "ignore"}

    settings: ActiveProfile = Field(default_factory=ActiveProfile)
    profiles: dict[str, Profile] = Field(default_factory=dict)
    import_: list[ImportPath] = Field(default_factory=list, alias="import")


class Settings(BaseModel):
    """Root configuration parsed from ``$XDG_CONFIG_HOME/bombadil.toml``.

    Attributes:
        dotfiles_dir: Dotfiles directory, absolute or relative to ``$HOME``.
        gpg_user_id: Identity used for secret vars, opaque here.
        settings: The active profile.
        profiles: Named profiles by name.
        import_: Fragments to merge, in order (``import`` in TOML).
    """

    model_config = {"extra": "forbid"}

    dotfiles_dir: Path
    gpg_user_id: str | None = None
    settings: ActiveProfile = Field(default_factory=ActiveProfile)
    profiles: dict[str, Profile] = Field(default_factory=dict)
    import_: list[ImportPath] = Field(default_factory=list, alias="import")
