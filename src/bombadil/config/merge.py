"""Folding an imported fragment into the root settings.

Lists always grow (no deduplication); maps let the most recently merged
fragment win on key collision. ``dotfiles_dir`` and ``gpg_user_id`` are
never touched, fragments cannot carry them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bombadil.config.models import ImportedSettings, Settings


def merge(settings: Settings, fragment: ImportedSettings) -> None:
    """Merge *fragment* into *settings* in place.

    ========================  ==========================================
    ``settings.prehooks``     appended
    ``settings.posthooks``    appended
    ``settings.vars``         appended
    ``settings.dots``         key-wise union, fragment wins
    ``import``                appended (not resolved here)
    ``profiles``              key-wise union, whole profile replaced
    ========================  ==========================================
    """
    active = settings.settings
    active.prehooks.extend(fragment.settings.prehooks)
    active.posthooks.extend(fragment.settings.posthooks)
    active.vars.extend(fragment.settings.vars)
    active.dots.update(fragment.settings.dots)

    settings.import_.extend(fragment.import_)
    settings.profiles.update(fragment.profiles)
