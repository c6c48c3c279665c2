"""toml-bombadil — a dotfile manager."""

__version__ = "2.2.3"
