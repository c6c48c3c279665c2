"""Configuration loading: root settings, dotfiles root and imports."""
