"""Exception types raised by the launcher."""

from __future__ import annotations


class LauncherError(Exception):
    """Base class for launcher failures."""


class PathResolutionError(LauncherError):
    """The launcher could not determine where its own script lives."""


class ConfigError(LauncherError):
    """launcher.yaml exists but cannot be used."""
