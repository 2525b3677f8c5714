"""Launcher for the offline stack-trace resolver.

Resolves the directory holding the launcher script and runs
``cargo run --quiet --manifest-path <dir>/Cargo.toml``, exiting with the
tool's own exit code.

Quick Start:
    >>> from stacktrace_launcher import build_manifest_path, resolve_script_dir
    >>> build_manifest_path(resolve_script_dir("/opt/tool/run.sh"))
    '/opt/tool/Cargo.toml'
"""

from __future__ import annotations

from .config import LauncherConfig, load_config
from .errors import ConfigError, LauncherError, PathResolutionError
from .launcher import build_command, launch, main
from .paths import build_manifest_path, resolve_script_dir, strip_trailing_separator

__all__ = [
    "ConfigError",
    "LauncherConfig",
    "LauncherError",
    "PathResolutionError",
    "build_command",
    "build_manifest_path",
    "launch",
    "load_config",
    "main",
    "resolve_script_dir",
    "strip_trailing_separator",
]
