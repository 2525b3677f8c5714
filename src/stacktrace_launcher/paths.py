"""Script directory resolution and manifest path construction.

Every helper takes a ``pathmod`` (``posixpath`` or ``ntpath``, defaulting to
``os.path``) so the POSIX and Windows flavors behave identically on any host.
Nothing here touches the filesystem.
"""

from __future__ import annotations

import ntpath
import os
from types import ModuleType
from typing import Final

from .errors import PathResolutionError

MANIFEST_NAME: Final[str] = "Cargo.toml"


def _separators(pathmod: ModuleType) -> str:
    # ntpath accepts both separators; posixpath only "/"
    return pathmod.sep + (pathmod.altsep or "")


def strip_trailing_separator(path: str, *, pathmod: ModuleType = os.path) -> str:
    """Drop trailing separators, keeping a bare root (``/``, ``C:\\``) intact."""
    drive, rest = pathmod.splitdrive(path)
    stripped = rest.rstrip(_separators(pathmod))
    if not stripped and rest:
        stripped = pathmod.sep if pathmod is ntpath else rest[0]
    return drive + stripped


def resolve_script_dir(
    script_path: str | os.PathLike[str] | None,
    *,
    cwd: str | None = None,
    pathmod: ModuleType = os.path,
) -> str:
    """Return the absolute directory that contains ``script_path``.

    Args:
        script_path: Invocation path of the running script, usually ``__file__``.
        cwd: Base for a relative ``script_path``. Defaults to ``os.getcwd()``.
        pathmod: Path flavor used for joining and normalization.

    Returns:
        Normalized absolute directory with no trailing separator (roots excepted).

    Raises:
        PathResolutionError: If the invocation path is missing or has no directory.
    """
    raw = os.fspath(script_path) if script_path is not None else ""
    if not raw:
        raise PathResolutionError("Unable to determine the launcher's invocation path")

    if not pathmod.isabs(raw):
        raw = pathmod.join(cwd if cwd is not None else os.getcwd(), raw)

    directory = pathmod.dirname(pathmod.normpath(raw))
    if not directory:
        raise PathResolutionError(f"No directory component in invocation path {raw!r}")
    return strip_trailing_separator(directory, pathmod=pathmod)


def build_manifest_path(
    directory: str,
    manifest_name: str = MANIFEST_NAME,
    *,
    pathmod: ModuleType = os.path,
) -> str:
    """Join ``directory`` and ``manifest_name`` with exactly one separator."""
    if directory.endswith(tuple(_separators(pathmod))):
        return directory + manifest_name
    return directory + pathmod.sep + manifest_name
