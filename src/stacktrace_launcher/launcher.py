"""Run the stack-trace resolver through its build tool.

The launcher resolves its own directory, points the tool at the manifest in
that directory and hands the terminal over to the child. The child's exit
status is returned untouched; the only translations are the two a POSIX shell
applies itself (127 for a missing command, 128+N for death by signal N).
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from typing import Final, Sequence

from .config import LauncherConfig, load_config
from .paths import build_manifest_path, resolve_script_dir

COMMAND_NOT_FOUND: Final[int] = 127
SIGNAL_EXIT_BASE: Final[int] = 128

logger: Final[logging.Logger] = logging.getLogger(__name__)


def build_command(manifest_path: str, config: LauncherConfig | None = None) -> list[str]:
    """Return the argv for the tool, e.g. ``cargo run --quiet --manifest-path <path>``."""
    cfg = config or LauncherConfig()
    return [
        cfg.tool,
        *cfg.tool_args,
        cfg.quiet_flag,
        cfg.manifest_flag,
        manifest_path,
    ]


def launch(command: Sequence[str]) -> int:
    """Run ``command`` once with inherited stdio and return its exit code."""
    executable = shutil.which(command[0])
    if executable is None:
        logger.error("%s: command not found", command[0])
        return COMMAND_NOT_FOUND

    logger.debug("→ %s", " ".join(command))
    completed = subprocess.run([executable, *command[1:]], check=False)
    if completed.returncode < 0:
        return SIGNAL_EXIT_BASE - completed.returncode
    return completed.returncode


def main(script_path: str | None = None) -> int:
    """Resolve the manifest beside ``script_path`` and run the tool against it."""
    script_dir = resolve_script_dir(script_path if script_path is not None else sys.argv[0])
    config = load_config(script_dir)
    logging.basicConfig(level=config.log_level, format="%(name)s: %(message)s")

    manifest_path = build_manifest_path(script_dir, config.manifest_name)
    logger.debug("Script directory: %s", script_dir)
    logger.debug("Settings: %s", config)
    logger.debug("Manifest: %s", manifest_path)
    return launch(build_command(manifest_path, config))
