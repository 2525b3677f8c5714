"""Pytest configuration for stacktrace_launcher tests."""

from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = REPO_ROOT / "src"

if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from stacktrace_launcher.config import load_config  # noqa: E402


def skip_posix_only(items, os_name: str = os.name) -> None:
    """Mark ``posix_only`` items as skipped when running on Windows."""
    if os_name != "nt":
        return
    skip = pytest.mark.skip(reason="needs a POSIX shell")
    for item in items:
        if item.get_closest_marker("posix_only") is not None:
            item.add_marker(skip)


def pytest_collection_modifyitems(config, items):  # pragma: no cover - pytest hook
    skip_posix_only(items)


@pytest.fixture(autouse=True)
def _clear_config_cache():
    load_config.cache_clear()
    yield
    load_config.cache_clear()


@pytest.fixture
def fake_cargo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Put a ``cargo`` shell script first on PATH.

    The script records its arguments (one per line) to ``cargo-args.txt`` and
    exits with the code stored in ``cargo-exit.txt`` (default 0).
    """
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    args_file = tmp_path / "cargo-args.txt"
    exit_file = tmp_path / "cargo-exit.txt"
    exit_file.write_text("0", encoding="utf-8")

    script = bin_dir / "cargo"
    script.write_text(
        "#!/bin/sh\n"
        f': > "{args_file}"\n'
        'for arg in "$@"; do\n'
        f'  printf "%s\\n" "$arg" >> "{args_file}"\n'
        "done\n"
        f'exit "$(cat "{exit_file}")"\n',
        encoding="utf-8",
    )
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    monkeypatch.setenv("PATH", f"{bin_dir}{os.pathsep}{os.environ.get('PATH', '')}")

    class FakeCargo:
        path = script

        @staticmethod
        def set_exit(code: int) -> None:
            exit_file.write_text(str(code), encoding="utf-8")

        @staticmethod
        def recorded_args() -> list[str]:
            return args_file.read_text(encoding="utf-8").splitlines()

    return FakeCargo
