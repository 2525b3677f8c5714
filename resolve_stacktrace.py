#!/usr/bin/env python3
"""Run the stack-trace resolver using the Cargo.toml that sits beside this file.

Takes no arguments; the exit code is the exit code of ``cargo run``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
_SRC = Path(__file__).resolve().parent / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from stacktrace_launcher.launcher import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main(__file__))
