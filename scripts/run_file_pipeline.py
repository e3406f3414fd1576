#!/usr/bin/env python3
"""Run the sequential file pipeline for a root directory.

Reads files/starter.txt, deletes it, writes files/reply.txt, appends a marker,
renames it to files/newreply.txt and prints the final content.

Exit code behavior:
- Exits 0 on success.
- Exits 1 when any step fails; the filesystem is left as the completed steps left it.
- Exits 2 for CLI usage errors.
"""

from __future__ import annotations

import sys
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
root_str = str(ROOT_DIR)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from fileops.cli import main  # noqa: E402


if __name__ == "__main__":
    raise SystemExit(main())
