"""Pytest configuration.

The package lives under `src/`. This conftest ensures tests can import `bpmn_time` when running
`pytest` without installing the project.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure `import bpmn_time` works when running pytest without installing the package.
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_DIR))
