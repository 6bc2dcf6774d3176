"""Tests package"""

# Lets ``python -m pytest tests/test_loader.py`` and ``data/data_generator.py``
# imports resolve from the repository root.
from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
