"""Pytest configuration ensuring project root is importable.

Adds repository root to sys.path explicitly to avoid interpreter/path quirks.
"""
from __future__ import annotations

import sys
from pathlib import Path
import pytest


@pytest.fixture(autouse=True)
def _isolate_metrics():  # noqa: D401
    """Ensure metric counters do not leak between tests."""
    from memory_client import metrics  # local import

    metrics.reset_for_tests()
    try:
        yield
    finally:
        metrics.reset_for_tests()


ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
