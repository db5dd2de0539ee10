"""Pytest configuration and fixtures for Operable tests."""

from __future__ import annotations

import sys
from pathlib import Path

# The tests import operable from the checkout and the shared hosts from
# tests/samples.py; put the checkout first so a stale installed copy of
# operable never shadows the sources under test
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
