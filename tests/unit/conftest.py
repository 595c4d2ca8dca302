"""Unit test shared fixtures.

Fixtures here are available to all unit tests but not integration tests.
"""

from __future__ import annotations

import pytest


# =============================================================================
# Automatic Markers
# =============================================================================

def pytest_collection_modifyitems(items):
    """Automatically mark all tests in unit/ directory with @pytest.mark.unit."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
