"""Test configuration and fixtures."""

from datetime import datetime

import logfire
import pytest

# Keep telemetry local and quiet during tests
logfire.configure(send_to_logfire=False, console=False)

FIXED_NOW = datetime(2024, 1, 1, 10, 0, 0)


@pytest.fixture
def fixed_clock():
    """Clock that always reports FIXED_NOW."""
    return lambda: FIXED_NOW
