"""Shared pytest fixtures."""

import pytest

from app.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    """Start every test with empty rate-limit counters."""
    limiter.reset()
