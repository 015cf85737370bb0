"""Shared fixtures for tradeguard tests."""

import logging

import pytest
import structlog

from tradeguard.config_schemas import RiskLimits
from tradeguard.interfaces.risk_gate import Stats


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any structlog/stdlib configuration a test (e.g. the CLI) installs."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


@pytest.fixture
def limits():
    """Limits used by the reference scenarios."""
    return RiskLimits(
        min_balance_cents=10000,
        max_daily_loss_cents=1000,
        max_consecutive_losses=3,
    )


@pytest.fixture
def flat_stats():
    """No P&L, no streak."""
    return Stats(today_pnl_cents=0, current_streak=0)
