"""
Caller-side enforcement of gate decisions.

For engines that prefer exceptions over checking an optional result:
evaluates the gate, logs any halt, and raises TradingHalted.
"""

from typing import Optional

import structlog

from tradeguard.errors import TradingHalted
from tradeguard.interfaces.risk_gate import RiskGate, Stats
from tradeguard.logging_config import get_logger


def require_clearance(
    gate: RiskGate,
    stats: Stats,
    balance_cents: int,
    logger: Optional[structlog.stdlib.BoundLogger] = None,
) -> None:
    """
    Ensure trading may proceed before placing an order.

    Parameters
    ----------
    gate : RiskGate
        Gate to consult
    stats : Stats
        Current trading statistics
    balance_cents : int
        Current account balance in cents
    logger : BoundLogger, optional
        Logger for the halt event (defaults to this module's logger)

    Raises
    ------
    TradingHalted
        If the gate returns a halt reason
    """
    reason = gate.evaluate(stats, balance_cents)
    if reason is None:
        return None

    log = logger if logger is not None else get_logger(__name__)
    log.warning(
        "trading_halted",
        kind=reason.kind.value,
        reason=reason.message,
        observed=reason.observed,
        limit=reason.limit,
    )
    raise TradingHalted(reason)
