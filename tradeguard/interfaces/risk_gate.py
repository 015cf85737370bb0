"""
Risk Gate Types.

Design principles:
- Inputs are plain value records supplied by the trading engine
- A halt is a successful result, not an error: returned as data
- Exactly one reason per evaluation (first breached limit wins)
- HaltReason.kind is the machine-readable discriminator; message is for operators

Flow:
    engine -> gate.evaluate(stats, balance_cents) -> None | HaltReason

"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, runtime_checkable


class HaltKind(Enum):
    """Which risk limit triggered the halt, in priority order."""
    BALANCE_FLOOR = "balance_floor"
    DAILY_LOSS = "daily_loss"
    CONSECUTIVE_LOSSES = "consecutive_losses"


@dataclass(frozen=True)
class Stats:
    """
    Rolling trading statistics, snapshotted by the engine per decision.

    Attributes
    ----------
    today_pnl_cents : int
        Profit/loss for the current trading day in cents (negative = loss)
    current_streak : int
        Consecutive outcomes: +N for N wins in a row, -N for N losses in a row

    Examples
    --------
    >>> Stats(today_pnl_cents=-1250, current_streak=-2)
    """

    today_pnl_cents: int = 0
    current_streak: int = 0


@dataclass(frozen=True)
class HaltReason:
    """
    Why trading must stop.

    Attributes
    ----------
    kind : HaltKind
        Which limit was breached
    message : str
        Human-readable description embedding the triggering values
    observed : int
        The value that tripped the limit (balance, P&L, or streak length)
    limit : int
        The configured limit that was breached
    """

    kind: HaltKind
    message: str
    observed: int
    limit: int

    def __str__(self) -> str:
        return self.message


@runtime_checkable
class RiskGate(Protocol):
    """
    Pre-trade gate consulted before every order.

    Implementations must be pure: no logging, no I/O, no mutation.
    """

    def evaluate(self, stats: Stats, balance_cents: int) -> Optional[HaltReason]:
        """Return None to proceed, or the reason trading must halt."""
        ...
