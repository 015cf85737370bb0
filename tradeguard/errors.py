"""
Exception taxonomy.

The gate itself never raises. These errors belong to the layers around it:
configuration loading (upstream) and enforcement (downstream).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tradeguard.interfaces.risk_gate import HaltReason


class TradeGuardError(Exception):
    """Base class for all tradeguard errors."""


class RiskConfigError(TradeGuardError, ValueError):
    """Raised when risk configuration is malformed or unreadable."""

    def __init__(self, message: str, source: str = "<dict>"):
        self.source = source
        super().__init__(f"[{source}] {message}")


class TradingHalted(TradeGuardError):
    """Raised by enforcement when the gate returns a halt reason."""

    def __init__(self, reason: "HaltReason"):
        self.reason = reason
        super().__init__(reason.message)
