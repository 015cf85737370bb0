"""
Risk management components.

Provides the account-level pre-trade gate and its enforcement helper.
"""

from .account_gate import AccountRiskGate, check, evaluate
from .enforcement import require_clearance

__all__ = [
    "AccountRiskGate",
    "check",
    "evaluate",
    "require_clearance",
]
