"""
Core interfaces for the risk gate.

Value records passed between the trading engine and the gate, plus the
protocol every gate implementation satisfies.
"""

from .risk_gate import (
    HaltKind,
    HaltReason,
    RiskGate,
    Stats,
)

__all__ = [
    'HaltKind',
    'HaltReason',
    'RiskGate',
    'Stats',
]
