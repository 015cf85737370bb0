"""
Account Risk Gate.

Pre-trade kill switch over account-level state:
- Balance floor
- Daily loss limit
- Consecutive-loss limit

Checks run in that fixed order and the first breach wins; only one reason
is ever reported. Boundaries are inclusive: a loss (or losing streak)
exactly equal to its limit halts.

Pure and stateless: no logging, no I/O, safe to call from any thread.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from tradeguard.config_schemas import RiskLimits, load_risk_config, validate_risk_config
from tradeguard.constants import CENTS_SYMBOL
from tradeguard.interfaces.risk_gate import HaltKind, HaltReason, Stats


def evaluate(
    stats: Stats,
    balance_cents: int,
    config: RiskLimits,
) -> Optional[HaltReason]:
    """
    Decide whether trading may continue.

    Parameters
    ----------
    stats : Stats
        Today's P&L and current win/loss streak
    balance_cents : int
        Current account balance in cents; must be >= 0 (not validated)
    config : RiskLimits
        Validated risk limits

    Returns
    -------
    HaltReason or None
        None if trading may proceed, otherwise the first breached limit

    Examples
    --------
    >>> limits = RiskLimits(min_balance_cents=10000)
    >>> str(evaluate(Stats(), 5000, limits))
    'Balance 5000¢ < 10000¢ minimum'
    """
    # 1. Balance floor
    if balance_cents < config.min_balance_cents:
        return HaltReason(
            kind=HaltKind.BALANCE_FLOOR,
            message=(
                f"Balance {balance_cents}{CENTS_SYMBOL} < "
                f"{config.min_balance_cents}{CENTS_SYMBOL} minimum"
            ),
            observed=balance_cents,
            limit=config.min_balance_cents,
        )

    # 2. Daily loss limit
    if stats.today_pnl_cents <= -config.max_daily_loss_cents:
        return HaltReason(
            kind=HaltKind.DAILY_LOSS,
            message=f"Daily loss: {stats.today_pnl_cents}{CENTS_SYMBOL}",
            observed=stats.today_pnl_cents,
            limit=config.max_daily_loss_cents,
        )

    # 3. Consecutive-loss limit
    if stats.current_streak <= -config.max_consecutive_losses:
        losses = abs(stats.current_streak)
        return HaltReason(
            kind=HaltKind.CONSECUTIVE_LOSSES,
            message=f"{losses}× consecutive losses",
            observed=losses,
            limit=config.max_consecutive_losses,
        )

    return None


def check(
    stats: Stats,
    balance_cents: int,
    config: RiskLimits,
) -> Optional[str]:
    """Same as evaluate(), but returns only the operator-facing halt message."""
    reason = evaluate(stats, balance_cents, config)
    return None if reason is None else str(reason)


@dataclass(frozen=True)
class AccountRiskGate:
    """
    Risk gate bound to a fixed set of limits.

    Satisfies the RiskGate protocol so engines can hold one gate object.

    Parameters
    ----------
    config : RiskLimits
        Validated risk limits

    Examples
    --------
    >>> gate = AccountRiskGate(RiskLimits(min_balance_cents=10000))
    >>> reason = gate.evaluate(Stats(today_pnl_cents=-200), balance_cents=5000)
    >>> reason.kind
    <HaltKind.BALANCE_FLOOR: 'balance_floor'>
    >>> str(reason)
    'Balance 5000¢ < 10000¢ minimum'
    """

    config: RiskLimits

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AccountRiskGate":
        """Build a gate from a raw config mapping (flat or nested under 'risk')."""
        return cls(config=validate_risk_config(data))

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AccountRiskGate":
        """Build a gate from a YAML risk config file."""
        return cls(config=load_risk_config(path))

    def evaluate(self, stats: Stats, balance_cents: int) -> Optional[HaltReason]:
        """Evaluate account state against this gate's limits."""
        return evaluate(stats, balance_cents, self.config)

    def check(self, stats: Stats, balance_cents: int) -> Optional[str]:
        """Evaluate and return only the halt message."""
        return check(stats, balance_cents, self.config)
