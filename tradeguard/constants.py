"""
Central constants for the risk gate.

Single source of truth for the numeric ranges the upstream trading engines
use when they hand statistics to the gate.
"""

# Fixed-width ranges of the statistics produced by the trading engine.
# Limits are negated before comparison, so they must fit these ranges.
PNL_CENTS_MAX = 2**63 - 1   # today_pnl_cents is a signed 64-bit value
STREAK_MAX = 2**31 - 1      # current_streak is a signed 32-bit value

# Currency subunit marker used in halt messages
CENTS_SYMBOL = "¢"

# Environment variable consulted by the CLI for the risk config path
CONFIG_ENV_VAR = "TRADEGUARD_CONFIG"
