"""
tradeguard - pre-trade risk gate for automated trading agents.

Package Structure:
- interfaces/: Value types and protocols (Stats, HaltReason, RiskGate)
- risk/: The account gate and caller-side enforcement
- config_schemas: Validated risk limits (pydantic + YAML)
- logging_config: structlog setup
- errors: Exception taxonomy for config loading and enforcement
- cli: Operator command line (`tradeguard check`, `tradeguard show-config`)
"""

__version__ = '0.1.0'
