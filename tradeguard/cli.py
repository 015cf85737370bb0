"""
CLI tool for tradeguard.
Lets operators check account state against a risk config without an engine.
"""

import sys

import click
import yaml

from tradeguard.config_schemas import dump_risk_config, load_risk_config
from tradeguard.constants import CONFIG_ENV_VAR
from tradeguard.errors import RiskConfigError
from tradeguard.interfaces.risk_gate import Stats
from tradeguard.logging_config import configure_structlog
from tradeguard.risk.account_gate import AccountRiskGate

# Exit codes
EXIT_OK = 0
EXIT_ERROR = 1
EXIT_HALT = 3  # click reserves 2 for usage errors


@click.group()
@click.option('--debug/--no-debug', default=False, help='Enable debug logging')
def cli(debug):
    """tradeguard CLI - Evaluate the pre-trade risk gate."""
    configure_structlog(log_level="DEBUG" if debug else "INFO")


@cli.command()
@click.option('--config', 'config_path', envvar=CONFIG_ENV_VAR, required=True,
              type=click.Path(dir_okay=False),
              help=f'Risk config YAML (or set {CONFIG_ENV_VAR})')
@click.option('--balance', type=click.IntRange(min=0), required=True,
              help='Current account balance in cents')
@click.option('--pnl', type=int, default=0, show_default=True,
              help="Today's P&L in cents (negative = loss)")
@click.option('--streak', type=int, default=0, show_default=True,
              help='Current streak (+N wins, -N losses)')
def check(config_path, balance, pnl, streak):
    """Check whether trading may proceed."""
    try:
        gate = AccountRiskGate.from_yaml(config_path)
    except RiskConfigError as e:
        click.echo(f"Error: {e}")
        sys.exit(EXIT_ERROR)

    reason = gate.evaluate(Stats(today_pnl_cents=pnl, current_streak=streak), balance)
    if reason is None:
        click.echo("OK: trading may proceed")
        sys.exit(EXIT_OK)

    click.echo(f"HALT [{reason.kind.value}]: {reason.message}")
    sys.exit(EXIT_HALT)


@cli.command('show-config')
@click.option('--config', 'config_path', envvar=CONFIG_ENV_VAR, required=True,
              type=click.Path(dir_okay=False),
              help=f'Risk config YAML (or set {CONFIG_ENV_VAR})')
def show_config(config_path):
    """Validate a risk config and print the effective limits."""
    try:
        limits = load_risk_config(config_path)
    except RiskConfigError as e:
        click.echo(f"Error: {e}")
        sys.exit(EXIT_ERROR)

    click.echo(yaml.safe_dump(dump_risk_config(limits), default_flow_style=False), nl=False)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
