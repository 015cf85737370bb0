"""
Tests for the tradeguard CLI.
"""

import pytest
from click.testing import CliRunner

from tradeguard.cli import EXIT_ERROR, EXIT_HALT, EXIT_OK, cli
from tradeguard.constants import CONFIG_ENV_VAR


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "risk.yaml"
    path.write_text(
        "risk:\n"
        "  min_balance_cents: 10000\n"
        "  max_daily_loss_cents: 1000\n"
        "  max_consecutive_losses: 3\n",
        encoding="utf-8",
    )
    return path


def test_check_ok(runner, config_file):
    result = runner.invoke(cli, ["check", "--config", str(config_file), "--balance", "20000"])
    assert result.exit_code == EXIT_OK
    assert "OK: trading may proceed" in result.output


def test_check_halt_balance(runner, config_file):
    result = runner.invoke(cli, ["check", "--config", str(config_file), "--balance", "5000"])
    assert result.exit_code == EXIT_HALT
    assert "HALT [balance_floor]: Balance 5000¢ < 10000¢ minimum" in result.output


def test_check_halt_daily_loss(runner, config_file):
    result = runner.invoke(cli, [
        "check", "--config", str(config_file),
        "--balance", "20000", "--pnl", "-1000",
    ])
    assert result.exit_code == EXIT_HALT
    assert "HALT [daily_loss]: Daily loss: -1000¢" in result.output


def test_check_halt_streak(runner, config_file):
    result = runner.invoke(cli, [
        "check", "--config", str(config_file),
        "--balance", "20000", "--streak", "-3",
    ])
    assert result.exit_code == EXIT_HALT
    assert "3× consecutive losses" in result.output


def test_check_reads_config_from_env(runner, config_file):
    result = runner.invoke(
        cli, ["check", "--balance", "20000", "--streak", "-2"],
        env={CONFIG_ENV_VAR: str(config_file)},
    )
    assert result.exit_code == EXIT_OK


def test_check_invalid_config(runner, tmp_path):
    path = tmp_path / "risk.yaml"
    path.write_text("min_balance_cents: -1\n", encoding="utf-8")
    result = runner.invoke(cli, ["check", "--config", str(path), "--balance", "1"])
    assert result.exit_code == EXIT_ERROR
    assert "Error:" in result.output


def test_check_missing_config(runner, tmp_path):
    result = runner.invoke(cli, [
        "check", "--config", str(tmp_path / "absent.yaml"), "--balance", "1",
    ])
    assert result.exit_code == EXIT_ERROR
    assert "not found" in result.output


def test_check_rejects_negative_balance(runner, config_file):
    result = runner.invoke(cli, ["check", "--config", str(config_file), "--balance", "-1"])
    assert result.exit_code == 2
    assert result.exit_code != EXIT_HALT
    assert "Invalid value" in result.output


def test_usage_error_distinct_from_halt(runner, config_file):
    result = runner.invoke(cli, ["check", "--config", str(config_file), "--balance", "abc"])
    assert result.exit_code not in (EXIT_OK, EXIT_ERROR, EXIT_HALT)


def test_check_invalid_utf8_config(runner, tmp_path):
    path = tmp_path / "risk.yaml"
    path.write_bytes(b"min_balance_cents: \xff\xfe\n")
    result = runner.invoke(cli, ["check", "--config", str(path), "--balance", "1"])
    assert result.exit_code == EXIT_ERROR
    assert "Error:" in result.output


def test_show_config(runner, config_file):
    result = runner.invoke(cli, ["show-config", "--config", str(config_file)])
    assert result.exit_code == EXIT_OK
    assert "min_balance_cents: 10000" in result.output
    assert "max_consecutive_losses: 3" in result.output


def test_show_config_invalid(runner, tmp_path):
    path = tmp_path / "risk.yaml"
    path.write_text("max_streak: 3\n", encoding="utf-8")
    result = runner.invoke(cli, ["show-config", "--config", str(path)])
    assert result.exit_code == EXIT_ERROR
    assert "max_streak" in result.output
