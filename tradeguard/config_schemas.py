"""
Configuration schema validation using Pydantic.

Provides the validated risk-limit model consumed by the gate.
Catches configuration errors at load time so the gate never has to.

YAML layout (flat or nested under ``risk``)::

    risk:
      min_balance_cents: 10000
      max_daily_loss_cents: 1000
      max_consecutive_losses: 3
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from tradeguard.constants import PNL_CENTS_MAX, STREAK_MAX
from tradeguard.errors import RiskConfigError
from tradeguard.logging_config import get_logger

logger = get_logger(__name__)


class RiskLimits(BaseModel):
    """Account-level risk limits. Loaded once at start-up, immutable afterwards."""

    model_config = ConfigDict(
        extra='forbid',  # Don't allow unknown limit names
        frozen=True,
    )

    min_balance_cents: StrictInt = Field(
        0, ge=0, description="Halt when the account balance drops below this floor"
    )
    max_daily_loss_cents: StrictInt = Field(
        0, ge=0, le=PNL_CENTS_MAX,
        description="Halt when today's loss reaches this magnitude",
    )
    max_consecutive_losses: StrictInt = Field(
        0, ge=0, le=STREAK_MAX,
        description="Halt when the losing streak reaches this length",
    )


# Name used by the gate's public contract
Config = RiskLimits


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<root>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def validate_risk_config(data: Mapping[str, Any], source: str = "<dict>") -> RiskLimits:
    """
    Validate a risk configuration mapping.

    Args:
        data: Raw configuration, flat or nested under a ``risk`` key
        source: Where the data came from, for error messages

    Returns:
        Validated risk limits

    Raises:
        RiskConfigError: If the configuration is invalid
    """
    if not isinstance(data, Mapping):
        raise RiskConfigError(
            f"Risk config must be a mapping, got {type(data).__name__}", source
        )

    if 'risk' in data:
        siblings = sorted(str(k) for k in data if k != 'risk')
        if siblings:
            message = f"Keys outside the 'risk' section are not allowed: {', '.join(siblings)}"
            logger.error("risk_config_invalid", source=source, error=message)
            raise RiskConfigError(message, source)
        data = data['risk']
        if not isinstance(data, Mapping):
            raise RiskConfigError(
                f"'risk' section must be a mapping, got {type(data).__name__}", source
            )

    try:
        limits = RiskLimits(**data)
    except ValidationError as e:
        message = _format_validation_error(e)
        logger.error("risk_config_invalid", source=source, error=message)
        raise RiskConfigError(message, source) from e
    except TypeError as e:
        # Non-string keys cannot be passed as keyword arguments
        logger.error("risk_config_invalid", source=source, error=str(e))
        raise RiskConfigError(str(e), source) from e

    logger.info(
        "risk_config_loaded",
        source=source,
        min_balance_cents=limits.min_balance_cents,
        max_daily_loss_cents=limits.max_daily_loss_cents,
        max_consecutive_losses=limits.max_consecutive_losses,
    )
    return limits


def load_risk_config(path: Union[str, Path]) -> RiskLimits:
    """
    Load and validate risk limits from a YAML file.

    Raises:
        RiskConfigError: If the file is missing, unparseable, or invalid
    """
    path = Path(path)
    source = str(path)

    if not path.is_file():
        raise RiskConfigError("Risk config file not found", source)

    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error("risk_config_invalid", source=source, error=str(e))
        raise RiskConfigError(f"Invalid YAML: {e}", source) from e
    except (UnicodeDecodeError, OSError) as e:
        logger.error("risk_config_invalid", source=source, error=str(e))
        raise RiskConfigError(f"Unreadable risk config: {e}", source) from e

    if data is None:
        raise RiskConfigError("Risk config file is empty", source)

    return validate_risk_config(data, source=source)


def dump_risk_config(limits: RiskLimits) -> Dict[str, Dict[str, int]]:
    """Serialize limits in the nested YAML layout accepted by load_risk_config."""
    return {'risk': limits.model_dump()}
