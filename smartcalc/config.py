"""Runtime settings for the calculator driver.

Values come from, in increasing priority: field defaults, environment variables
(optionally loaded from a .env file with python-dotenv), and explicit overrides
passed by the command line.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from .evaluator import DEFAULT_MAX_EXPONENT, DEFAULT_MAX_RESULT_BITS

logger = logging.getLogger(__name__)

ENV_PREFIX = 'SMARTCALC_'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class CalculatorSettings(BaseModel):
    """Validated driver configuration."""
    prompt: str = "> "
    log_level: str = "WARNING"
    history_file: Optional[str] = Field(default="~/.smartcalc_history")
    max_exponent: int = Field(default=DEFAULT_MAX_EXPONENT, ge=0)
    max_result_bits: int = Field(default=DEFAULT_MAX_RESULT_BITS, ge=0)

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator('history_file')
    @classmethod
    def expand_history_file(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return os.path.expanduser(v.strip())


def _from_environment() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for name in CalculatorSettings.model_fields:
        raw = os.getenv(ENV_PREFIX + name.upper())
        if raw is not None:
            values[name] = raw
    return values


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> CalculatorSettings:
    """Build settings from the environment and overrides.

    Raises:
        pydantic.ValidationError: If any value fails validation.
    """
    dotenv_path = env_file or find_dotenv(usecwd=True)
    if dotenv_path:
        load_dotenv(dotenv_path, override=False)
        logger.debug("Loaded environment from %s", dotenv_path)
    values = _from_environment()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return CalculatorSettings(**values)
