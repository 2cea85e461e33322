"""
Configuration management for subnetcalc.

Loads CLI defaults from environment variables or a .env file. The
calculation engine itself takes no configuration.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from subnetcalc.ip.enumerator import DEFAULT_MAX_RESULTS
from subnetcalc.ip.formatting import OutputFormat

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Check common locations for .env
ENV_LOCATIONS = [
    Path.home() / ".subnetcalc" / ".env",
    Path.home() / ".config" / "subnetcalc" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found, without overriding set variables."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class CalculatorConfig:
    """CLI defaults."""

    # Subnet list cap for split/shift output
    max_subnets: int = DEFAULT_MAX_RESULTS

    # default, compact or detailed
    output_format: str = OutputFormat.DEFAULT.value

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "CalculatorConfig":
        """Load configuration from environment variables."""
        config = cls()

        max_subnets = os.getenv("SUBNETCALC_MAX_SUBNETS")
        if max_subnets is not None:
            value = max_subnets.strip()
            if value.isascii() and value.isdigit():
                config.max_subnets = int(value)
            else:
                logger.warning("Ignoring SUBNETCALC_MAX_SUBNETS=%r: not a non-negative integer", max_subnets)

        output_format = os.getenv("SUBNETCALC_FORMAT")
        if output_format is not None:
            if output_format.lower() in {f.value for f in OutputFormat}:
                config.output_format = output_format.lower()
            else:
                logger.warning("Ignoring SUBNETCALC_FORMAT=%r: unknown format", output_format)

        log_level = os.getenv("SUBNETCALC_LOG_LEVEL")
        if log_level is not None:
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()
            else:
                logger.warning("Ignoring SUBNETCALC_LOG_LEVEL=%r: unknown level", log_level)

        return config


# Global config instance
_config: CalculatorConfig | None = None


def get_config() -> CalculatorConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        load_env_file()
        _config = CalculatorConfig.from_env()
    return _config


def set_config(config: CalculatorConfig | None) -> None:
    """Set (or with None, reset) the global configuration instance."""
    global _config
    _config = config
