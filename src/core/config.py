"""Calculator constants and runtime settings.

The supply, holding and population figures plus the market scenarios are
fixed for the life of the process. Presentation settings are loaded from
environment variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

# Supply figures are re-exported so callers can read every constant from here
from .constants import (  # noqa: F401
    GLOBAL_POPULATION,
    LARGEST_KNOWN_HOLDING,
    MAX_SUPPLY,
    TOTAL_ADDRESSES,
)
from .exceptions import ConfigurationError
from .models import MarketScenario
from .types import PopulationMode

# Hypothetical total market caps, in display order
MARKET_SCENARIOS: tuple[MarketScenario, ...] = (
    MarketScenario(key="CURRENT", name="Current Bitcoin Market Cap", cap_usd=1_000_000_000_000),
    MarketScenario(key="GOLD", name="Gold Market Cap", cap_usd=13_500_000_000_000),
    MarketScenario(key="CURRENCIES", name="All Currencies", cap_usd=80_000_000_000_000),
    MarketScenario(key="GLOBAL_WEALTH", name="Global Wealth", cap_usd=500_000_000_000_000),
)

ENV_POPULATION_MODE = "EXCLUSIVITY_POPULATION_MODE"
ENV_LOG_LEVEL = "EXCLUSIVITY_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_scenario(key: str) -> MarketScenario:
    """Look up a market scenario by key (case-insensitive)."""
    for scenario in MARKET_SCENARIOS:
        if scenario.key == key.upper():
            return scenario
    valid = ", ".join(s.key for s in MARKET_SCENARIOS)
    raise KeyError(f"Unknown market scenario '{key}' (valid: {valid})")


@dataclass
class AppConfig:
    """Presentation settings for the CLI and dashboard."""

    # Population mode selected when the page or command starts
    default_mode: PopulationMode = PopulationMode.CURRENT_ADDRESSES

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables."""
        raw_mode = os.getenv(ENV_POPULATION_MODE)
        raw_level = os.getenv(ENV_LOG_LEVEL)

        default_mode = PopulationMode.CURRENT_ADDRESSES
        if raw_mode:
            try:
                default_mode = PopulationMode(raw_mode.strip().lower())
            except ValueError:
                valid = ", ".join(m.value for m in PopulationMode)
                raise ConfigurationError(
                    ENV_POPULATION_MODE, f"'{raw_mode}' is not one of: {valid}"
                )

        log_level = "INFO"
        if raw_level:
            log_level = raw_level.strip().upper()
            if log_level not in _LOG_LEVELS:
                raise ConfigurationError(
                    ENV_LOG_LEVEL, f"'{raw_level}' is not a logging level"
                )

        return cls(default_mode=default_mode, log_level=log_level)

    @property
    def log_level_value(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)


# Global config instance (lazy loaded)
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.from_env()
    return _config


def reload_config() -> AppConfig:
    """Reload configuration from environment."""
    global _config
    _config = AppConfig.from_env()
    return _config
