"""Core module - data models, types, constants, and exceptions."""

from .models import (
    MarketScenario,
    RarityBand,
    RarityResult,
    ValidationOutcome,
    ScenarioValuation,
    ExclusivityReport,
)
from .types import (
    PopulationMode,
    ValidationStatus,
)
from .constants import (
    MAX_SUPPLY,
    LARGEST_KNOWN_HOLDING,
    TOTAL_ADDRESSES,
    GLOBAL_POPULATION,
)
from .exceptions import (
    ExclusivityError,
    AmountOutOfRangeError,
    ConfigurationError,
)

__all__ = [
    # Models
    "MarketScenario",
    "RarityBand",
    "RarityResult",
    "ValidationOutcome",
    "ScenarioValuation",
    "ExclusivityReport",
    # Types
    "PopulationMode",
    "ValidationStatus",
    # Constants
    "MAX_SUPPLY",
    "LARGEST_KNOWN_HOLDING",
    "TOTAL_ADDRESSES",
    "GLOBAL_POPULATION",
    # Exceptions
    "ExclusivityError",
    "AmountOutOfRangeError",
    "ConfigurationError",
]
