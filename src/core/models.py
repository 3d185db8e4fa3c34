"""Pydantic data models for the exclusivity calculator.

All data structures are immutable (frozen) after creation. Nothing outlives
a single evaluation of the current input.
"""

from pydantic import BaseModel, Field, field_validator

from .constants import LARGEST_KNOWN_HOLDING, MAX_SUPPLY
from .types import (
    BTCAmount,
    HolderCount,
    PopulationMode,
    USDAmount,
    ValidationStatus,
)


class MarketScenario(BaseModel):
    """A hypothetical total market capitalization for all coins."""

    key: str
    name: str
    cap_usd: USDAmount

    model_config = {"frozen": True}

    @field_validator("cap_usd")
    @classmethod
    def validate_cap(cls, v: USDAmount) -> USDAmount:
        if v <= 0:
            raise ValueError(f"Market cap must be positive, got {v}")
        return v

    @property
    def price_per_coin(self) -> USDAmount:
        """Implied price if the cap were spread evenly over the max supply."""
        return self.cap_usd / MAX_SUPPLY


class RarityBand(BaseModel):
    """One step of the rarity table.

    Covers ``[lower_btc, upper_btc)``, or ``[lower_btc, upper_btc]`` when
    ``include_upper`` is set. Global mode always applies ``fraction`` to the
    base population; address mode uses ``fixed_address_count`` when present.
    """

    lower_btc: BTCAmount
    upper_btc: BTCAmount
    include_upper: bool = False
    fraction: float
    fixed_address_count: HolderCount | None = None

    model_config = {"frozen": True}

    def contains(self, amount: BTCAmount) -> bool:
        """Check whether an amount falls inside this band."""
        if amount < self.lower_btc:
            return False
        if self.include_upper:
            return amount <= self.upper_btc
        return amount < self.upper_btc

    @property
    def label(self) -> str:
        """Interval notation, e.g. ``[1, 10)``."""
        from ..output.formatters import format_btc

        closing = "]" if self.include_upper else ")"
        return f"[{format_btc(self.lower_btc)}, {format_btc(self.upper_btc)}{closing}"


class RarityResult(BaseModel):
    """Estimated number of holders with at least ``amount`` coins."""

    amount: BTCAmount
    mode: PopulationMode
    holders: HolderCount

    model_config = {"frozen": True}

    @property
    def none_known(self) -> bool:
        """True when no known holder has this much."""
        return self.amount > LARGEST_KNOWN_HOLDING


class ValidationOutcome(BaseModel):
    """Result of checking raw amount text."""

    raw_text: str
    status: ValidationStatus
    amount: BTCAmount | None = None
    message: str | None = None  # Banner text for the explicit error states

    model_config = {"frozen": True}

    @property
    def is_computable(self) -> bool:
        """Whether rarity and valuations can be computed for this input."""
        return self.status in (
            ValidationStatus.VALID,
            ValidationStatus.EXCEEDS_LARGEST_KNOWN,
        )

    @property
    def is_error(self) -> bool:
        """Whether an error or advisory banner should be shown."""
        return self.status in (
            ValidationStatus.EXCEEDS_SUPPLY,
            ValidationStatus.EXCEEDS_LARGEST_KNOWN,
        )


class ScenarioValuation(BaseModel):
    """Value of a holding under one market scenario."""

    scenario: MarketScenario
    value_usd: USDAmount

    model_config = {"frozen": True}

    @property
    def formatted(self) -> str:
        """Abbreviated USD string, e.g. ``$1.00M``."""
        from ..output.formatters import format_usd

        return format_usd(self.value_usd)


class ExclusivityReport(BaseModel):
    """Everything displayed for one input text and population mode."""

    raw_input: str
    mode: PopulationMode
    validation: ValidationOutcome
    rarity: RarityResult | None = None
    valuations: list[ScenarioValuation] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def has_result(self) -> bool:
        """Check if a result panel can be shown."""
        return self.rarity is not None

    @property
    def show_holder_sentence(self) -> bool:
        """The holder sentence is only shown for positive amounts."""
        return self.rarity is not None and self.rarity.amount > 0
