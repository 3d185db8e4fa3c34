"""Exclusivity engine - the calculation pipeline.

Raw text goes through the validator; a computable amount is then run through
the rarity estimator and valued under every market scenario. The engine is
stateless and cheap, so callers re-evaluate on every input change.
"""

import logging

from .calculator.rarity import RarityEstimator
from .calculator.validator import InputValidator
from .calculator.valuation import ValuationCalculator
from .core.config import MARKET_SCENARIOS
from .core.models import ExclusivityReport, MarketScenario
from .core.types import PopulationMode, ValidationStatus

logger = logging.getLogger(__name__)


class ExclusivityEngine:
    """Runs validation, rarity estimation and valuation for one input."""

    def __init__(self, scenarios: tuple[MarketScenario, ...] = MARKET_SCENARIOS):
        """
        Initialize the engine.

        Args:
            scenarios: Market scenarios to value holdings under, in display order
        """
        self.validator = InputValidator()
        self.estimator = RarityEstimator()
        self.valuation_calculator = ValuationCalculator(scenarios)

    def evaluate(
        self,
        raw_text: str,
        mode: PopulationMode = PopulationMode.CURRENT_ADDRESSES,
    ) -> ExclusivityReport:
        """
        Evaluate raw amount text under a population mode.

        Args:
            raw_text: Contents of the amount field
            mode: Population the rarity bands are applied to

        Returns:
            ExclusivityReport; rarity and valuations are only present when
            the input is computable
        """
        validation = self.validator.validate(raw_text)
        logger.debug(f"Input {raw_text!r} ({mode.value}): {validation.status.value}")

        if not validation.is_computable:
            if validation.is_error:
                logger.info(validation.message)
            return ExclusivityReport(raw_input=raw_text, mode=mode, validation=validation)

        amount = validation.amount
        if validation.status is ValidationStatus.EXCEEDS_LARGEST_KNOWN:
            logger.info(validation.message)

        # Amounts past the largest known holding come back as 0 holders
        rarity = self.estimator.estimate(amount, mode)

        return ExclusivityReport(
            raw_input=raw_text,
            mode=mode,
            validation=validation,
            rarity=rarity,
            valuations=self.valuation_calculator.value_all(amount),
        )
