"""Valuation calculator for holdings under hypothetical market caps.

All calculations use explicit formulas:
- Price per coin = market_cap / MAX_SUPPLY
- Value = amount × price per coin
"""

import logging

from ..core.config import MARKET_SCENARIOS
from ..core.constants import MAX_SUPPLY
from ..core.models import MarketScenario, ScenarioValuation
from ..core.types import BTCAmount, USDAmount

logger = logging.getLogger(__name__)


class ValuationCalculator:
    """Values a holding under each market scenario."""

    def __init__(self, scenarios: tuple[MarketScenario, ...] = MARKET_SCENARIOS):
        """
        Initialize calculator.

        Args:
            scenarios: Market scenarios in display order
        """
        self.scenarios = scenarios

    def value_in_scenario(self, amount: BTCAmount, scenario: MarketScenario) -> USDAmount:
        """
        Value a holding under one scenario.

        Args:
            amount: Holding in BTC
            scenario: Hypothetical market cap

        Returns:
            Value in USD
        """
        return calc_value_in_scenario(amount, scenario.cap_usd)

    def value_all(self, amount: BTCAmount) -> list[ScenarioValuation]:
        """Value a holding under every scenario, in declaration order."""
        valuations = [
            ScenarioValuation(scenario=scenario, value_usd=self.value_in_scenario(amount, scenario))
            for scenario in self.scenarios
        ]
        logger.debug(
            f"{amount} BTC valued under {len(valuations)} scenarios: "
            + ", ".join(f"{v.scenario.key}=${v.value_usd:,.2f}" for v in valuations)
        )
        return valuations


def calc_price_per_coin(market_cap: USDAmount) -> USDAmount:
    """
    Calculate the implied price of one coin.

    Formula: price = market_cap / MAX_SUPPLY

    Args:
        market_cap: Total market cap in USD

    Returns:
        Price per coin in USD
    """
    return market_cap / MAX_SUPPLY


def calc_value_in_scenario(amount: BTCAmount, market_cap: USDAmount) -> USDAmount:
    """
    Calculate the value of a holding at a given total market cap.

    Formula: value = amount × (market_cap / MAX_SUPPLY)

    Args:
        amount: Holding in BTC
        market_cap: Total market cap in USD

    Returns:
        Value in USD
    """
    return amount * calc_price_per_coin(market_cap)
