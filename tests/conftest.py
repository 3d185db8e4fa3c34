"""Pytest configuration and fixtures for exclusivity calculator tests."""

import pytest

from src.calculator.rarity import RarityEstimator
from src.calculator.validator import InputValidator
from src.calculator.valuation import ValuationCalculator
from src.core import config as config_module
from src.core.config import get_scenario
from src.core.models import MarketScenario, RarityResult
from src.core.types import PopulationMode
from src.engine import ExclusivityEngine


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Run every test without calculator env vars and with a fresh config singleton."""
    monkeypatch.delenv(config_module.ENV_POPULATION_MODE, raising=False)
    monkeypatch.delenv(config_module.ENV_LOG_LEVEL, raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    yield


@pytest.fixture
def validator() -> InputValidator:
    return InputValidator()


@pytest.fixture
def estimator() -> RarityEstimator:
    return RarityEstimator()


@pytest.fixture
def calculator() -> ValuationCalculator:
    return ValuationCalculator()


@pytest.fixture
def engine() -> ExclusivityEngine:
    return ExclusivityEngine()


@pytest.fixture
def current_scenario() -> MarketScenario:
    """The $1T current market cap scenario."""
    return get_scenario("CURRENT")


@pytest.fixture
def sample_rarity() -> RarityResult:
    """1.5 BTC among known addresses."""
    return RarityResult(
        amount=1.5,
        mode=PopulationMode.CURRENT_ADDRESSES,
        holders=250_000,
    )
