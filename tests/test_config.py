"""Tests for configuration and constants."""

import logging

import pytest

from src.core import config as config_module
from src.core.config import (
    MARKET_SCENARIOS,
    MAX_SUPPLY,
    AppConfig,
    get_config,
    get_scenario,
    reload_config,
)
from src.core.exceptions import ConfigurationError
from src.core.types import PopulationMode


class TestConstants:
    """Tests for fixed calculator figures."""

    def test_supply_figures(self):
        assert MAX_SUPPLY == 21_000_000
        assert config_module.LARGEST_KNOWN_HOLDING == 1_100_000
        assert config_module.TOTAL_ADDRESSES == 100_000_000
        assert config_module.GLOBAL_POPULATION == 8_000_000_000

    def test_market_scenarios(self):
        assert [(s.name, s.cap_usd) for s in MARKET_SCENARIOS] == [
            ("Current Bitcoin Market Cap", 1e12),
            ("Gold Market Cap", 13.5e12),
            ("All Currencies", 80e12),
            ("Global Wealth", 500e12),
        ]

    def test_get_scenario(self):
        assert get_scenario("gold").name == "Gold Market Cap"
        with pytest.raises(KeyError):
            get_scenario("silver")

    def test_population_mode_bases(self):
        assert PopulationMode.CURRENT_ADDRESSES.base_population == 100_000_000
        assert PopulationMode.GLOBAL_POPULATION.base_population == 8_000_000_000
        assert PopulationMode.GLOBAL_POPULATION.holder_noun == "people"


class TestAppConfig:
    """Tests for AppConfig loading."""

    def test_defaults(self):
        config = AppConfig.from_env()

        assert config.default_mode == PopulationMode.CURRENT_ADDRESSES
        assert config.log_level == "INFO"
        assert config.log_level_value == logging.INFO

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("EXCLUSIVITY_POPULATION_MODE", "Global")
        monkeypatch.setenv("EXCLUSIVITY_LOG_LEVEL", "debug")

        config = AppConfig.from_env()

        assert config.default_mode == PopulationMode.GLOBAL_POPULATION
        assert config.log_level_value == logging.DEBUG

    def test_invalid_mode(self, monkeypatch):
        monkeypatch.setenv("EXCLUSIVITY_POPULATION_MODE", "martians")

        with pytest.raises(ConfigurationError) as exc_info:
            AppConfig.from_env()
        assert exc_info.value.config_key == "EXCLUSIVITY_POPULATION_MODE"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("EXCLUSIVITY_LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            AppConfig.from_env()

    def test_singleton_and_reload(self, monkeypatch):
        first = get_config()
        assert get_config() is first

        monkeypatch.setenv("EXCLUSIVITY_POPULATION_MODE", "global")
        reloaded = reload_config()

        assert reloaded is not first
        assert get_config().default_mode == PopulationMode.GLOBAL_POPULATION
