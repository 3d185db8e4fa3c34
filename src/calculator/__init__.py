"""Calculation module - validation, rarity estimation and valuation."""

from .validator import InputValidator
from .rarity import RarityEstimator
from .valuation import ValuationCalculator

__all__ = ["InputValidator", "RarityEstimator", "ValuationCalculator"]
