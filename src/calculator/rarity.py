"""Rarity estimator - how many holders have at least a given amount.

The estimate is a hand-tuned step function over the base population
(known addresses or world population). Each band assigns the fraction of
that population holding at least the band's lower bound. From 100 BTC up,
address mode switches to fixed counts of known large holders.

Bands are half-open ``[low, high)`` except the last, which includes the
largest known holding. First match wins.
"""

import logging
import math

from ..core.constants import LARGEST_KNOWN_HOLDING, MAX_SUPPLY
from ..core.exceptions import AmountOutOfRangeError
from ..core.models import RarityBand, RarityResult
from ..core.types import BTCAmount, HolderCount, PopulationMode

logger = logging.getLogger(__name__)


RARITY_BANDS: tuple[RarityBand, ...] = (
    RarityBand(lower_btc=0, upper_btc=0.1, fraction=0.08),
    RarityBand(lower_btc=0.1, upper_btc=1, fraction=0.015),
    RarityBand(lower_btc=1, upper_btc=10, fraction=0.0025),
    RarityBand(lower_btc=10, upper_btc=100, fraction=0.000003),
    RarityBand(lower_btc=100, upper_btc=1_000, fraction=0.0000005, fixed_address_count=1678),
    RarityBand(lower_btc=1_000, upper_btc=10_000, fraction=0.0000001, fixed_address_count=85),
    RarityBand(lower_btc=10_000, upper_btc=100_000, fraction=0.00000001, fixed_address_count=5),
    RarityBand(
        lower_btc=100_000,
        upper_btc=LARGEST_KNOWN_HOLDING,
        include_upper=True,
        fraction=0.0000000001,
        fixed_address_count=1,
    ),
)


def round_half_up(value: float) -> int:
    """Round a non-negative value to the nearest integer, halves going up."""
    return int(math.floor(value + 0.5))


class RarityEstimator:
    """Estimates holder counts from the rarity band table."""

    def __init__(self, bands: tuple[RarityBand, ...] = RARITY_BANDS):
        self.bands = bands

    def estimate(self, amount: BTCAmount, mode: PopulationMode) -> RarityResult:
        """
        Estimate how many holders have at least ``amount`` coins.

        Args:
            amount: Holding in BTC, already validated
            mode: Population the bands are applied to

        Returns:
            RarityResult with the rounded holder count (0 past the largest
            known holding)

        Raises:
            AmountOutOfRangeError: If amount is negative or above max supply
        """
        if amount > MAX_SUPPLY:
            raise AmountOutOfRangeError(amount, f"exceeds max supply of {MAX_SUPPLY:,}")
        if amount < 0:
            raise AmountOutOfRangeError(amount, "negative amount")

        holders = self._holders_at_least(amount, mode)
        logger.debug(f"{amount} BTC ({mode.value}): {holders:,} holders")
        return RarityResult(amount=amount, mode=mode, holders=holders)

    def band_for(self, amount: BTCAmount) -> RarityBand | None:
        """Return the band containing ``amount``, if any."""
        for band in self.bands:
            if band.contains(amount):
                return band
        return None

    def band_holders(self, band: RarityBand, mode: PopulationMode) -> HolderCount:
        """Holder count a band assigns under the given mode."""
        if mode is PopulationMode.CURRENT_ADDRESSES and band.fixed_address_count is not None:
            return band.fixed_address_count
        return round_half_up(band.fraction * mode.base_population)

    def _holders_at_least(self, amount: BTCAmount, mode: PopulationMode) -> HolderCount:
        if amount <= 0:
            return mode.base_population

        band = self.band_for(amount)
        if band is None:
            # Past the largest known holding
            return 0
        return self.band_holders(band, mode)


def estimate_holders(amount: BTCAmount, mode: PopulationMode) -> HolderCount:
    """Shortcut for ``RarityEstimator().estimate(amount, mode).holders``."""
    return RarityEstimator().estimate(amount, mode).holders
