"""Type definitions and enums for the exclusivity calculator."""

from enum import Enum

from . import constants


class PopulationMode(str, Enum):
    """Population the rarity bands are applied to."""

    CURRENT_ADDRESSES = "addresses"   # Known on-chain addresses
    GLOBAL_POPULATION = "global"      # Everyone alive, same distribution ratio

    @property
    def base_population(self) -> int:
        """Size of the population the band fractions apply to."""
        if self is PopulationMode.GLOBAL_POPULATION:
            return constants.GLOBAL_POPULATION
        return constants.TOTAL_ADDRESSES

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        names = {
            PopulationMode.CURRENT_ADDRESSES: "Current Distribution",
            PopulationMode.GLOBAL_POPULATION: "Global Population",
        }
        return names.get(self, self.value)

    @property
    def holder_noun(self) -> str:
        """What a single counted holder is called."""
        return "people" if self is PopulationMode.GLOBAL_POPULATION else "addresses"

    @property
    def note(self) -> str:
        """Footnote shown under the results."""
        if self is PopulationMode.GLOBAL_POPULATION:
            return (
                "This is a hypothetical calculation based on current Bitcoin "
                "distribution patterns applied to global population."
            )
        return (
            "These estimates are based on February 2025 blockchain analysis. "
            "Value calculations assume even distribution of market cap across all BTC."
        )


class ValidationStatus(str, Enum):
    """Outcome categories for raw amount input."""

    EMPTY = "empty"                                   # Nothing typed yet
    VALID = "valid"
    EXCEEDS_SUPPLY = "exceeds_supply"                 # More than will ever exist
    EXCEEDS_LARGEST_KNOWN = "exceeds_largest_known"   # Advisory only, result is 0
    NOT_A_NUMBER = "not_a_number"                     # Incomplete input, no banner


# Type aliases for common patterns
BTCAmount = float    # Number of coins
USDAmount = float    # USD value
HolderCount = int    # Estimated holders at or above an amount
