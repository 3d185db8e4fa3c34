"""Supply and distribution figures used by every calculation."""

MAX_SUPPLY = 21_000_000
LARGEST_KNOWN_HOLDING = 1_100_000
TOTAL_ADDRESSES = 100_000_000
GLOBAL_POPULATION = 8_000_000_000
