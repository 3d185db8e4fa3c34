"""Input validator - turns raw amount text into a validation outcome.

Rules, checked in order:
- blank text is EMPTY
- anything but a plain non-negative decimal number is NOT_A_NUMBER
- more than MAX_SUPPLY is EXCEEDS_SUPPLY
- more than LARGEST_KNOWN_HOLDING is EXCEEDS_LARGEST_KNOWN (advisory, rarity 0)
- everything else is VALID
"""

import logging
import math
import re

from ..core.constants import LARGEST_KNOWN_HOLDING, MAX_SUPPLY
from ..core.models import ValidationOutcome
from ..core.types import ValidationStatus

logger = logging.getLogger(__name__)

# Unsigned decimal with optional exponent: "1", "1.", ".5", "2.1e6", "+3"
_AMOUNT_PATTERN = re.compile(r"^\+?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

EXCEEDS_SUPPLY_MESSAGE = (
    f"Invalid amount: exceeds maximum Bitcoin supply of {MAX_SUPPLY:,} BTC"
)
EXCEEDS_LARGEST_KNOWN_MESSAGE = (
    f"No known addresses hold more than {LARGEST_KNOWN_HOLDING:,} BTC"
)


def parse_amount(raw_text: str) -> float | None:
    """
    Parse a non-negative coin amount.

    Args:
        raw_text: Text as typed by the user

    Returns:
        The amount, or None if the text is not a non-negative number
    """
    text = raw_text.strip()
    if not _AMOUNT_PATTERN.match(text):
        return None
    return float(text)


class InputValidator:
    """Validates raw amount text against the supply limits."""

    def validate(self, raw_text: str) -> ValidationOutcome:
        """
        Validate raw amount text.

        Args:
            raw_text: Current contents of the amount field

        Returns:
            ValidationOutcome carrying the parsed amount where there is one
        """
        if not raw_text or not raw_text.strip():
            return ValidationOutcome(raw_text=raw_text, status=ValidationStatus.EMPTY)

        amount = parse_amount(raw_text)
        if amount is None:
            logger.debug(f"Not a number: {raw_text!r}")
            return ValidationOutcome(raw_text=raw_text, status=ValidationStatus.NOT_A_NUMBER)

        if amount > MAX_SUPPLY:
            return ValidationOutcome(
                raw_text=raw_text,
                status=ValidationStatus.EXCEEDS_SUPPLY,
                # "1e999" parses to inf, which has no JSON representation
                amount=amount if math.isfinite(amount) else None,
                message=EXCEEDS_SUPPLY_MESSAGE,
            )

        if amount > LARGEST_KNOWN_HOLDING:
            return ValidationOutcome(
                raw_text=raw_text,
                status=ValidationStatus.EXCEEDS_LARGEST_KNOWN,
                amount=amount,
                message=EXCEEDS_LARGEST_KNOWN_MESSAGE,
            )

        return ValidationOutcome(
            raw_text=raw_text,
            status=ValidationStatus.VALID,
            amount=amount,
        )
