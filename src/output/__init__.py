"""Output formatting module."""

from .formatters import (
    OutputFormatter,
    JSONFormatter,
    TableFormatter,
    format_usd,
    format_btc,
    format_count,
    format_rarity_sentence,
)

__all__ = [
    "OutputFormatter",
    "JSONFormatter",
    "TableFormatter",
    "format_usd",
    "format_btc",
    "format_count",
    "format_rarity_sentence",
]
