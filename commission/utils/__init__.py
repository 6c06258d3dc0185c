"""
Utility functions for commission calculator.

Money coercion and rounding plus text formatting.
"""

from commission.utils.formatters import (
    format_breakdown,
    format_currency,
    format_distribution,
    format_distribution_ru,
    format_percentage,
    format_trade_distribution,
)
from commission.utils.money import round_currency, to_fee_amount

__all__ = [
    "round_currency",
    "to_fee_amount",
    "format_currency",
    "format_percentage",
    "format_breakdown",
    "format_distribution",
    "format_distribution_ru",
    "format_trade_distribution",
]
