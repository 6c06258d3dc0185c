"""
Formatting utilities for amounts and distributions.

Functions for rendering commission breakdowns as readable text.
Presentation only: the calculator itself returns plain Decimals.
"""

from decimal import Decimal
from typing import TYPE_CHECKING, Union


if TYPE_CHECKING:
    from commission.core.models import CommissionBreakdown, FeeDistribution, TradeDistribution


def format_currency(
    amount: Union[int, float, Decimal],
    currency: str = "USD",
    decimals: int = 2,
    thousands_separator: str = ",",
    decimal_separator: str = "."
) -> str:
    """
    Format an amount as currency.

    Args:
        amount: Amount to format
        currency: Currency symbol or code (default "USD")
        decimals: Number of decimal places
        thousands_separator: Thousands separator
        decimal_separator: Decimal separator

    Returns:
        Formatted string with currency

    Example:
        >>> format_currency(Decimal("1234.56"))
        '1,234.56 USD'
        >>> format_currency(1000, currency="$", decimals=0)
        '$1,000'
    """
    formatted = f"{Decimal(str(amount)):,.{decimals}f}"
    if thousands_separator != ",":
        formatted = formatted.replace(",", "TEMP").replace(".", decimal_separator).replace("TEMP", thousands_separator)
    elif decimal_separator != ".":
        formatted = formatted.replace(".", decimal_separator)

    if currency.startswith("$") or currency.startswith("€"):
        return f"{currency}{formatted}"
    return f"{formatted} {currency}"


def format_percentage(
    rate: Union[float, Decimal],
    decimals: int = 0,
) -> str:
    """
    Format a fractional rate as a percentage.

    Example:
        >>> format_percentage(Decimal("0.30"))
        '30%'
        >>> format_percentage(Decimal("0.025"), decimals=1)
        '2.5%'
    """
    return f"{Decimal(str(rate)) * 100:.{decimals}f}%"


def format_breakdown(
    breakdown: "CommissionBreakdown",
    currency: str = "USD",
) -> str:
    """
    Format commission breakdown to text lines.

    Args:
        breakdown: CommissionBreakdown object
        currency: Currency symbol

    Returns:
        Multi-line report of the three levels and total
    """
    lines = [
        "Commissions:",
        f"  Level 1:   {format_currency(breakdown.level1, currency)}",
        f"  Level 2:   {format_currency(breakdown.level2, currency)}",
        f"  Level 3:   {format_currency(breakdown.level3, currency)}",
        f"  Total:     {format_currency(breakdown.total, currency)}",
    ]
    return "\n".join(lines)


def format_distribution(
    distribution: "FeeDistribution",
    currency: str = "USD",
) -> str:
    """
    Format fee distribution to text report.

    Args:
        distribution: FeeDistribution object
        currency: Currency symbol

    Returns:
        Multi-line formatted report
    """
    lines = [
        f"Fees: {format_currency(distribution.fees, currency)}",
        "",
        format_breakdown(distribution.commissions, currency),
        "",
        f"Cashback: {format_currency(distribution.cashback, currency)}",
        f"Treasury: {format_currency(distribution.treasury, currency)}",
    ]
    return "\n".join(lines)


def format_distribution_ru(
    distribution: "FeeDistribution",
    currency: str = "USD",
) -> str:
    """
    Format fee distribution to Russian text report.

    Args:
        distribution: FeeDistribution object
        currency: Currency symbol

    Returns:
        Multi-line formatted report in Russian
    """
    commissions = distribution.commissions
    lines = [
        f"Комиссия: {format_currency(distribution.fees, currency)}",
        "",
        "Реферальные начисления:",
        f"  Уровень 1: {format_currency(commissions.level1, currency)}",
        f"  Уровень 2: {format_currency(commissions.level2, currency)}",
        f"  Уровень 3: {format_currency(commissions.level3, currency)}",
        f"  Итого:     {format_currency(commissions.total, currency)}",
        "",
        f"Кэшбэк: {format_currency(distribution.cashback, currency)}",
        f"Казна:  {format_currency(distribution.treasury, currency)}",
    ]
    return "\n".join(lines)


def format_trade_distribution(
    distribution: "TradeDistribution",
    currency: str = "USD",
) -> str:
    """Format lineage-aware distribution of a trade."""
    lines = [
        f"Trade by {distribution.trade.user_id}: fees {format_currency(distribution.fees, currency)}",
    ]
    for allocation in distribution.allocations:
        lines.append(
            f"  Level {allocation.level} -> {allocation.referrer_id}: "
            f"{format_currency(allocation.amount, currency)}"
        )
    if distribution.unassigned_commissions > 0:
        lines.append(
            f"  Unassigned: {format_currency(distribution.unassigned_commissions, currency)}"
        )
    lines.append(f"Cashback: {format_currency(distribution.cashback, currency)}")
    lines.append(f"Treasury: {format_currency(distribution.treasury, currency)}")
    return "\n".join(lines)
