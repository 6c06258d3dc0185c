"""
Referral Commission Calculator.

Standalone package for splitting trading fees into the 3-level referral
commission cascade, trader cashback and treasury revenue.

Example:
    >>> from commission import compute_commissions, compute_cashback, compute_treasury_revenue
    >>> from decimal import Decimal
    >>>
    >>> fees = Decimal("100")
    >>> compute_commissions(fees).total
    Decimal('35.00')
    >>> compute_cashback(fees)
    Decimal('10.00')
    >>> compute_treasury_revenue(fees)
    Decimal('55.00')
"""

from commission.constants import (
    CASHBACK_RATE,
    COMMISSION_RATES,
    CURRENCY_QUANTUM,
    REFERRAL_DEPTH,
)
from commission.core.calculator import (
    CommissionCalculator,
    compute_cashback,
    compute_commissions,
    compute_distribution,
    compute_treasury_revenue,
)
from commission.core.distributor import FeeDistributor, distribute_trade
from commission.core.earnings import summarize_earnings
from commission.core.models import (
    CommissionBreakdown,
    CommissionRates,
    EarningsSummary,
    FeeDistribution,
    LevelAllocation,
    LevelEarnings,
    TradeData,
    TradeDistribution,
)
from commission.exceptions import (
    CommissionError,
    InvalidFeeAmountError,
    InvalidReferralChainError,
)
from commission.utils import (
    format_breakdown,
    format_currency,
    format_distribution,
    format_distribution_ru,
    format_percentage,
    format_trade_distribution,
    round_currency,
    to_fee_amount,
)


__version__ = "1.0.0"
__all__ = [
    # Core
    "CommissionCalculator",
    "compute_commissions",
    "compute_cashback",
    "compute_treasury_revenue",
    "compute_distribution",
    "FeeDistributor",
    "distribute_trade",
    "summarize_earnings",
    # Models
    "CommissionBreakdown",
    "CommissionRates",
    "EarningsSummary",
    "FeeDistribution",
    "LevelAllocation",
    "LevelEarnings",
    "TradeData",
    "TradeDistribution",
    # Constants
    "REFERRAL_DEPTH",
    "COMMISSION_RATES",
    "CASHBACK_RATE",
    "CURRENCY_QUANTUM",
    # Errors
    "CommissionError",
    "InvalidFeeAmountError",
    "InvalidReferralChainError",
    # Utils
    "round_currency",
    "to_fee_amount",
    "format_currency",
    "format_percentage",
    "format_breakdown",
    "format_distribution",
    "format_distribution_ru",
    "format_trade_distribution",
]
