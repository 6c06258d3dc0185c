"""
Core commission functionality.

Contains the fee distribution calculator, the lineage-aware distributor,
earnings aggregation and the data models.
"""

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

__all__ = [
    "CommissionCalculator",
    "compute_commissions",
    "compute_cashback",
    "compute_treasury_revenue",
    "compute_distribution",
    "FeeDistributor",
    "distribute_trade",
    "summarize_earnings",
    "CommissionBreakdown",
    "CommissionRates",
    "EarningsSummary",
    "FeeDistribution",
    "LevelAllocation",
    "LevelEarnings",
    "TradeData",
    "TradeDistribution",
]
