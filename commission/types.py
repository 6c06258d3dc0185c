"""
Type definitions for commission module.

TypedDict shapes returned by the ``as_dict()`` helpers of the models,
used when a breakdown has to be handed to JSON or template code.
"""

from typing import TypedDict


class CommissionBreakdownDict(TypedDict):
    """
    Commission amounts per level.

    Attributes:
        level1: Direct referrer commission
        level2: Second level commission
        level3: Third level commission
        total: Sum of the three rounded levels
    """
    level1: str
    level2: str
    level3: str
    total: str


class FeeDistributionDict(TypedDict):
    """
    Complete split of one fee amount.

    Attributes:
        fees: Fee amount rounded to currency precision
        commissions: Per-level commissions
        cashback: Trader cashback
        treasury: Platform remainder
    """
    fees: str
    commissions: CommissionBreakdownDict
    cashback: str
    treasury: str


class LevelAllocationDict(TypedDict):
    level: int
    referrer_id: str
    source_user_id: str
    amount: str
