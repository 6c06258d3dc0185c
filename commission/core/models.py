"""Pydantic models for commission calculator."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from commission.constants import CASHBACK_RATE, COMMISSION_RATES, REFERRAL_DEPTH
from commission.types import (
    CommissionBreakdownDict,
    FeeDistributionDict,
    LevelAllocationDict,
)


class CommissionRates(BaseModel):
    """Rates of the referral cascade and the trader cashback.

    Defaults are the fixed program rates (30% / 3% / 2% and 10% cashback).
    """

    model_config = ConfigDict(frozen=True)

    level1: Decimal = Field(default=COMMISSION_RATES[1], ge=0, le=1, decimal_places=10, description="Direct referrer rate")
    level2: Decimal = Field(default=COMMISSION_RATES[2], ge=0, le=1, decimal_places=10, description="Second level rate")
    level3: Decimal = Field(default=COMMISSION_RATES[3], ge=0, le=1, decimal_places=10, description="Third level rate")
    cashback: Decimal = Field(default=CASHBACK_RATE, ge=0, le=1, decimal_places=10, description="Trader cashback rate")

    @model_validator(mode="after")
    def check_total_share(self) -> "CommissionRates":
        """Rates may not hand out more than the whole fee."""
        share = self.level1 + self.level2 + self.level3 + self.cashback
        if share > 1:
            raise ValueError(f"Combined rates {share} exceed 100% of fees")
        return self

    def by_level(self) -> dict[int, Decimal]:
        return {1: self.level1, 2: self.level2, 3: self.level3}


class CommissionBreakdown(BaseModel):
    """Per-level commissions for one fee amount.

    Every level is rounded on its own; ``total`` is the sum of the
    rounded levels and is checked on construction.
    """

    model_config = ConfigDict(frozen=True)

    level1: Decimal = Field(..., ge=0, description="Level 1 commission")
    level2: Decimal = Field(..., ge=0, description="Level 2 commission")
    level3: Decimal = Field(..., ge=0, description="Level 3 commission")
    total: Decimal = Field(..., ge=0, description="Sum of the three levels")

    @model_validator(mode="after")
    def check_total(self) -> "CommissionBreakdown":
        expected = self.level1 + self.level2 + self.level3
        if self.total != expected:
            raise ValueError(f"Total {self.total} does not match level sum {expected}")
        return self

    def by_level(self) -> dict[int, Decimal]:
        """Level amounts keyed by level number."""
        return {1: self.level1, 2: self.level2, 3: self.level3}

    def as_dict(self) -> CommissionBreakdownDict:
        return CommissionBreakdownDict(
            level1=str(self.level1),
            level2=str(self.level2),
            level3=str(self.level3),
            total=str(self.total),
        )


class FeeDistribution(BaseModel):
    """Complete split of one fee amount.

    Commissions, cashback and treasury add up to the rounded fee.
    """

    model_config = ConfigDict(frozen=True)

    fees: Decimal = Field(..., ge=0, description="Fee amount rounded to currency precision")
    commissions: CommissionBreakdown = Field(..., description="Per-level commissions")
    cashback: Decimal = Field(..., ge=0, description="Trader cashback")
    treasury: Decimal = Field(..., ge=0, description="Platform remainder")

    @model_validator(mode="after")
    def check_conservation(self) -> "FeeDistribution":
        distributed = self.commissions.total + self.cashback + self.treasury
        if distributed != self.fees:
            raise ValueError(f"Distributed {distributed} does not match fees {self.fees}")
        return self

    def as_dict(self) -> FeeDistributionDict:
        return FeeDistributionDict(
            fees=str(self.fees),
            commissions=self.commissions.as_dict(),
            cashback=str(self.cashback),
            treasury=str(self.treasury),
        )


class TradeData(BaseModel):
    """A fee event produced by one trade."""

    model_config = ConfigDict(frozen=True)

    user_id: str = Field(..., min_length=1, description="Trader user ID")
    volume: Decimal = Field(default=Decimal("0"), ge=0, description="Traded volume")
    fees: Decimal = Field(..., ge=0, description="Trading fees paid")


class LevelAllocation(BaseModel):
    """Commission paid to one referrer for one trade."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=REFERRAL_DEPTH, description="Referral level (1-3)")
    referrer_id: str = Field(..., min_length=1, description="Referrer receiving the commission")
    source_user_id: str = Field(..., min_length=1, description="Trader who paid the fees")
    amount: Decimal = Field(..., ge=0, description="Commission amount")

    def as_dict(self) -> LevelAllocationDict:
        return LevelAllocationDict(
            level=self.level,
            referrer_id=self.referrer_id,
            source_user_id=self.source_user_id,
            amount=str(self.amount),
        )


class TradeDistribution(BaseModel):
    """Distribution of one trade's fees along the trader's lineage.

    Levels without a referrer are not paid and stay with the treasury,
    as does the cashback of a trader nobody referred.
    """

    model_config = ConfigDict(frozen=True)

    trade: TradeData
    has_referrer: bool = Field(..., description="Whether the trader has a direct referrer")
    fees: Decimal = Field(..., ge=0, description="Fee amount rounded to currency precision")
    breakdown: CommissionBreakdown = Field(..., description="Full cascade before lineage is applied")
    allocations: tuple[LevelAllocation, ...] = Field(default=(), description="Paid levels")
    unassigned_commissions: Decimal = Field(..., ge=0, description="Commissions of missing referrers")
    cashback: Decimal = Field(..., ge=0, description="Cashback paid to the trader")
    treasury: Decimal = Field(..., ge=0, description="Platform remainder")

    @model_validator(mode="after")
    def check_conservation(self) -> "TradeDistribution":
        distributed = self.paid_commissions + self.cashback + self.treasury
        if distributed != self.fees:
            raise ValueError(f"Distributed {distributed} does not match fees {self.fees}")
        return self

    @property
    def paid_commissions(self) -> Decimal:
        return sum((a.amount for a in self.allocations), Decimal("0.00"))


class LevelEarnings(BaseModel):
    """Earnings of a referrer from one level."""

    model_config = ConfigDict(frozen=True)

    level: int = Field(..., ge=1, le=REFERRAL_DEPTH)
    amount: Decimal = Field(default=Decimal("0.00"), ge=0)
    commission_count: int = Field(default=0, ge=0)


class EarningsSummary(BaseModel):
    """Earnings of a referrer across all levels."""

    model_config = ConfigDict(frozen=True)

    referrer_id: str
    levels: tuple[LevelEarnings, ...]
    total_earned: Decimal = Field(..., ge=0)
    commission_count: int = Field(..., ge=0)
    source_user_count: int = Field(..., ge=0)

    def for_level(self, level: int) -> LevelEarnings:
        for entry in self.levels:
            if entry.level == level:
                return entry
        raise KeyError(level)
