"""
Lineage-aware fee distribution.

Applies the commission cascade to a concrete trade: each level is paid to
the referrer found at that position of the trader's lineage. Levels without
a referrer, and the cashback of a trader nobody referred, are retained by
the treasury.
"""

from collections.abc import Sequence
from decimal import Decimal

from loguru import logger

from commission.constants import REFERRAL_DEPTH
from commission.core.calculator import CommissionCalculator
from commission.core.models import LevelAllocation, TradeData, TradeDistribution
from commission.exceptions import InvalidReferralChainError
from commission.utils.money import round_currency, to_fee_amount


Lineage = Sequence[str | None]


class FeeDistributor:
    """Distributes trade fees along a referral lineage."""

    def __init__(self, calculator: CommissionCalculator | None = None) -> None:
        self.calculator = calculator or CommissionCalculator()

    def distribute(self, trade: TradeData, lineage: Lineage) -> TradeDistribution:
        """
        Distribute one trade's fees to the trader's referrers.

        Args:
            trade: Trade that produced the fees
            lineage: Referrer IDs ordered by level, direct referrer first.
                ``None`` or ``""`` marks a missing referrer; entries past
                level 3 are ignored.

        Returns:
            TradeDistribution whose allocations, cashback and treasury
            add up to the rounded fee

        Raises:
            InvalidReferralChainError: If the lineage contains the trader,
                the same referrer twice or a non-string referrer ID
        """
        chain = self._validate_lineage(trade.user_id, lineage)
        amount = to_fee_amount(trade.fees)
        breakdown = self.calculator.compute_commissions(amount)
        has_referrer = chain[0] is not None

        if all(referrer_id is None for referrer_id in chain):
            logger.debug(
                "No referrers found for trader",
                extra={"user_id": trade.user_id, "fees": str(amount)},
            )

        allocations: list[LevelAllocation] = []
        unassigned = Decimal("0.00")

        for level, level_amount in breakdown.by_level().items():
            referrer_id = chain[level - 1]

            if referrer_id is None:
                unassigned += level_amount
                continue

            if level_amount <= 0:
                continue

            allocations.append(LevelAllocation(
                level=level,
                referrer_id=referrer_id,
                source_user_id=trade.user_id,
                amount=level_amount,
            ))

        paid_commissions = sum((a.amount for a in allocations), Decimal("0.00"))
        cashback = self.calculator.compute_cashback(amount) if has_referrer else Decimal("0.00")
        fees = round_currency(amount)
        treasury = fees - paid_commissions - cashback

        logger.info(
            "Trade fees distributed",
            extra={
                "user_id": trade.user_id,
                "fees": str(fees),
                "paid_commissions": str(paid_commissions),
                "cashback": str(cashback),
                "treasury": str(treasury),
                "allocations_count": len(allocations),
            },
        )

        return TradeDistribution(
            trade=trade,
            has_referrer=has_referrer,
            fees=fees,
            breakdown=breakdown,
            allocations=tuple(allocations),
            unassigned_commissions=unassigned,
            cashback=cashback,
            treasury=treasury,
        )

    def _validate_lineage(self, user_id: str, lineage: Lineage) -> list[str | None]:
        """Pad or truncate lineage to REFERRAL_DEPTH, rejecting loops."""
        chain: list[str | None] = []
        for referrer_id in lineage[:REFERRAL_DEPTH]:
            if referrer_id is None or referrer_id == "":
                chain.append(None)
            elif isinstance(referrer_id, str):
                chain.append(referrer_id)
            else:
                raise InvalidReferralChainError(
                    f"Referrer ID must be a string, got {type(referrer_id).__name__}"
                )
        chain += [None] * (REFERRAL_DEPTH - len(chain))

        referrer_ids = [r for r in chain if r is not None]

        if user_id in referrer_ids:
            logger.warning(
                "Self-referral in lineage",
                extra={"user_id": user_id, "chain_ids": referrer_ids},
            )
            raise InvalidReferralChainError(f"Trader {user_id} appears in own lineage")

        if len(set(referrer_ids)) != len(referrer_ids):
            logger.warning(
                "Referral loop detected",
                extra={"user_id": user_id, "chain_ids": referrer_ids},
            )
            raise InvalidReferralChainError(f"Duplicate referrer in lineage {referrer_ids}")

        return chain


def distribute_trade(trade: TradeData, lineage: Lineage) -> TradeDistribution:
    """Distribute trade fees at the program's fixed rates."""
    return FeeDistributor().distribute(trade, lineage)
