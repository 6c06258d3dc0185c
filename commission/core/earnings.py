"""
Referral earnings summary.

Aggregates commission allocations of one referrer by level.
"""

from collections.abc import Iterable
from decimal import Decimal

from commission.constants import REFERRAL_DEPTH
from commission.core.models import EarningsSummary, LevelAllocation, LevelEarnings


def summarize_earnings(
    referrer_id: str,
    allocations: Iterable[LevelAllocation],
) -> EarningsSummary:
    """
    Summarize a referrer's earnings.

    Allocations belonging to other referrers are ignored. All levels
    are present in the result, with zero amounts where nothing was earned.

    Args:
        referrer_id: Referrer to summarize
        allocations: Allocations from any number of trade distributions

    Returns:
        EarningsSummary with per-level amounts and counts
    """
    amounts = {level: Decimal("0.00") for level in range(1, REFERRAL_DEPTH + 1)}
    counts = {level: 0 for level in amounts}
    source_users: set[str] = set()

    for allocation in allocations:
        if allocation.referrer_id != referrer_id:
            continue
        amounts[allocation.level] += allocation.amount
        counts[allocation.level] += 1
        source_users.add(allocation.source_user_id)

    levels = tuple(
        LevelEarnings(level=level, amount=amounts[level], commission_count=counts[level])
        for level in amounts
    )

    return EarningsSummary(
        referrer_id=referrer_id,
        levels=levels,
        total_earned=sum(amounts.values(), Decimal("0.00")),
        commission_count=sum(counts.values()),
        source_user_count=len(source_users),
    )
