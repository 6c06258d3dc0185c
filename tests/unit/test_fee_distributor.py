"""
Tests for lineage-aware fee distribution.

Levels without a referrer and the cashback of an unreferred trader
stay with the treasury; the split always adds up to the fee.
"""

from decimal import Decimal
from itertools import product

import pytest

from commission import (
    FeeDistributor,
    InvalidReferralChainError,
    TradeData,
    distribute_trade,
)


class TestFullLineage:
    """Trader with all three referrers."""

    def test_every_level_paid(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test each referrer gets its level commission."""
        result = distributor.distribute(sample_trade, ["r1", "r2", "r3"])

        paid = {(a.level, a.referrer_id): a.amount for a in result.allocations}
        assert paid == {
            (1, "r1"): Decimal("30.00"),
            (2, "r2"): Decimal("3.00"),
            (3, "r3"): Decimal("2.00"),
        }
        assert all(a.source_user_id == "trader-1" for a in result.allocations)
        assert result.cashback == Decimal("10.00")
        assert result.treasury == Decimal("55.00")
        assert result.unassigned_commissions == Decimal("0.00")
        assert result.has_referrer is True

    def test_matches_plain_calculator(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test full lineage reproduces the plain distribution."""
        result = distributor.distribute(sample_trade, ("r1", "r2", "r3"))
        plain = distributor.calculator.compute_distribution(sample_trade.fees)

        assert result.paid_commissions == plain.commissions.total
        assert result.breakdown == plain.commissions
        assert result.cashback == plain.cashback
        assert result.treasury == plain.treasury

    def test_extra_levels_ignored(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test referrers past level 3 get nothing."""
        result = distributor.distribute(sample_trade, ["r1", "r2", "r3", "r4", "r5"])

        assert [a.referrer_id for a in result.allocations] == ["r1", "r2", "r3"]
        assert result.treasury == Decimal("55.00")


class TestPartialLineage:
    """Missing referrers leave their share to the treasury."""

    def test_only_direct_referrer(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test levels 2 and 3 go to treasury."""
        result = distributor.distribute(sample_trade, ["r1"])

        assert len(result.allocations) == 1
        assert result.allocations[0].amount == Decimal("30.00")
        assert result.unassigned_commissions == Decimal("5.00")
        assert result.cashback == Decimal("10.00")
        assert result.treasury == Decimal("60.00")

    def test_gap_in_lineage(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test missing direct referrer also cancels cashback."""
        result = distributor.distribute(sample_trade, [None, "r2", "r3"])

        assert [a.level for a in result.allocations] == [2, 3]
        assert result.unassigned_commissions == Decimal("30.00")
        assert result.has_referrer is False
        assert result.cashback == Decimal("0.00")
        assert result.treasury == Decimal("95.00")

    def test_empty_string_is_missing(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test blank referrer IDs count as missing."""
        result = distributor.distribute(sample_trade, ["r1", "", None])
        assert [a.level for a in result.allocations] == [1]


class TestNoReferrer:
    """Unreferred trader."""

    def test_everything_to_treasury(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test treasury keeps the whole fee."""
        result = distributor.distribute(sample_trade, [])

        assert result.allocations == ()
        assert result.cashback == Decimal("0.00")
        assert result.unassigned_commissions == Decimal("35.00")
        assert result.treasury == Decimal("100.00")

    def test_no_referrer_logged(self, distributor: FeeDistributor, sample_trade: TradeData, log_records) -> None:
        """Test missing referrers produce a debug record."""
        distributor.distribute(sample_trade, [None, None, None])

        messages = [r["message"] for r in log_records]
        assert "No referrers found for trader" in messages
        assert "Trade fees distributed" in messages


class TestSmallFees:
    """Levels rounded to zero are not allocated."""

    def test_one_cent_with_full_lineage(self, distributor: FeeDistributor) -> None:
        """Test a cent produces no allocations but keeps conservation."""
        trade = TradeData(user_id="t", fees=Decimal("0.01"))
        result = distributor.distribute(trade, ["r1", "r2", "r3"])

        assert result.allocations == ()
        assert result.has_referrer is True
        assert result.cashback == Decimal("0.00")
        assert result.treasury == Decimal("0.01")

    def test_zero_fees(self, distributor: FeeDistributor) -> None:
        """Test zero fees distribute nothing."""
        trade = TradeData(user_id="t", fees=Decimal("0"))
        result = distributor.distribute(trade, ["r1"])

        assert result.allocations == ()
        assert result.treasury == Decimal("0.00")


class TestConservation:
    """Allocations, cashback and treasury add up to the fee."""

    LINEAGES = [list(shape) for shape in product(["r1", None], ["r2", None], ["r3", None])]

    @pytest.mark.parametrize("lineage", LINEAGES)
    def test_every_lineage_shape(self, distributor: FeeDistributor, lineage: list) -> None:
        """Test conservation for all lineage shapes across cent amounts."""
        for cents in range(0, 1001, 7):
            fees = Decimal(cents) / 100
            result = distributor.distribute(TradeData(user_id="t", fees=fees), lineage)

            assert result.paid_commissions + result.cashback + result.treasury == fees
            assert result.paid_commissions + result.unassigned_commissions == result.breakdown.total
            assert result.treasury >= 0


class TestInvalidLineage:
    """Self-referrals and loops are rejected."""

    def test_trader_in_own_lineage(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test self-referral raises."""
        with pytest.raises(InvalidReferralChainError):
            distributor.distribute(sample_trade, ["r1", "trader-1"])

    def test_duplicate_referrer(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test loop in the chain raises."""
        with pytest.raises(InvalidReferralChainError):
            distributor.distribute(sample_trade, ["r1", "r2", "r1"])

    @pytest.mark.parametrize("referrer_id", [0, 42, False, b"r1", 1.5])
    def test_non_string_referrer(self, distributor: FeeDistributor, sample_trade: TradeData, referrer_id) -> None:
        """Test only strings are accepted as referrer IDs."""
        with pytest.raises(InvalidReferralChainError):
            distributor.distribute(sample_trade, ["r1", referrer_id])

    def test_duplicate_past_depth_ignored(self, distributor: FeeDistributor, sample_trade: TradeData) -> None:
        """Test only the first three levels are checked."""
        result = distributor.distribute(sample_trade, ["r1", "r2", "r3", "r1"])
        assert len(result.allocations) == 3


class TestTradeData:
    """Trade model validation."""

    def test_negative_fees_rejected(self) -> None:
        """Test trade with negative fees cannot be built."""
        with pytest.raises(ValueError):
            TradeData(user_id="t", fees=Decimal("-1"))

    def test_module_function(self) -> None:
        """Test distribute_trade uses default rates."""
        result = distribute_trade(TradeData(user_id="t", fees=Decimal("10")), ["r1", "r2", "r3"])

        assert result.paid_commissions == Decimal("3.50")
        assert result.treasury == Decimal("5.50")
