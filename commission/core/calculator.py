"""
Pure business logic calculator for fee distribution.

Splits a trading fee into the 3-level referral commissions, the trader
cashback and the treasury remainder. No database, network or app-specific
dependencies.
"""

from decimal import Decimal

from commission.core.models import CommissionBreakdown, CommissionRates, FeeDistribution
from commission.utils.money import Numeric, calculation_context, round_currency, to_fee_amount


class CommissionCalculator:
    """
    Stateless fee distribution calculator.

    Commissions and cashback are rounded independently per field;
    the treasury is always the remainder, so the parts add up to the
    rounded fee exactly.
    """

    def __init__(self, rates: CommissionRates | None = None) -> None:
        """
        Initialize calculator.

        Args:
            rates: Commission and cashback rates (program defaults if omitted)
        """
        self.rates = rates or CommissionRates()

    def compute_commissions(self, fees: Numeric) -> CommissionBreakdown:
        """
        Calculate commissions for the 3-level referral cascade.

        Each level is ``fees * rate`` rounded to cents on its own; the total
        is the sum of the rounded levels, so it may differ by a cent from
        ``fees * 0.35`` rounded directly.

        Args:
            fees: Trading fees paid

        Returns:
            CommissionBreakdown by level

        Raises:
            InvalidFeeAmountError: If fees is negative, non-finite, too large or not a number

        Example:
            >>> calc = CommissionCalculator()
            >>> calc.compute_commissions(Decimal("33.33")).total
            Decimal('11.67')
        """
        amount = to_fee_amount(fees)

        with calculation_context():
            level1 = round_currency(amount * self.rates.level1)
            level2 = round_currency(amount * self.rates.level2)
            level3 = round_currency(amount * self.rates.level3)

        return CommissionBreakdown(
            level1=level1,
            level2=level2,
            level3=level3,
            total=level1 + level2 + level3,
        )

    def compute_cashback(self, fees: Numeric) -> Decimal:
        """
        Calculate cashback for a referred trader.

        Args:
            fees: Trading fees paid

        Returns:
            Cashback amount (10% of fees by default)

        Example:
            >>> CommissionCalculator().compute_cashback(Decimal("33.33"))
            Decimal('3.33')
        """
        amount = to_fee_amount(fees)
        with calculation_context():
            return round_currency(amount * self.rates.cashback)

    def compute_treasury_revenue(self, fees: Numeric) -> Decimal:
        """
        Calculate treasury revenue after commissions and cashback.

        Never a flat 55% of fees: the treasury takes whatever the rounded
        commissions and cashback leave, so for 0.01 it keeps the cent.

        Args:
            fees: Trading fees paid

        Returns:
            Treasury revenue

        Example:
            >>> CommissionCalculator().compute_treasury_revenue(Decimal("0.01"))
            Decimal('0.01')
        """
        amount = to_fee_amount(fees)
        commissions = self.compute_commissions(amount)
        cashback = self.compute_cashback(amount)
        with calculation_context():
            return round_currency(amount - commissions.total - cashback)

    def compute_distribution(self, fees: Numeric) -> FeeDistribution:
        """
        Calculate the complete split of a fee amount.

        Args:
            fees: Trading fees paid

        Returns:
            FeeDistribution with commissions, cashback and treasury
        """
        amount = to_fee_amount(fees)

        return FeeDistribution(
            fees=round_currency(amount),
            commissions=self.compute_commissions(amount),
            cashback=self.compute_cashback(amount),
            treasury=self.compute_treasury_revenue(amount),
        )


_default_calculator = CommissionCalculator()


def compute_commissions(fees: Numeric) -> CommissionBreakdown:
    """Commissions at the program's fixed rates."""
    return _default_calculator.compute_commissions(fees)


def compute_cashback(fees: Numeric) -> Decimal:
    """Cashback at the program's fixed rate."""
    return _default_calculator.compute_cashback(fees)


def compute_treasury_revenue(fees: Numeric) -> Decimal:
    """Treasury remainder at the program's fixed rates."""
    return _default_calculator.compute_treasury_revenue(fees)


def compute_distribution(fees: Numeric) -> FeeDistribution:
    return _default_calculator.compute_distribution(fees)
