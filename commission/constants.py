"""
Default constants for commission calculator.

Contains the fixed rates of the 3-level referral cascade and
the currency precision used for every reported amount.
"""

from decimal import Decimal


# 3-level referral program: 30% / 3% / 2% of trading fees
REFERRAL_DEPTH = 3
COMMISSION_RATES = {
    1: Decimal("0.30"),  # 30% for level 1 (direct referrer)
    2: Decimal("0.03"),  # 3% for level 2
    3: Decimal("0.02"),  # 2% for level 3
}

# Returned to the trader when they were referred by someone
CASHBACK_RATE = Decimal("0.10")

# Currency minor unit (cents)
CURRENCY_QUANTUM = Decimal("0.01")

# Largest accepted fee and its significant digits; the calculation context
# keeps every product of such an amount and a rate exact
MAX_FEE_AMOUNT = Decimal("1000000000000000")
MAX_FEE_DIGITS = 30
CALCULATION_PRECISION = 60
