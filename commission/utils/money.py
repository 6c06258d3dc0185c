"""
Money helpers.

Coercion of incoming fee values to Decimal and rounding
to currency precision.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, getcontext, localcontext
from typing import NoReturn, Union

from loguru import logger

from commission.constants import (
    CALCULATION_PRECISION,
    CURRENCY_QUANTUM,
    MAX_FEE_AMOUNT,
    MAX_FEE_DIGITS,
)
from commission.exceptions import InvalidFeeAmountError


Numeric = Union[Decimal, int, float, str]


def calculation_context():
    """
    Decimal context for fee arithmetic.

    Precision is wide enough that products of any accepted fee and a
    rate are exact, so the only rounding is the half-up quantize to cents.
    """
    context = getcontext().copy()
    context.prec = CALCULATION_PRECISION
    return localcontext(context)


def round_currency(value: Decimal) -> Decimal:
    """
    Round value to currency precision (2 decimal places).

    Ties are rounded away from zero, so for non-negative amounts this
    matches ``round(x * 100) / 100`` where ``.5`` rounds up.

    Args:
        value: Amount to round

    Returns:
        Amount quantized to 0.01

    Example:
        >>> round_currency(Decimal("0.005"))
        Decimal('0.01')
        >>> round_currency(Decimal("9.999"))
        Decimal('10.00')
    """
    with calculation_context():
        return value.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def to_fee_amount(value: Numeric) -> Decimal:
    """
    Convert input to a validated fee amount.

    Floats go through ``str()`` first so that ``33.33`` becomes
    ``Decimal("33.33")`` and not its binary approximation.

    Args:
        value: Fee amount as Decimal, int, float or numeric string

    Returns:
        Non-negative finite Decimal

    Raises:
        InvalidFeeAmountError: If value is not a number, is negative,
            NaN, infinite, above MAX_FEE_AMOUNT or longer than
            MAX_FEE_DIGITS significant digits
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        _reject(value, "must be a Decimal, int, float or numeric string")

    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            _reject(value, "not a number")

    if not amount.is_finite():
        _reject(value, "must be finite")

    if amount < 0:
        _reject(value, "must not be negative")

    if amount > MAX_FEE_AMOUNT:
        _reject(value, f"must not exceed {MAX_FEE_AMOUNT}")

    if _significant_digits(amount) > MAX_FEE_DIGITS:
        _reject(value, f"more than {MAX_FEE_DIGITS} significant digits")

    # "-0" is a valid zero
    return abs(amount) if amount.is_zero() else amount


def _significant_digits(amount: Decimal) -> int:
    coefficient = "".join(str(digit) for digit in amount.as_tuple().digits)
    return len(coefficient.rstrip("0"))


def _reject(value: object, reason: str) -> NoReturn:
    logger.warning(
        "Fee amount rejected",
        extra={"value": repr(value), "reason": reason},
    )
    raise InvalidFeeAmountError(value, reason)
