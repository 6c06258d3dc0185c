"""
Exception types for commission calculations.

Both concrete errors subclass ValueError so callers validating
upstream data can keep catching the built-in type.
"""


class CommissionError(Exception):
    """Base class for commission calculation errors."""
    pass


class InvalidFeeAmountError(CommissionError, ValueError):
    """Raised when a fee amount is negative, non-finite or not a number."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid fee amount {value!r}: {reason}")


class InvalidReferralChainError(CommissionError, ValueError):
    """Raised when a referral lineage contains a self-referral or a loop."""
    pass
