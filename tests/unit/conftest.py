"""
Shared fixtures for unit tests.

This module provides common fixtures used across multiple test modules:
- CommissionCalculator instance
- FeeDistributor instance
- Sample trade
"""

from decimal import Decimal

import pytest

from commission import CommissionCalculator, FeeDistributor, TradeData


@pytest.fixture
def calc() -> CommissionCalculator:
    """
    Calculator with the program's fixed rates.

    Returns:
        CommissionCalculator: Default calculator
    """
    return CommissionCalculator()


@pytest.fixture
def distributor(calc: CommissionCalculator) -> FeeDistributor:
    """Distributor backed by the default calculator."""
    return FeeDistributor(calc)


@pytest.fixture
def sample_trade() -> TradeData:
    """Trade paying $100 in fees."""
    return TradeData(user_id="trader-1", volume=Decimal("100000"), fees=Decimal("100"))
