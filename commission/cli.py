"""
Print the distribution of a trading fee.

Usage:
    commission-breakdown 100
    commission-breakdown 33.33 --trader u1 --referrers r1 r2 r3
    commission-breakdown 0.01 --lang ru

Arguments:
    fees: Trading fee amount in base currency units
    --trader: Trader user ID (used with --referrers)
    --referrers: Referrer IDs, direct referrer first; "-" marks a gap
    --currency: Currency label for output
    --lang: Report language (en or ru)
    --log-level: Log level for stderr
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from loguru import logger

from commission.config import get_settings
from commission.core.calculator import CommissionCalculator
from commission.core.distributor import FeeDistributor
from commission.core.models import TradeData
from commission.exceptions import CommissionError
from commission.logging import setup_logging
from commission.utils.formatters import (
    format_distribution,
    format_distribution_ru,
    format_trade_distribution,
)
from commission.utils.money import to_fee_amount


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="commission-breakdown",
        description="Split a trading fee into referral commissions, cashback and treasury revenue.",
    )
    parser.add_argument("fees", help="Trading fee amount")
    parser.add_argument("--trader", default="trader", help="Trader user ID")
    parser.add_argument(
        "--referrers",
        nargs="*",
        default=None,
        help='Referrer IDs ordered by level; "-" marks a missing referrer',
    )
    parser.add_argument("--currency", default="USD", help="Currency label")
    parser.add_argument("--lang", choices=("en", "ru"), default="en", help="Report language")
    parser.add_argument("--log-level", default=None, help="Log level (default from settings)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run CLI and return exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
        setup_logging(args.log_level.upper() if args.log_level else settings.log_level, settings.log_file)
        calculator = CommissionCalculator(settings.rates)
        fees = to_fee_amount(args.fees)

        if args.referrers is None:
            distribution = calculator.compute_distribution(fees)
            if args.lang == "ru":
                report = format_distribution_ru(distribution, args.currency)
            else:
                report = format_distribution(distribution, args.currency)
        else:
            lineage = [None if r == "-" else r for r in args.referrers]
            trade = TradeData(user_id=args.trader, fees=fees)
            result = FeeDistributor(calculator).distribute(trade, lineage)
            report = format_trade_distribution(result, args.currency)
    except (CommissionError, ValueError) as exc:
        logger.error(f"Cannot compute distribution: {exc}")
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
