"""
Bank Simulator Driver

Opens a checking and a savings account, moves some money, runs the
monthly processing and prints the account report. Validation failures are
reported on stderr; the process still exits with status 0.
"""

import argparse
import sys
from decimal import Decimal
from typing import List, Optional

from pydantic import ValidationError

from .accounts import open_checking, open_savings
from .config import BankSimConfig, get_config
from .errors import BankingError
from .ledger import Ledger
from .logging_config import setup_logging
from .reporting import ReportFormat, render_report


def parse_args(argv: Optional[List[str]] = None,
               settings: Optional[BankSimConfig] = None) -> argparse.Namespace:
    settings = settings or get_config()
    parser = argparse.ArgumentParser(
        prog="bank_sim",
        description="Run the bank ledger demonstration",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in ReportFormat if f != ReportFormat.DICT],
        default=ReportFormat.TEXT.value,
        help="Report output format (default: text)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help=f"Log level (default: {settings.log_level})",
    )
    parser.add_argument(
        "--log-format",
        default=settings.log_format,
        choices=["text", "json"],
        help=f"Log output format (default: {settings.log_format})",
    )
    return parser.parse_args(argv)


def run_demo(report_format: ReportFormat = ReportFormat.TEXT) -> Ledger:
    """Run the demonstration sequence and print its output to stdout"""
    bank = Ledger(get_config().account_currency)

    bank.register(open_checking("CH001", "John Doe", Decimal("500.00")).unwrap())
    bank.register(open_savings("SV001", "Jane Smith", Decimal("1000.00")).unwrap())

    john = bank.find("CH001")
    if john is not None:
        print(f"Initial {john.holder_name}'s balance: {john.balance.format()}")
        john.deposit(Decimal("200.00"))
        john.withdraw(Decimal("50.00"))
        print(f"Updated {john.holder_name}'s balance: {john.balance.format()}")

    bank.process_periodic_updates()

    print("\nAccounts after monthly updates:")
    output = render_report(bank.generate_report(), report_format)
    print(output, end="" if output.endswith("\n") else "\n")
    return bank


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = get_config()
    except ValidationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 0

    args = parse_args(argv, settings)
    setup_logging(level=args.log_level, log_format=args.log_format)

    try:
        run_demo(ReportFormat(args.format))
    except BankingError as e:
        print(f"Banking Error: {e}", file=sys.stderr)
    except Exception as e:
        print(f"Unexpected Error: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
