"""
Bank Simulator

A small banking ledger: checking and savings accounts, deposits and
withdrawals, monthly fee/interest processing, and account reports.
All monetary values use Decimal.
"""

__version__ = "1.0.0"
