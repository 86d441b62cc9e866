"""
Bank Ledger Module

The bank's collection of accounts. Accounts are kept in registration
order; lookups hand out the stored account object itself, so changes made
through a found account are visible to every later lookup.
"""

from typing import Iterator, List, Optional, Tuple

from .accounts import Account, AccountSnapshot
from .currency import Money, Currency
from .logging_config import get_logger, log_action

logger = get_logger(__name__)


class Ledger:
    """
    Owns the bank's accounts and runs the monthly processing over them

    Account numbers are not required to be unique: ``find`` returns the
    first account registered under a number.
    """

    def __init__(self, currency: Currency = Currency.USD):
        self.currency = currency
        self._accounts: List[Account] = []

    def register(self, account: Account) -> None:
        """Add an account to the end of the ledger"""
        if self.find(account.account_number) is not None:
            log_action(
                logger, "warning",
                f"Account number {account.account_number} is already registered; "
                "lookups will return the earlier account",
                action="register_duplicate", account_number=account.account_number
            )
        self._accounts.append(account)
        log_action(
            logger, "info", f"Registered {account.account_type.value} account {account.account_number}",
            action="register", account_number=account.account_number,
            extra={'holder_name': account.holder_name, 'balance': str(account.balance.amount)}
        )

    def find(self, account_number: str) -> Optional[Account]:
        """Return the first account with this number, or None"""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def process_periodic_updates(self) -> None:
        """Apply the monthly fee or interest to every account in registration order"""
        for account in self._accounts:
            account.apply_periodic_adjustment()
        log_action(
            logger, "info", f"Processed monthly updates for {len(self._accounts)} accounts",
            action="periodic_updates", extra={'account_count': len(self._accounts)}
        )

    def generate_report(self) -> List[AccountSnapshot]:
        """Describe every account in registration order"""
        return [account.describe() for account in self._accounts]

    def total_balance(self) -> Money:
        """Sum of all account balances"""
        total = Money.zero(self.currency)
        for account in self._accounts:
            total = total + account.balance
        return total

    @property
    def accounts(self) -> Tuple[Account, ...]:
        return tuple(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(tuple(self._accounts))
