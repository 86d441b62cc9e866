"""
Account Management Module

Account capability shared by all products and the two concrete products:
checking accounts (monthly fee, limited overdraft) and savings accounts
(monthly interest, minimum opening balance).
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union
from enum import Enum

from .currency import Money, Currency, as_money, to_decimal
from .errors import BankingError, InvalidAmount, NegativeInitialBalance, BelowMinimumBalance
from .config import BankSimConfig, get_config
from .logging_config import get_logger, log_action

logger = get_logger(__name__)

Amount = Union[Money, Decimal, int, float, str]


class AccountType(Enum):
    """Banking product types"""
    CHECKING = "Checking"
    SAVINGS = "Savings"


@dataclass(frozen=True)
class AccountSnapshot:
    """
    Point-in-time description of an account for display
    Variant-specific fields live in ``details`` in display order
    """
    account_number: str
    holder_name: str
    account_type: AccountType
    balance: Money
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-friendly dictionary, money rounded to the currency precision"""
        result = {
            'account_number': self.account_number,
            'holder_name': self.holder_name,
            'account_type': self.account_type.value,
            'balance': str(self.balance.rounded().amount),
            'currency': self.balance.currency.code,
        }
        for key, value in self.details.items():
            result[key] = str(value.rounded().amount) if isinstance(value, Money) else str(value)
        return result


class Account(ABC):
    """
    Bank account holding identity and a balance

    Account number and holder name are fixed at construction; the balance
    only changes through deposit, withdraw and the periodic adjustment.
    """

    account_type: AccountType

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: Amount = Decimal('0'),
        currency: Currency = Currency.USD
    ):
        balance = as_money(initial_balance, currency)
        if balance.is_negative():
            raise NegativeInitialBalance(balance)

        self._account_number = account_number
        self._holder_name = holder_name
        self._currency = currency
        self._balance = balance

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def holder_name(self) -> str:
        return self._holder_name

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def balance(self) -> Money:
        return self._balance

    @property
    def available_funds(self) -> Money:
        """Largest amount a single withdrawal may take"""
        return self._balance

    def _validate_amount(self, amount: Amount, operation: str) -> Money:
        # Money keeps every digit, so sub-cent amounts are still positive
        money = as_money(amount, self._currency)
        if not money.is_positive():
            raise InvalidAmount(operation, money)
        return money

    def deposit(self, amount: Amount) -> None:
        """
        Add funds to the account

        Raises:
            InvalidAmount: If amount is zero or negative
        """
        money = self._validate_amount(amount, "deposit")
        self._balance = self._balance + money
        log_action(
            logger, "debug", f"Deposited {money.format()} to {self._account_number}",
            action="deposit", account_number=self._account_number,
            extra={'amount': str(money.amount), 'balance': str(self._balance.amount)}
        )

    def withdraw(self, amount: Amount) -> bool:
        """
        Take funds from the account

        Returns:
            True if the withdrawal was applied, False if it exceeds the
            available funds (balance unchanged)

        Raises:
            InvalidAmount: If amount is zero or negative
        """
        money = self._validate_amount(amount, "withdrawal")
        if money > self.available_funds:
            log_action(
                logger, "info", f"Withdrawal of {money.format()} from {self._account_number} declined",
                action="withdraw_declined", account_number=self._account_number,
                extra={'amount': str(money.amount), 'available': str(self.available_funds.amount)}
            )
            return False

        self._balance = self._balance - money
        log_action(
            logger, "debug", f"Withdrew {money.format()} from {self._account_number}",
            action="withdraw", account_number=self._account_number,
            extra={'amount': str(money.amount), 'balance': str(self._balance.amount)}
        )
        return True

    @abstractmethod
    def apply_periodic_adjustment(self) -> None:
        """Apply the monthly fee or interest for this product"""

    @abstractmethod
    def _details(self) -> Dict[str, Any]:
        """Product-specific fields for describe()"""

    def describe(self) -> AccountSnapshot:
        """Snapshot of the account for reporting; does not modify the account"""
        return AccountSnapshot(
            account_number=self._account_number,
            holder_name=self._holder_name,
            account_type=self.account_type,
            balance=self._balance,
            details=self._details()
        )

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(account_number={self._account_number!r}, "
                f"holder_name={self._holder_name!r}, balance={self._balance.to_string()!r})")


class CheckingAccount(Account):
    """
    Checking account with a flat monthly fee and a limited overdraft
    The fee is skipped entirely when the balance cannot cover it
    """

    account_type = AccountType.CHECKING

    MONTHLY_FEE = Decimal('10.00')
    OVERDRAFT_LIMIT = Decimal('100.00')

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: Amount = Decimal('0'),
        monthly_fee: Amount = MONTHLY_FEE,
        overdraft_limit: Amount = OVERDRAFT_LIMIT,
        currency: Currency = Currency.USD
    ):
        super().__init__(account_number, holder_name, initial_balance, currency)
        self._monthly_fee = as_money(monthly_fee, currency)
        self._overdraft_limit = as_money(overdraft_limit, currency)

        if self._monthly_fee.is_negative():
            raise ValueError("Monthly fee cannot be negative")
        if self._overdraft_limit.is_negative():
            raise ValueError("Overdraft limit cannot be negative")

    @property
    def monthly_fee(self) -> Money:
        return self._monthly_fee

    @property
    def overdraft_limit(self) -> Money:
        return self._overdraft_limit

    @property
    def available_funds(self) -> Money:
        return self._balance + self._overdraft_limit

    def apply_periodic_adjustment(self) -> None:
        if self._balance >= self._monthly_fee:
            self._balance = self._balance - self._monthly_fee
            log_action(
                logger, "debug", f"Charged monthly fee {self._monthly_fee.format()} to {self._account_number}",
                action="monthly_fee", account_number=self._account_number,
                extra={'fee': str(self._monthly_fee.amount), 'balance': str(self._balance.amount)}
            )
        else:
            log_action(
                logger, "info", f"Monthly fee waived for {self._account_number}: insufficient balance",
                action="monthly_fee_waived", account_number=self._account_number,
                extra={'fee': str(self._monthly_fee.amount), 'balance': str(self._balance.amount)}
            )

    def _details(self) -> Dict[str, Any]:
        return {
            'monthly_fee': self._monthly_fee,
            'overdraft_limit': self._overdraft_limit,
        }


class SavingsAccount(Account):
    """
    Savings account earning monthly interest on the full balance
    No overdraft; must be opened with at least the minimum balance
    """

    account_type = AccountType.SAVINGS

    INTEREST_RATE = Decimal('0.05')
    MINIMUM_BALANCE = Decimal('100.00')

    def __init__(
        self,
        account_number: str,
        holder_name: str,
        initial_balance: Amount = Decimal('0'),
        interest_rate: Union[Decimal, float, str] = INTEREST_RATE,
        minimum_balance: Amount = MINIMUM_BALANCE,
        currency: Currency = Currency.USD
    ):
        super().__init__(account_number, holder_name, initial_balance, currency)
        self._interest_rate = to_decimal(interest_rate)
        self._minimum_balance = as_money(minimum_balance, currency)

        if self._interest_rate < Decimal('0'):
            raise ValueError("Interest rate cannot be negative")
        if self._balance < self._minimum_balance:
            raise BelowMinimumBalance(self._balance, self._minimum_balance)

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    @property
    def minimum_balance(self) -> Money:
        return self._minimum_balance

    def apply_periodic_adjustment(self) -> None:
        interest = self._balance * self._interest_rate
        self._balance = self._balance + interest
        log_action(
            logger, "debug", f"Credited interest {interest.format()} to {self._account_number}",
            action="interest", account_number=self._account_number,
            extra={'interest': str(interest.amount), 'balance': str(self._balance.amount)}
        )

    def _details(self) -> Dict[str, Any]:
        return {
            'interest_rate': self._interest_rate,
            'minimum_balance': self._minimum_balance,
        }


@dataclass(frozen=True)
class OpenAccountResult:
    """Outcome of opening an account: either an account or the validation error"""
    account: Optional[Account] = None
    error: Optional[BankingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Account:
        """Return the account, raising the stored error if opening failed"""
        if self.error is not None:
            raise self.error
        return self.account


def open_checking(
    account_number: str,
    holder_name: str,
    initial_balance: Amount = Decimal('0'),
    settings: Optional[BankSimConfig] = None
) -> OpenAccountResult:
    """Open a checking account using the configured fee and overdraft limit"""
    settings = settings or get_config()
    try:
        account = CheckingAccount(
            account_number, holder_name, initial_balance,
            monthly_fee=settings.checking_monthly_fee,
            overdraft_limit=settings.checking_overdraft_limit,
            currency=settings.account_currency
        )
    except BankingError as e:
        return OpenAccountResult(error=e)
    return OpenAccountResult(account=account)


def open_savings(
    account_number: str,
    holder_name: str,
    initial_balance: Amount = Decimal('0'),
    settings: Optional[BankSimConfig] = None
) -> OpenAccountResult:
    """Open a savings account using the configured interest rate and minimum"""
    settings = settings or get_config()
    try:
        account = SavingsAccount(
            account_number, holder_name, initial_balance,
            interest_rate=settings.savings_interest_rate,
            minimum_balance=settings.savings_minimum_balance,
            currency=settings.account_currency
        )
    except BankingError as e:
        return OpenAccountResult(error=e)
    return OpenAccountResult(account=account)


def open_account(
    account_type: AccountType,
    account_number: str,
    holder_name: str,
    initial_balance: Amount = Decimal('0'),
    settings: Optional[BankSimConfig] = None
) -> OpenAccountResult:
    """Open an account of the given product type"""
    if account_type == AccountType.CHECKING:
        return open_checking(account_number, holder_name, initial_balance, settings)
    if account_type == AccountType.SAVINGS:
        return open_savings(account_number, holder_name, initial_balance, settings)
    raise ValueError(f"Unsupported account type: {account_type}")
