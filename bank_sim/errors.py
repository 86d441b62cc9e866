"""
Banking Errors

Validation failures raised at the point of violation. Insufficient funds
is not an error: ``Account.withdraw`` reports it by returning False.
"""


class BankingError(Exception):
    """Base class for all banking validation failures"""


class InvalidAmount(BankingError):
    """Deposit or withdrawal amount is zero or negative"""

    def __init__(self, operation: str, amount):
        self.operation = operation
        self.amount = amount
        super().__init__(f"{operation.capitalize()} amount must be positive")


class NegativeInitialBalance(BankingError):
    """Account opened with a negative starting balance"""

    def __init__(self, initial_balance):
        self.initial_balance = initial_balance
        super().__init__("Initial balance cannot be negative")


class BelowMinimumBalance(BankingError):
    """Savings account opened below its required minimum"""

    def __init__(self, initial_balance, minimum):
        self.initial_balance = initial_balance
        self.minimum = minimum
        super().__init__(
            f"Minimum initial balance for Savings is {minimum.format()}"
        )
