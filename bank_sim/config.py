"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .currency import Currency


class BankSimConfig(BaseSettings):
    """Bank simulator configuration"""

    model_config = SettingsConfigDict(
        env_prefix="BANKSIM_",
        env_file=".env",
        case_sensitive=False,
    )

    # Checking product
    checking_monthly_fee: Decimal = Decimal("10.00")
    checking_overdraft_limit: Decimal = Decimal("100.00")

    # Savings product
    savings_interest_rate: Decimal = Decimal("0.05")  # Applied once per month
    savings_minimum_balance: Decimal = Decimal("100.00")

    currency: str = "USD"

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "text"  # json or text

    @field_validator("checking_monthly_fee", "checking_overdraft_limit", "savings_minimum_balance")
    @classmethod
    def _non_negative(cls, value: Decimal) -> Decimal:
        if value < 0:
            raise ValueError("must not be negative")
        return value

    @field_validator("savings_interest_rate")
    @classmethod
    def _rate_in_range(cls, value: Decimal) -> Decimal:
        if value < 0 or value > 1:
            raise ValueError("interest rate must be between 0 and 1 (0-100%)")
        return value

    @field_validator("currency")
    @classmethod
    def _known_currency(cls, value: str) -> str:
        return Currency.from_code(value).code

    @field_validator("log_format")
    @classmethod
    def _known_log_format(cls, value: str) -> str:
        value = value.lower()
        if value not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return value

    @property
    def account_currency(self) -> Currency:
        return Currency.from_code(self.currency)


# Global configuration instance, built on first use
config: Optional[BankSimConfig] = None


def get_config() -> BankSimConfig:
    """
    Get global configuration instance

    Raises:
        pydantic.ValidationError: If the environment holds an invalid setting
    """
    global config
    if config is None:
        config = BankSimConfig()
    return config


def reload_config() -> BankSimConfig:
    """Reload configuration from environment"""
    global config
    config = BankSimConfig()
    return config
