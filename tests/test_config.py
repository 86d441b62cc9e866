"""
Test suite for configuration management
"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from bank_sim import config as config_module
from bank_sim.config import BankSimConfig, get_config, reload_config
from bank_sim.currency import Currency


class TestBankSimConfig:
    """Test settings defaults and environment overrides"""

    def test_defaults(self, clean_env):
        settings = BankSimConfig()

        assert settings.checking_monthly_fee == Decimal('10.00')
        assert settings.checking_overdraft_limit == Decimal('100.00')
        assert settings.savings_interest_rate == Decimal('0.05')
        assert settings.savings_minimum_balance == Decimal('100.00')
        assert settings.account_currency is Currency.USD
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("BANKSIM_CHECKING_MONTHLY_FEE", "12.50")
        clean_env.setenv("BANKSIM_SAVINGS_INTEREST_RATE", "0.02")
        clean_env.setenv("banksim_log_format", "JSON")

        settings = BankSimConfig()

        assert settings.checking_monthly_fee == Decimal('12.50')
        assert settings.savings_interest_rate == Decimal('0.02')
        assert settings.log_format == "json"

    @pytest.mark.parametrize("name, value", [
        ("BANKSIM_CHECKING_MONTHLY_FEE", "-1"),
        ("BANKSIM_CHECKING_OVERDRAFT_LIMIT", "-0.01"),
        ("BANKSIM_SAVINGS_MINIMUM_BALANCE", "-100"),
        ("BANKSIM_SAVINGS_INTEREST_RATE", "1.5"),
        ("BANKSIM_CURRENCY", "XYZ"),
        ("BANKSIM_LOG_FORMAT", "yaml"),
    ])
    def test_invalid_values(self, clean_env, name, value):
        clean_env.setenv(name, value)
        with pytest.raises(ValidationError):
            BankSimConfig()

    def test_reload_config(self, clean_env):
        clean_env.setenv("BANKSIM_SAVINGS_MINIMUM_BALANCE", "250")

        reloaded = reload_config()

        assert reloaded is get_config()
        assert reloaded is config_module.config
        assert get_config().savings_minimum_balance == Decimal('250')
