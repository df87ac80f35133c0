"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from decimal import Decimal

from pydantic_settings import BaseSettings

from .currency import Currency, decimal_from_string


class LedgerConfig(BaseSettings):
    """Account ledger configuration"""

    # Business rules configuration
    opening_balance: str = "0.00"
    overdraft_threshold: str = "0.00"  # Minimum balance allowed after a withdrawal
    suspicious_amount_threshold: str = "10000.00"
    currency: str = "USD"

    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text

    class Config:
        env_prefix = "LEDGER_"
        env_file = ".env"
        case_sensitive = False

    @property
    def opening_balance_amount(self) -> Decimal:
        return decimal_from_string(self.opening_balance)

    @property
    def overdraft_threshold_amount(self) -> Decimal:
        return decimal_from_string(self.overdraft_threshold)

    @property
    def suspicious_threshold_amount(self) -> Decimal:
        return decimal_from_string(self.suspicious_amount_threshold)

    @property
    def display_currency(self) -> Currency:
        return Currency.from_code(self.currency)


# Global configuration instance
config = LedgerConfig()


def get_config() -> LedgerConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LedgerConfig:
    """Reload configuration from environment"""
    global config
    config = LedgerConfig()
    return config
