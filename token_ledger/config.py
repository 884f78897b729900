"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class LedgerConfig(BaseSettings):
    """Token ledger configuration"""
    
    # Token metadata used when a ledger is built from configuration
    token_name: str = "MyToken"
    token_symbol: str = "MTK"
    token_decimals: int = 18
    initial_supply: int = 1_000_000 * 10 ** 18  # 1 million tokens with 18 decimals
    owner: str = "alice"
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    class Config:
        env_prefix = "TOKEN_LEDGER_"
        env_file = ".env"
        case_sensitive = False


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
