"""
Test suite for configuration module

Tests defaults and TOKEN_LEDGER_* environment overrides.
"""

from token_ledger import config as config_module
from token_ledger.config import LedgerConfig, get_config, reload_config


class TestLedgerConfig:
    """Test configuration loading"""

    def test_defaults(self, monkeypatch):
        for name in ("TOKEN_NAME", "TOKEN_SYMBOL", "TOKEN_DECIMALS", "INITIAL_SUPPLY", "OWNER"):
            monkeypatch.delenv(f"TOKEN_LEDGER_{name}", raising=False)

        config = LedgerConfig(_env_file=None)

        assert config.token_name == "MyToken"
        assert config.token_symbol == "MTK"
        assert config.token_decimals == 18
        assert config.initial_supply == 1_000_000 * 10 ** 18
        assert config.owner == "alice"
        assert config.log_format == "json"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("TOKEN_LEDGER_TOKEN_SYMBOL", "ENV")
        monkeypatch.setenv("TOKEN_LEDGER_INITIAL_SUPPLY", "5000")
        monkeypatch.setenv("token_ledger_owner", "zoe")

        config = LedgerConfig(_env_file=None)

        assert config.token_symbol == "ENV"
        assert config.initial_supply == 5000
        assert config.owner == "zoe"

    def test_reload_config(self, monkeypatch):
        original = get_config()
        monkeypatch.setattr(config_module, "config", original)
        monkeypatch.setenv("TOKEN_LEDGER_LOG_LEVEL", "DEBUG")

        reloaded = reload_config()

        assert reloaded is get_config()
        assert reloaded is not original
        assert reloaded.log_level == "DEBUG"
