import pytest
import yaml

from ledgerfees.config import (
    ConfigRegistry,
    Environment,
    FileConfigProvider,
    LedgerConfig,
    LedgerNetwork,
    RuntimeConfigProvider,
    SystemConfig,
    get_config_registry,
    get_ledger_config,
    get_ledger_preset,
    get_system_config,
    list_available_ledger_presets,
    validate_ledger_config
)
from ledgerfees.config.system import get_system_validator
from ledgerfees.core.exceptions import ConfigurationError


class TestSystemConfig:

    def test_defaults(self):
        config = SystemConfig()

        assert config.environment is Environment.DEVELOPMENT
        assert config.log_level == "INFO"
        assert config.json_logs is False

    def test_log_level_normalized(self):
        assert SystemConfig(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ConfigurationError):
            SystemConfig(log_level="LOUD")

    def test_unknown_environment(self):
        with pytest.raises(ConfigurationError):
            SystemConfig.from_dict({"environment": "moon"})

    def test_env_overrides(self):
        config = SystemConfig.from_env(
            {"log_level": "WARNING"},
            environ={"LEDGERFEES_ENV": "production", "LEDGERFEES_JSON_LOGS": "true"}
        )

        assert config.environment is Environment.PRODUCTION
        assert config.log_level == "WARNING"
        assert config.json_logs is True

    def test_env_from_process(self, monkeypatch):
        monkeypatch.setenv("LEDGERFEES_LOG_LEVEL", "error")

        assert SystemConfig.from_env().log_level == "ERROR"

    def test_validator(self):
        validator = get_system_validator()

        assert validator.validate({"log_level": "INFO", "debug": False}).is_valid
        assert not validator.validate({"debug": "no"}).is_valid
        assert not validator.validate({"verbosity": 3}).is_valid
        assert not validator.validate({"environment": "moon"}).is_valid


class TestLedgerConfig:

    def test_defaults(self):
        config = LedgerConfig()

        assert config.max_custom_fees == 10
        assert config.enforce_fee_limit is True
        assert config.smallest_units_per_native == 100_000_000

    @pytest.mark.parametrize("kwargs", [
        {"max_custom_fees": 0},
        {"max_custom_fees": True},
        {"native_decimals": 19},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            LedgerConfig(**kwargs)

    def test_from_dict(self):
        config = LedgerConfig.from_dict({"network": "mainnet", "max_custom_fees": 5})

        assert config.network is LedgerNetwork.MAINNET
        assert config.max_custom_fees == 5
        assert LedgerConfig.from_dict(config.to_dict()) == config

    def test_unknown_network(self):
        with pytest.raises(ConfigurationError):
            LedgerConfig.from_dict({"network": "moonnet"})

    def test_presets(self):
        assert set(list_available_ledger_presets()) == {'mainnet', 'testnet', 'previewnet', 'local'}
        assert get_ledger_preset('mainnet').network is LedgerNetwork.MAINNET
        assert get_ledger_preset('local').enforce_fee_limit is False
        with pytest.raises(ConfigurationError):
            get_ledger_preset('devnet')

    def test_validate_ledger_config(self):
        assert validate_ledger_config({"network": "testnet", "max_custom_fees": 10}).is_valid

        result = validate_ledger_config({"max_custom_fees": 0})
        assert not result.is_valid
        assert result.errors[0].field == "max_custom_fees"

        assert not validate_ledger_config({"enforce_fee_limit": "yes"}).is_valid
        assert not validate_ledger_config({"max_custom_fees": True}).is_valid


class TestProviders:

    def test_file_provider_missing_file(self, tmp_path):
        provider = FileConfigProvider("ledger", str(tmp_path))

        assert provider.get_config() == {}

    def test_file_provider_reads_yaml(self, tmp_path):
        (tmp_path / "ledger.yaml").write_text(yaml.safe_dump({"network": "previewnet"}))
        provider = FileConfigProvider("ledger", str(tmp_path))

        assert provider.get_config() == {"network": "previewnet"}

    def test_file_provider_rejects_non_mapping(self, tmp_path):
        (tmp_path / "ledger.yaml").write_text("- a\n- b\n")
        provider = FileConfigProvider("ledger", str(tmp_path))

        with pytest.raises(ValueError):
            provider.get_config()

    def test_file_provider_update_and_reset(self, tmp_path):
        registry = get_config_registry(str(tmp_path))

        assert registry.update_config("ledger", {"max_custom_fees": 4})
        assert yaml.safe_load((tmp_path / "ledger.yaml").read_text()) == {"max_custom_fees": 4}
        assert get_ledger_config(registry).max_custom_fees == 4

        assert not registry.update_config("ledger", {"max_custom_fees": 0})
        assert get_ledger_config(registry).max_custom_fees == 4

        registry.reset_all()
        assert not (tmp_path / "ledger.yaml").exists()
        assert registry.list_domains() == []

    def test_runtime_provider(self):
        provider = RuntimeConfigProvider("system", {"log_level": "INFO"}, validator=get_system_validator())

        assert provider.update_config({"log_level": "DEBUG"})
        assert not provider.update_config({"log_level": 10})
        assert provider.get_config() == {"log_level": "DEBUG"}

        provider.reset_to_defaults()
        assert provider.get_config() == {"log_level": "INFO"}


class TestRegistry:

    def test_domains_registered(self, tmp_path):
        registry = get_config_registry(str(tmp_path))

        assert set(registry.list_domains()) == {"system", "ledger"}
        assert registry.get_validator("ledger") is not None

    def test_unknown_domain_registered_on_use(self, tmp_path):
        registry = ConfigRegistry(str(tmp_path))

        assert registry.get_config("extra") == {}
        assert "extra" in registry.list_domains()

    def test_runtime_provider_registration(self, tmp_path):
        registry = ConfigRegistry(str(tmp_path))
        registry.register_domain("ledger", RuntimeConfigProvider("ledger", {"network": "local"}))

        assert get_ledger_config(registry).network is LedgerNetwork.LOCAL

    def test_system_config_from_registry(self, tmp_path, monkeypatch):
        monkeypatch.delenv("LEDGERFEES_LOG_LEVEL", raising=False)
        monkeypatch.delenv("LEDGERFEES_ENV", raising=False)
        (tmp_path / "system.yaml").write_text(yaml.safe_dump({"environment": "staging", "log_level": "warning"}))

        config = get_system_config(get_config_registry(str(tmp_path)))

        assert config.environment is Environment.STAGING
        assert config.log_level == "WARNING"
