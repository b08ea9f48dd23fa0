"""Tests for configuration loading, schemas and the configuration manager."""

import json

import pytest
import yaml
from pydantic import ValidationError as PydanticValidationError

from designkit.config import (
    AppConfig,
    ConfigurationLoader,
    ConfigurationManager,
    EventsConfig,
    LoggingConfig,
    PricingConfig,
    ServerConfig,
)
from designkit.domain.exceptions import ConfigurationError


@pytest.fixture
def yaml_config(tmp_path):
    path = tmp_path / "designkit.yml"
    path.write_text(
        yaml.safe_dump(
            {
                "environment": "testing",
                "events": {"failure_policy": "fail_fast"},
                "pricing": {"default_strategy": "reduced"},
                "server": {"port": 9000},
            }
        )
    )
    return path


class TestSchemas:
    def test_defaults(self):
        config = AppConfig()

        assert config.environment == "development"
        assert config.events.failure_policy == "continue"
        assert config.pricing.rates["standard"] == pytest.approx(1.2)
        assert config.notifications.channels == ["sms"]
        assert config.server.port == 8000

    def test_log_level_normalized(self):
        assert LoggingConfig(level="debug").level == "DEBUG"

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: LoggingConfig(level="LOUD"),
            lambda: EventsConfig(failure_policy="sometimes"),
            lambda: EventsConfig(audit_trail_size=0),
            lambda: PricingConfig(rates={"standard": -1.0}),
            lambda: AppConfig(environment="moon"),
            lambda: ServerConfig(unknown=True),
        ],
    )
    def test_invalid_values_rejected(self, factory):
        with pytest.raises(PydanticValidationError):
            factory()


class TestConfigurationLoader:
    def test_load_json(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"debug": True}))

        assert ConfigurationLoader().load_from_file(str(path)) == {"debug": True}

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            ConfigurationLoader().load_from_file(str(path))

    def test_malformed_json_rejected(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        with pytest.raises(ConfigurationError):
            ConfigurationLoader().load_from_file(str(path))

    def test_search_paths(self, tmp_path, monkeypatch):
        (tmp_path / "designkit.json").write_text(json.dumps({"debug": True}))
        monkeypatch.setenv("DESIGNKIT_CONFIG_DIR", str(tmp_path))

        assert ConfigurationLoader().load_configuration() == {"debug": True}

    def test_no_file_found(self, tmp_path):
        loader = ConfigurationLoader(search_paths=[str(tmp_path / "absent.yml")])

        assert loader.load_configuration() == {}

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DESIGNKIT_SERVER__PORT", "9100")
        monkeypatch.setenv("DESIGNKIT_LOGGING__LEVEL", "debug")
        monkeypatch.setenv("DESIGNKIT_NOTIFICATIONS__CHANNELS", '["sms", "slack"]')
        original = {"server": {"host": "0.0.0.0"}}

        result = ConfigurationLoader().apply_environment_overrides(original)

        assert result["server"] == {"host": "0.0.0.0", "port": 9100}
        assert result["logging"]["level"] == "debug"
        assert result["notifications"]["channels"] == ["sms", "slack"]
        assert original == {"server": {"host": "0.0.0.0"}}


    def test_string_fields_keep_raw_override(self, monkeypatch):
        monkeypatch.setenv("DESIGNKIT_VERSION", "1.0")
        monkeypatch.setenv("DESIGNKIT_NOTIFICATIONS__SENDER", "123")
        monkeypatch.setenv("DESIGNKIT_NOTIFICATIONS__SNS_TOPIC_ARN", "42")
        monkeypatch.setenv("DESIGNKIT_EVENTS__AUDIT_TRAIL_SIZE", "50")

        result = ConfigurationLoader().apply_environment_overrides({})

        assert result["version"] == "1.0"
        assert result["notifications"]["sender"] == "123"
        assert result["notifications"]["sns_topic_arn"] == "42"
        assert result["events"]["audit_trail_size"] == 50


class TestConfigurationManager:
    def test_numeric_looking_string_overrides_validate(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DESIGNKIT_CONFIG_DIR", str(tmp_path))
        monkeypatch.setenv("DESIGNKIT_VERSION", "2.0")
        monkeypatch.setenv("DESIGNKIT_NOTIFICATIONS__SENDER", "123")

        config = ConfigurationManager().app_config

        assert config.version == "2.0"
        assert config.notifications.sender == "123"

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("DESIGNKIT_CONFIG_DIR", str(tmp_path))

        manager = ConfigurationManager()

        assert manager.app_config == AppConfig()

    def test_yaml_file(self, yaml_config):
        manager = ConfigurationManager(str(yaml_config))

        assert manager.get("environment") == "testing"
        assert manager.get("events.failure_policy") == "fail_fast"
        assert manager.get_typed(PricingConfig).default_strategy == "reduced"
        assert manager.get_typed(ServerConfig).port == 9000

    def test_precedence(self, yaml_config, monkeypatch):
        monkeypatch.setenv("DESIGNKIT_SERVER__PORT", "9100")

        env_only = ConfigurationManager(str(yaml_config))
        overridden = ConfigurationManager(str(yaml_config), overrides={"server": {"port": 9200}})

        assert env_only.get("server.port") == 9100
        assert overridden.get("server.port") == 9200
        assert overridden.get("server.host") == "127.0.0.1"

    def test_missing_file(self, tmp_path):
        manager = ConfigurationManager(str(tmp_path / "missing.yml"))

        with pytest.raises(ConfigurationError, match="not found"):
            manager.app_config

    def test_invalid_configuration(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"events": {"failure_policy": "never"}}))

        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigurationManager(str(path)).app_config

    def test_get_default_for_unknown_key(self, yaml_config):
        manager = ConfigurationManager(str(yaml_config))

        assert manager.get("server.missing", "fallback") == "fallback"
        assert manager.get("pricing.rates.exempt") == pytest.approx(1.0)
        assert manager.get("pricing.rates.luxury", 2.0) == 2.0

    def test_get_typed_unknown(self, yaml_config):
        with pytest.raises(ValueError):
            ConfigurationManager(str(yaml_config)).get_typed(dict)

    def test_get_typed_app_config(self, yaml_config):
        manager = ConfigurationManager(str(yaml_config))

        assert manager.get_typed(AppConfig) is manager.app_config

    def test_reload(self, yaml_config):
        manager = ConfigurationManager(str(yaml_config))
        first = manager.app_config
        yaml_config.write_text(yaml.safe_dump({"environment": "staging"}))

        manager.reload()

        assert manager.app_config is not first
        assert manager.get("environment") == "staging"
