"""Tests for EventlogConfig: defaults, YAML loading, env overrides."""

from __future__ import annotations

import pytest
import yaml

from eventlog.config import DEFAULT_MESSAGE, ConfigError, EventlogConfig

_ENV = (
    "EVENTLOG_MESSAGE",
    "EVENTLOG_FILE_PATH",
    "EVENTLOG_TIMESTAMP_FORMAT",
    "EVENTLOG_FAULT_POLICY",
    "EVENTLOG_SINKS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _ENV:
        monkeypatch.delenv(key, raising=False)


class TestDefaults:
    def test_defaults(self):
        cfg = EventlogConfig()
        assert cfg.message == DEFAULT_MESSAGE == "LogEvent published"
        assert cfg.file_path == "log.txt"
        assert cfg.timestamp_format == "%Y-%m-%d %H:%M:%S"
        assert cfg.fault_policy == "propagate"
        assert cfg.sinks == ("console", "file")

    def test_sinks_from_comma_string(self):
        assert EventlogConfig(sinks=" file , console ").sinks == ("file", "console")

    def test_unknown_fault_policy(self):
        with pytest.raises(ConfigError, match="Unknown fault policy"):
            EventlogConfig(fault_policy="retry")

    def test_config_error_is_value_error(self):
        assert issubclass(ConfigError, ValueError)

    def test_to_dict(self):
        d = EventlogConfig().to_dict()
        assert d["file_path"] == "log.txt"
        assert d["sinks"] == ("console", "file")


class TestYAMLLoading:
    def test_missing_file_uses_defaults(self, tmp_path):
        cfg = EventlogConfig.load(tmp_path / "nope.yaml")
        assert cfg == EventlogConfig()

    def test_load_from_yaml(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(
            yaml.dump(
                {
                    "message": "from yaml",
                    "file_path": "yaml.log",
                    "fault_policy": "continue",
                    "sinks": ["file"],
                }
            )
        )
        cfg = EventlogConfig.load(yaml_file)
        assert cfg.message == "from yaml"
        assert cfg.file_path == "yaml.log"
        assert cfg.fault_policy == "continue"
        assert cfg.sinks == ("file",)

    def test_empty_yaml(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("")
        assert EventlogConfig.load(yaml_file) == EventlogConfig()

    def test_non_mapping_yaml_rejected(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("- a\n- b\n")
        with pytest.raises(ConfigError, match="mapping"):
            EventlogConfig.load(yaml_file)

    def test_unknown_keys_ignored(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml.dump({"colour": "blue"}))
        assert EventlogConfig.load(yaml_file) == EventlogConfig()

    def test_invalid_yaml_raises_config_error(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("message: [unclosed\n")
        with pytest.raises(ConfigError, match="invalid YAML"):
            EventlogConfig.load(yaml_file)

    def test_unreadable_path_raises_config_error(self, tmp_path):
        cfg_dir = tmp_path / "cfgdir"
        cfg_dir.mkdir()
        with pytest.raises(ConfigError, match="cannot read config"):
            EventlogConfig.load(cfg_dir)

    @pytest.mark.parametrize("value", [5, 1.5, True, {"console": 1}])
    def test_non_list_sinks_rejected(self, tmp_path, value):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml.dump({"sinks": value}))
        with pytest.raises(ConfigError, match="sinks: expected a list"):
            EventlogConfig.load(yaml_file)

    def test_null_values_use_defaults(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("message:\nfile_path: ~\nsinks:\n")
        cfg = EventlogConfig.load(yaml_file)
        assert cfg.message == "LogEvent published"
        assert cfg.file_path == "log.txt"
        assert cfg.sinks == ("console", "file")

    def test_scalar_values_stringified(self, tmp_path):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml.dump({"message": 42}))
        assert EventlogConfig.load(yaml_file).message == "42"


class TestEnvOverrides:
    def test_env_overrides_default(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EVENTLOG_FILE_PATH", "env.log")
        monkeypatch.setenv("EVENTLOG_SINKS", "console")
        cfg = EventlogConfig.load(tmp_path / "nope.yaml")
        assert cfg.file_path == "env.log"
        assert cfg.sinks == ("console",)

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(yaml.dump({"message": "yaml"}))
        monkeypatch.setenv("EVENTLOG_MESSAGE", "env")
        assert EventlogConfig.load(yaml_file).message == "env"

    def test_bad_env_policy(self, tmp_path, monkeypatch):
        monkeypatch.setenv("EVENTLOG_FAULT_POLICY", "sometimes")
        with pytest.raises(ConfigError):
            EventlogConfig.load(tmp_path / "nope.yaml")


class TestOverrides:
    def test_none_overrides_ignored(self):
        cfg = EventlogConfig(message="keep").with_overrides(message=None, file_path="x.log")
        assert cfg.message == "keep"
        assert cfg.file_path == "x.log"

    def test_overrides_validated(self):
        with pytest.raises(ConfigError):
            EventlogConfig().with_overrides(fault_policy="never")

    def test_base_config_unchanged(self):
        base = EventlogConfig()
        base.with_overrides(message="other")
        assert base.message == "LogEvent published"
