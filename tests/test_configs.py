"""
Tests for configuration loading and logging setup.
"""

import logging

import pytest

from envstruct.configs import (
    DEFAULT_CONFIG,
    get_config_path,
    get_data_path,
    get_full_config,
    get_logger,
    load_yaml_config,
    setup_logging,
)
from envstruct.exceptions import ConfigurationError, EnvstructError


class TestYamlConfig:
    """Test config.yaml loading."""

    def test_missing_file_is_empty(self, temp_dir):
        assert load_yaml_config(temp_dir / "config.yaml") == {}

    def test_loads_mapping(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("debug: true\nlog_file: /tmp/envstruct.log\n")
        assert load_yaml_config(path) == {"debug": True, "log_file": "/tmp/envstruct.log"}

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("")
        assert load_yaml_config(path) == {}

    def test_invalid_yaml_raises(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("debug: [unclosed\n")
        with pytest.raises(ConfigurationError) as exc_info:
            load_yaml_config(path)
        assert exc_info.value.details["path"] == str(path)

    def test_non_mapping_raises(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_yaml_config(path)

    def test_config_path_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("ENVSTRUCT_CONFIG", str(temp_dir / "custom.yaml"))
        assert get_config_path() == temp_dir / "custom.yaml"

    def test_data_path_from_env(self, monkeypatch, temp_dir):
        monkeypatch.setenv("ENVSTRUCT_DATA_PATH", str(temp_dir))
        assert get_data_path() == temp_dir


class TestFullConfig:
    """Test merging defaults, YAML and environment."""

    def test_defaults(self, temp_dir):
        assert get_full_config(temp_dir / "none.yaml") == DEFAULT_CONFIG

    def test_yaml_overrides_defaults(self, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("debug: true\nunknown: 1\n")
        config = get_full_config(path)
        assert config["debug"] is True
        assert "unknown" not in config

    def test_env_overrides_yaml(self, monkeypatch, temp_dir):
        path = temp_dir / "config.yaml"
        path.write_text("debug: true\n")
        monkeypatch.setenv("ENVSTRUCT_DEBUG", "false")
        monkeypatch.setenv("ENVSTRUCT_LOG_FILE", str(temp_dir / "out.log"))
        config = get_full_config(path)
        assert config["debug"] is False
        assert config["log_file"] == str(temp_dir / "out.log")


class TestLogging:
    """Test logging setup."""

    def teardown_method(self):
        logger = logging.getLogger("envstruct")
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

    def test_get_logger_namespace(self):
        assert get_logger("ast.parser").name == "envstruct.ast.parser"

    def test_debug_level(self):
        logger = setup_logging(debug=True, log_file="")
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_info_level_by_default(self, monkeypatch):
        monkeypatch.delenv("ENVSTRUCT_DEBUG", raising=False)
        monkeypatch.delenv("ENVSTRUCT_LOG_FILE", raising=False)
        logger = setup_logging()
        assert logger.level == logging.INFO

    def test_log_file(self, temp_dir):
        log_file = temp_dir / "logs" / "envstruct.log"
        logger = setup_logging(debug=True, log_file=str(log_file))
        get_logger("test").info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text()
        assert "[envstruct.test]" in log_file.read_text()

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(debug=False, log_file="")
        logger = setup_logging(debug=False, log_file="")
        assert len(logger.handlers) == 1


class TestExceptions:
    """Test exception formatting."""

    def test_details_in_str(self):
        error = EnvstructError("bad thing", {"file": "x.go"})
        assert str(error) == "bad thing ({'file': 'x.go'})"

    def test_plain_str(self):
        assert str(EnvstructError("bad thing")) == "bad thing"
