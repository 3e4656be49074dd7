"""
Tests for configuration loading: config.properties parsing and ServerConfig.
"""

import os

import pytest

from task_tracker.config import ConfigProperties, EnvConfig, ServerConfig
from task_tracker.utils.exceptions import ConfigurationError


class TestConfigProperties:
    """Tests for the config.properties loader."""

    def setup_method(self):
        ConfigProperties.reload("/nonexistent/config.properties")

    def teardown_method(self):
        ConfigProperties.reload("/nonexistent/config.properties")

    def _load(self, tmp_path, monkeypatch, text, keys):
        # set-then-delete so monkeypatch removes injected values on undo
        for key in keys:
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)
        path = tmp_path / "config.properties"
        path.write_text(text, encoding="utf-8")
        ConfigProperties.reload(str(path))
        ConfigProperties.load_to_env()

    def test_env_config_alias(self):
        assert EnvConfig is ConfigProperties

    def test_parse_comments_and_separators(self, tmp_path, monkeypatch):
        self._load(
            tmp_path, monkeypatch,
            "# comment\n! also comment\n\nTRACKER_HOST = 0.0.0.0\nTRACKER_LOG_LEVEL: debug\nno separator\n",
            ["TRACKER_HOST", "TRACKER_LOG_LEVEL"],
        )

        assert os.environ["TRACKER_HOST"] == "0.0.0.0"
        assert os.environ["TRACKER_LOG_LEVEL"] == "debug"
        assert "no separator" not in os.environ

    def test_first_separator_wins(self, tmp_path, monkeypatch):
        self._load(tmp_path, monkeypatch, "TRACKER_HOST=localhost:8080\n", ["TRACKER_HOST"])

        assert os.environ["TRACKER_HOST"] == "localhost:8080"

    def test_load_to_env_never_overwrites(self, tmp_path, monkeypatch):
        monkeypatch.setenv("TRACKER_PORT", "7000")
        self._load(
            tmp_path, monkeypatch,
            "TRACKER_PORT=9000\nTRACKER_HOST=0.0.0.0\nserver.port=1\n",
            ["TRACKER_HOST"],
        )

        assert os.environ["TRACKER_PORT"] == "7000"
        assert os.environ["TRACKER_HOST"] == "0.0.0.0"
        assert "server.port" not in os.environ

    def test_properties_feed_server_config(self, tmp_path, monkeypatch):
        self._load(tmp_path, monkeypatch, "TRACKER_PORT=9300\n", ["TRACKER_PORT"])

        assert ServerConfig.from_env().port == 9300

    def test_get_int_env_falls_back_on_bad_value(self, monkeypatch):
        monkeypatch.setenv("TRACKER_LOG_BACKUP_COUNT", "many")
        assert ConfigProperties.get_int_env("TRACKER_LOG_BACKUP_COUNT", 5) == 5

    def test_logging_config_defaults(self, monkeypatch):
        for key in ("TRACKER_LOG_FOLDER", "TRACKER_LOG_LEVEL", "TRACKER_ENABLE_FILE_LOGGING",
                    "TRACKER_LOG_MAX_BYTES", "TRACKER_LOG_BACKUP_COUNT"):
            monkeypatch.delenv(key, raising=False)

        config = ConfigProperties.get_logging_config()

        assert config["log_folder"] == "./logs"
        assert config["log_level"] == "INFO"
        assert config["enable_file"] is False
        assert config["max_bytes"] == 10485760
        assert config["backup_count"] == 5


class TestServerConfig:
    """Tests for ServerConfig validation and environment loading."""

    def test_defaults(self):
        config = ServerConfig()

        assert config.to_dict() == {
            "host": "127.0.0.1",
            "port": 8080,
            "log_level": "INFO",
            "reload": False,
        }

    def test_log_level_normalized(self):
        assert ServerConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_invalid_port(self, port):
        with pytest.raises(ConfigurationError) as exc_info:
            ServerConfig(port=port)
        assert exc_info.value.setting_name == "port"

    def test_invalid_log_level(self):
        with pytest.raises(ConfigurationError):
            ServerConfig(log_level="LOUD")

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("TRACKER_HOST", "0.0.0.0")
        monkeypatch.setenv("TRACKER_PORT", "9001")
        monkeypatch.setenv("TRACKER_LOG_LEVEL", "warning")
        monkeypatch.setenv("TRACKER_RELOAD", "true")

        config = ServerConfig.from_env()

        assert config.host == "0.0.0.0"
        assert config.port == 9001
        assert config.log_level == "WARNING"
        assert config.reload is True

    def test_from_env_non_integer_port(self, monkeypatch):
        monkeypatch.setenv("TRACKER_PORT", "eighty")

        with pytest.raises(ConfigurationError) as exc_info:
            ServerConfig.from_env()
        assert exc_info.value.setting_name == "TRACKER_PORT"


class TestLauncherFlags:
    """Command-line flags override environment settings."""

    def test_flags_override_env(self, monkeypatch):
        monkeypatch.setenv("TRACKER_PORT", "9001")
        from start_server import build_config

        config = build_config(["--host", "0.0.0.0", "--port", "9100"])

        assert config.host == "0.0.0.0"
        assert config.port == 9100
        assert config.reload is False

    def test_env_used_without_flags(self, monkeypatch):
        monkeypatch.setenv("TRACKER_PORT", "9001")
        from start_server import build_config

        assert build_config([]).port == 9001

    def test_invalid_flag_port_rejected(self):
        from start_server import build_config

        with pytest.raises(ConfigurationError):
            build_config(["--port", "70000"])
