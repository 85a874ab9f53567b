"""
Tests for server configuration
"""
import json

from todo_app.config import Config


class TestConfig:
    """Test value precedence"""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TODO_APP_PORT", raising=False)
        config = Config()
        assert config.host == "127.0.0.1"
        assert config.port == 8000
        assert config.seed_demo_data is True
        assert config.log_dir is None

    def test_file_then_env_then_overrides(self, tmp_path, monkeypatch):
        config_file = tmp_path / "server.json"
        config_file.write_text(json.dumps({"port": 9000, "host": "0.0.0.0", "log_level": "debug"}))
        monkeypatch.setenv("TODO_APP_PORT", "9100")

        config = Config(config_file=str(config_file), overrides={"host": None, "seed_demo_data": False})
        assert config.host == "0.0.0.0"
        assert config.port == 9100
        assert config.log_level == "DEBUG"
        assert config.seed_demo_data is False

    def test_seed_flag_from_env(self, monkeypatch):
        monkeypatch.setenv("TODO_APP_SEED_DEMO_DATA", "no")
        assert Config().seed_demo_data is False
