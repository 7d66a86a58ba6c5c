"""
Configuration loader tests.
"""

import pytest

from chomikuj.core.exceptions import ConfigurationError
from chomikuj.utils.config import ConfigLoader


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ConfigLoader.ENV_MAPPING:
        monkeypatch.delenv(name, raising=False)


class TestConfigLoader:
    """YAML, defaults and environment"""

    def test_defaults_when_file_missing(self, tmp_path):
        config = ConfigLoader(str(tmp_path / "missing.yaml"))

        assert config.base_url == "https://chomikuj.pl"
        assert config.get("http.timeout") == 30.0
        assert config.get("auth.username") is None

    def test_file_merged_over_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("http:\n  timeout: 5\nauth:\n  username: alice\n", encoding="utf-8")

        config = ConfigLoader(str(path))

        assert config.get("http.timeout") == 5
        assert config.get("http.user_agent").startswith("Mozilla/5.0")
        assert config.get("auth.username") == "alice"

    def test_env_overrides_file(self, tmp_path, monkeypatch):
        path = tmp_path / "config.yaml"
        path.write_text("auth:\n  username: alice\n", encoding="utf-8")
        monkeypatch.setenv("CHOMIKUJ_USERNAME", "bob")
        monkeypatch.setenv("CHOMIKUJ_TIMEOUT", "12.5")

        config = ConfigLoader(str(path))

        assert config.get("auth.username") == "bob"
        assert config.get("http.timeout") == 12.5

    def test_env_applies_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHOMIKUJ_BASE_URL", "http://localhost:8000/")

        config = ConfigLoader(str(tmp_path / "missing.yaml"))

        assert config.base_url == "http://localhost:8000"

    def test_numeric_password_stays_string(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHOMIKUJ_PASSWORD", "123456")

        config = ConfigLoader(str(tmp_path / "missing.yaml"))

        assert config.get("auth.password") == "123456"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("http: [unclosed\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader(str(path))

    def test_non_mapping_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError):
            ConfigLoader(str(path))

    def test_missing_key_returns_default(self, tmp_path):
        config = ConfigLoader(str(tmp_path / "missing.yaml"))

        assert config.get("nope.nothing", "fallback") == "fallback"
        assert config.get("http.timeout.deeper") is None

    def test_null_user_agent_in_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("http:\n  user_agent: null\n", encoding="utf-8")

        config = ConfigLoader(str(path))

        assert config.get("http.user_agent") is None
