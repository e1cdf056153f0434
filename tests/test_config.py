"""Tests for Config loading."""

import json

import pytest

from pocketbase_seed.config import Config
from pocketbase_seed.exceptions import ConfigError


class TestConfigFromFile:
    """Tests for Config.from_file()."""

    def test_yaml(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: http://127.0.0.1:8090\nemail: a@b.c\npassword: pw\n")

        config = Config.from_file(path)

        assert config.url == "http://127.0.0.1:8090"
        assert config.email == "a@b.c"
        assert config.password == "pw"

    def test_json(self, tmp_path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"url": "http://pb", "email": "a@b.c", "password": "pw"}))

        assert Config.from_file(path).url == "http://pb"

    def test_toml(self, tmp_path) -> None:
        path = tmp_path / "config.toml"
        path.write_text('url = "http://pb"\nemail = "a@b.c"\npassword = "pw"\n')

        assert Config.from_file(path).email == "a@b.c"

    def test_trailing_slash_stripped(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: http://pb/\nemail: a@b.c\npassword: pw\n")

        assert Config.from_file(path).url == "http://pb"

    def test_environment_overrides_file(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: http://pb\nemail: a@b.c\npassword: pw\n")
        monkeypatch.setenv("POCKETBASE_PASSWORD", "from-env")

        config = Config.from_file(path)

        assert config.password == "from-env"
        assert config.email == "a@b.c"

    def test_environment_fills_missing_keys(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: http://pb\n")
        monkeypatch.setenv("POCKETBASE_EMAIL", "env@b.c")
        monkeypatch.setenv("POCKETBASE_PASSWORD", "pw")

        config = Config.from_file(path)

        assert config.email == "env@b.c"

    def test_numeric_values_read_as_strings(self, tmp_path) -> None:
        """Test all-digit passwords in YAML are not rejected."""
        path = tmp_path / "config.yaml"
        path.write_text("url: http://pb\nemail: a@b.c\npassword: 123456\n")

        assert Config.from_file(path).password == "123456"

    def test_password_not_in_repr(self) -> None:
        config = Config(url="http://pb", email="a@b.c", password="hunter2")

        assert "hunter2" not in repr(config)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="file not found"):
            Config.from_file(tmp_path / "missing.yaml")

    def test_missing_keys(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: http://pb\n")

        with pytest.raises(ConfigError):
            Config.from_file(path)

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("url: [unclosed\n")

        with pytest.raises(ConfigError):
            Config.from_file(path)

    def test_unsupported_extension(self, tmp_path) -> None:
        path = tmp_path / "config.ini"
        path.write_text("[pb]\nurl = http://pb\n")

        with pytest.raises(ConfigError, match="unsupported file extension"):
            Config.from_file(path)

    def test_not_a_mapping(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("- url\n- email\n")

        with pytest.raises(ConfigError, match="mapping"):
            Config.from_file(path)
