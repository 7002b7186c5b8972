"""Tests for configuration resolution."""

import json
from pathlib import Path

import pytest

from vt_splash.config import (
    POLL_INTERVAL,
    SplashConfig,
    load_config_file,
    resolve_config,
)
from vt_splash.content.model import Template
from vt_splash.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    def write(data) -> Path:
        path = tmp_path / "splash.json"
        path.write_text(json.dumps(data))
        return path
    return write


class TestDefaults:
    def test_defaults(self) -> None:
        config = resolve_config(env={})
        assert config == SplashConfig()
        assert config.provider == "welcome"
        assert config.template is None
        assert config.poll_interval == POLL_INTERVAL == 0.25
        assert (config.header_height, config.footer_height, config.margin) == (11, 3, 1)

    def test_template_falls_back_to_provider(self) -> None:
        assert SplashConfig(provider="features").resolve_template() == Template.TWO_COLUMN_FEATURES
        assert SplashConfig().resolve_template() == Template.SINGLE_COLUMN_FACTS


class TestPrecedence:
    """explicit > file > environment > defaults"""

    def test_environment(self) -> None:
        env = {"VT_SPLASH_PROVIDER": "features", "VT_SPLASH_LOG_LEVEL": "debug"}
        config = resolve_config(env=env)
        assert config.provider == "features"
        assert config.log_level == "DEBUG"

    def test_file_over_environment(self, config_file) -> None:
        path = config_file({"provider": "welcome", "poll_interval": 0.5})
        config = resolve_config(env={"VT_SPLASH_PROVIDER": "features"}, config_path=path)
        assert config.provider == "welcome"
        assert config.poll_interval == 0.5

    def test_config_path_from_environment(self, config_file) -> None:
        path = config_file({"template": "two-column-features"})
        config = resolve_config(env={"VT_SPLASH_CONFIG": str(path)})
        assert config.template == Template.TWO_COLUMN_FEATURES

    def test_explicit_over_file(self, config_file) -> None:
        path = config_file({"provider": "welcome", "template": "single-column-facts"})
        config = resolve_config(provider="features", template="two-column-features", config_path=path, env={})
        assert config.provider == "features"
        assert config.template == Template.TWO_COLUMN_FEATURES

    def test_unset_explicit_values_keep_lower_layers(self) -> None:
        config = resolve_config(provider=None, env={"VT_SPLASH_PROVIDER": "features"})
        assert config.provider == "features"


class TestErrors:
    def test_unknown_key(self, config_file) -> None:
        with pytest.raises(ConfigError, match="unknown config keys: colour"):
            resolve_config(config_path=config_file({"colour": "red"}), env={})

    def test_unknown_template(self) -> None:
        with pytest.raises(ConfigError, match="unknown template"):
            resolve_config(template="three-column", env={})

    def test_unknown_provider(self) -> None:
        with pytest.raises(ConfigError):
            resolve_config(provider="nope", env={})

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config_file(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(ConfigError, match="invalid JSON"):
            load_config_file(path)

    def test_non_object_root(self, config_file) -> None:
        with pytest.raises(ConfigError, match="must be an object"):
            load_config_file(config_file([1, 2]))

    def test_bad_number(self, config_file) -> None:
        with pytest.raises(ConfigError, match="invalid value for margin"):
            resolve_config(config_path=config_file({"margin": "wide"}), env={})

    @pytest.mark.parametrize("field, value", [
        ("margin", -1),
        ("header_height", -2),
        ("poll_interval", 0),
    ])
    def test_out_of_range(self, field, value) -> None:
        with pytest.raises(ConfigError):
            SplashConfig(**{field: value})

    def test_unknown_log_level(self) -> None:
        with pytest.raises(ConfigError, match="log level"):
            resolve_config(env={"VT_SPLASH_LOG_LEVEL": "chatty"})

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            SplashConfig(margin=-1)


class TestUnreadableValues:
    """Malformed files and values are reported as ConfigError, never a raw crash."""

    def test_file_not_utf8(self, tmp_path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"provider": "\xff"}')
        with pytest.raises(ConfigError, match="could not read config"):
            load_config_file(path)

    def test_path_is_a_directory(self, tmp_path) -> None:
        with pytest.raises(ConfigError):
            load_config_file(tmp_path)

    @pytest.mark.parametrize("value", [5, 1.5, ["two-column-features"], {"name": "x"}])
    def test_template_not_a_string(self, config_file, value) -> None:
        with pytest.raises(ConfigError, match="template must be a string"):
            resolve_config(config_path=config_file({"template": value}), env={})

    @pytest.mark.parametrize("field, value", [
        ("margin", [1]),
        ("poll_interval", {"s": 1}),
        ("log_file", 7),
    ])
    def test_wrong_json_types(self, config_file, field, value) -> None:
        with pytest.raises(ConfigError, match=f"invalid value for {field}"):
            resolve_config(config_path=config_file({field: value}), env={})

    def test_template_parse_rejects_non_string(self) -> None:
        with pytest.raises(ConfigError):
            Template.parse(5)
