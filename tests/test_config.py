import logging

import yaml

from nodemetrics.config import DEFAULT_CONFIG, ROLLING_REFRESH_TIME, TTY_REFRESH_TIME, Config


def test_defaults_without_file(tmp_path):
    config = Config(str(tmp_path / "missing.yaml"))

    assert config.get("mining.enabled") is False
    assert config.get("mining.solver") == "default"
    assert config.get("metrics.show") is True
    assert config.get("no.such.key", "fallback") == "fallback"


def test_user_config_is_merged(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"mining": {"enabled": True}, "metrics": {"refresh_time": 5}}))

    config = Config(str(path))

    assert config.get("mining.enabled") is True
    assert config.get("mining.solver") == "default"
    assert config.get("metrics.refresh_time") == 5
    # Defaults are never mutated by a merge
    assert DEFAULT_CONFIG["mining"]["enabled"] is False


def test_invalid_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("mining: [unclosed")

    config = Config(str(path))

    assert config.get("mining.enabled") is False


def test_display_mode_auto(tmp_path):
    config = Config(str(tmp_path / "missing.yaml"))

    assert config.display_mode(is_tty=True) == (True, TTY_REFRESH_TIME)
    assert config.display_mode(is_tty=False) == (False, ROLLING_REFRESH_TIME)


def test_display_mode_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"metrics": {"ui": False, "refresh_time": 30}}))

    config = Config(str(path))

    assert config.display_mode(is_tty=True) == (False, 30)


def test_non_mapping_yaml_keeps_defaults(tmp_path):
    for content in ("just a string\n", "- mining\n- metrics\n"):
        path = tmp_path / "config.yaml"
        path.write_text(content)

        config = Config(str(path))

        assert config.get("mining.enabled") is False
        assert config.get("metrics.show") is True
        level, message = config.load_result
        assert level == logging.ERROR
        assert "does not contain a mapping" in message


def test_load_result_is_logged_on_request(tmp_path, caplog):
    path = tmp_path / "config.yaml"
    path.write_text("mining: [unclosed")
    config = Config(str(path))

    with caplog.at_level(logging.INFO):
        config.log_load_result()

    assert "Failed to load config" in caplog.text
