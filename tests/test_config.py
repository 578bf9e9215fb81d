import pytest

from arborette import ConfigError
from arborette.config import RunConfig, apply_overrides, load_config


def test_defaults():
    cfg = load_config()
    assert cfg == RunConfig(log_level="info", sink="console", pause=False)


def test_load_from_yaml(tmp_path):
    f = tmp_path / "arborette.yml"
    f.write_text("log_level: debug\nsink: log\npause: true\n")
    cfg = load_config(f)
    assert cfg.log_level == "debug"
    assert cfg.sink == "log"
    assert cfg.pause is True


def test_empty_file_gives_defaults(tmp_path):
    f = tmp_path / "empty.yml"
    f.write_text("")
    assert load_config(f) == RunConfig()


def test_invalid_value(tmp_path):
    f = tmp_path / "bad.yml"
    f.write_text("sink: printer\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_unknown_field(tmp_path):
    f = tmp_path / "bad.yml"
    f.write_text("colour: green\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_not_a_mapping(tmp_path):
    f = tmp_path / "list.yml"
    f.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yml")


def test_non_utf8_file(tmp_path):
    f = tmp_path / "bad.yml"
    f.write_bytes(b"sink: \xff\xfe\n")
    with pytest.raises(ConfigError):
        load_config(f)


def test_overrides_are_validated():
    cfg = apply_overrides(RunConfig(), log_level="debug", sink=None)
    assert cfg.log_level == "debug"
    assert cfg.sink == "console"
    with pytest.raises(ConfigError):
        apply_overrides(RunConfig(), log_level="bogus")
