import pytest

from burrow.config import BurrowConfig


def test_defaults():
    cfg = BurrowConfig()
    assert cfg.turnstile_push is False
    assert cfg.max_chain is None
    assert cfg.resolver_config().turnstile_push is False
    assert cfg.game_config().tick_rate == 60.0


def test_from_yaml_overrides_and_defaults(tmp_path):
    path = tmp_path / "burrow.yaml"
    path.write_text("turnstile_push: true\nmax_chain: 4\nlog_level: debug\n", encoding="utf-8")
    cfg = BurrowConfig.from_yaml(path)
    assert cfg.turnstile_push is True
    assert cfg.max_chain == 4
    assert cfg.log_level == "DEBUG"
    assert cfg.tick_rate == 60.0
    assert cfg.resolver_config().max_chain == 4


def test_from_yaml_empty_file_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert BurrowConfig.from_yaml(path) == BurrowConfig()


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        BurrowConfig.from_yaml(tmp_path / "nope.yaml")


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BURROW_TURNSTILE_PUSH", "yes")
    monkeypatch.setenv("BURROW_TICK_RATE", "30")
    monkeypatch.setenv("BURROW_LOG_LEVEL", "warning")
    cfg = BurrowConfig.from_env()
    assert cfg.turnstile_push is True
    assert cfg.tick_rate == 30.0
    assert cfg.log_level == "WARNING"


def test_invalid_tick_rate_env_is_ignored(monkeypatch):
    monkeypatch.delenv("BURROW_TURNSTILE_PUSH", raising=False)
    monkeypatch.delenv("BURROW_LOG_LEVEL", raising=False)
    monkeypatch.setenv("BURROW_TICK_RATE", "fast")
    assert BurrowConfig.from_env().tick_rate == 60.0


def test_log_level_helpers():
    import logging

    from burrow.logging_config import level_for_verbosity, level_from_name

    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Warning ") == logging.WARNING
    assert level_from_name("loud", logging.ERROR) == logging.ERROR
    assert level_from_name(None, logging.INFO) == logging.INFO
    assert level_for_verbosity(0, logging.ERROR) == logging.ERROR
    assert level_for_verbosity(1) == logging.INFO
    assert level_for_verbosity(3) == logging.DEBUG


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ('"false"', False), ('"no"', False), ('"On"', True), ("off", False)],
)
def test_turnstile_push_strings_are_parsed(tmp_path, raw, expected):
    path = tmp_path / "burrow.yaml"
    path.write_text(f"turnstile_push: {raw}\n", encoding="utf-8")
    assert BurrowConfig.from_yaml(path).turnstile_push is expected


@pytest.mark.parametrize("raw", ['"maybe"', "2", "[true]"])
def test_turnstile_push_rejects_non_booleans(tmp_path, raw):
    path = tmp_path / "burrow.yaml"
    path.write_text(f"turnstile_push: {raw}\n", encoding="utf-8")
    with pytest.raises(ValueError):
        BurrowConfig.from_yaml(path)


def test_game_config_carries_max_steps():
    cfg = BurrowConfig(tick_rate=15.0, max_steps=7)
    game = cfg.game_config()
    assert game.tick_rate == 15.0
    assert game.max_steps == 7


def test_explicit_level_beats_environment(monkeypatch):
    import logging

    from burrow.logging_config import configure_logging

    monkeypatch.setenv("BURROW_LOG_LEVEL", "ERROR")
    assert configure_logging(logging.DEBUG, env_override=False) == logging.DEBUG
    assert configure_logging(logging.DEBUG) == logging.ERROR
