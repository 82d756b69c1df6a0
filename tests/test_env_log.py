"""Tests for Env config and Log"""

import logging

import pytest

from collection import Env, List, Log, LogLevel, ParseErr


# ---------------------------------------------------------------------------
# Env
# ---------------------------------------------------------------------------


def test_config_default():
    assert Env.cur().config("log.level") is None
    assert Env.cur().config("log.level", "info") == "info"


def test_config_props(config_props):
    config_props(
        "# collection config\n"
        "\n"
        "// level for the collection log\n"
        "log.level = warn\n"
        "str.escapeUnicode=true\n"
    )
    env = Env.cur()
    assert env.config("log.level") == "warn"
    assert env.config("str.escapeUnicode") == "true"


def test_env_var_overrides_props(config_props, monkeypatch):
    config_props("log.level=warn\n")
    monkeypatch.setenv("COLLECTION_LOG_LEVEL", "debug")
    assert Env.cur().config("log.level") == "debug"


def test_props_are_cached(config_props, isolated_env):
    config_props("log.level=warn\n")
    env = Env.cur()
    assert env.config("log.level") == "warn"
    (isolated_env / "etc" / "collection" / "config.props").write_text("log.level=err\n")
    assert env.config("log.level") == "warn"
    Env.reset()
    assert Env.cur().config("log.level") == "err"


def test_explicit_work_dir(tmp_path):
    etc = tmp_path / "elsewhere" / "etc" / "collection"
    etc.mkdir(parents=True)
    (etc / "config.props").write_text("log.level=err\n")
    env = Env(str(tmp_path / "elsewhere"))
    assert env.config("log.level") == "err"


def test_malformed_props_line_is_skipped(config_props, caplog):
    config_props("not a pair\nlog.level=warn\n")
    with caplog.at_level(logging.WARNING, logger="collection"):
        assert Env.cur().config("log.level") == "warn"
    assert "invalid name/value pair" in caplog.text


def test_read_props():
    props = Env.readProps("a=1\n b = two words \n#c=3\nd=x=y\n")
    assert props == {"a": "1", "b": "two words", "d": "x=y"}


# ---------------------------------------------------------------------------
# Log
# ---------------------------------------------------------------------------


def test_log_level_from_config(config_props):
    config_props("log.level=err\n")
    log = Log.get("collection")
    assert log.level() is LogLevel.err()
    assert not log.isEnabled(LogLevel.warn())
    assert log.isEnabled(LogLevel.err())


def test_log_level_follows_env_reset(config_props):
    log = Log.get("collection")
    assert log.level() is LogLevel.info()
    config_props("log.level=debug\n")
    assert log.level() is LogLevel.debug()


def test_log_level_survives_malformed_line(config_props, caplog):
    config_props("bogus line\nlog.level=debug\n")
    with caplog.at_level(logging.WARNING, logger="collection"):
        List.make(object()).toStr()
    assert Log.get("collection").level() is LogLevel.debug()
    assert "invalid name/value pair" in caplog.text


def test_malformed_line_warning_respects_level(config_props, caplog):
    config_props("bogus line\nlog.level=err\n")
    with caplog.at_level(logging.WARNING, logger="collection"):
        assert Env.cur().config("log.level") == "err"
    assert "invalid name/value pair" not in caplog.text


def test_unknown_log_level_falls_back_to_info(monkeypatch, caplog):
    monkeypatch.setenv("COLLECTION_LOG_LEVEL", "verbose")
    with caplog.at_level(logging.WARNING, logger="collection"):
        assert List.make(1, object()).toStr().startswith("[1,")
        List.make(object()).toStr()
    assert Log.get("collection").level() is LogLevel.info()
    assert caplog.text.count("Unknown log.level 'verbose'") == 1


def test_explicit_level_wins_over_config(config_props):
    config_props("log.level=err\n")
    log = Log.get("collection")
    log.level(LogLevel.debug())
    assert log.level() is LogLevel.debug()


def test_log_registry():
    log = Log.get("collection.test")
    assert Log.get("collection.test") is log
    assert log.name() == "collection.test"
    assert log.toStr() == "collection.test"


def test_log_forwards_to_python_logging(caplog):
    log = Log.get("collection.fwd")
    with caplog.at_level(logging.DEBUG, logger="collection.fwd"):
        log.info("hello")
        log.debug("hidden")
        log.err("broken", ValueError("bad"))
    assert "hello" in caplog.text
    assert "hidden" not in caplog.text
    rec = [r for r in caplog.records if r.getMessage() == "broken"][0]
    assert rec.levelno == logging.ERROR


def test_silent_level_drops_everything(caplog):
    log = Log.get("collection.quiet")
    log.level(LogLevel.silent())
    with caplog.at_level(logging.DEBUG, logger="collection.quiet"):
        log.err("nobody hears this")
    assert caplog.text == ""


def test_log_level_parse():
    assert LogLevel.fromStr("WARN") is LogLevel.warn()
    assert LogLevel.fromStr("nope", False) is None
    with pytest.raises(ParseErr):
        LogLevel.fromStr("nope")
    assert LogLevel.debug().ordinal() < LogLevel.silent().ordinal()
    assert LogLevel.warn().pyLevel() == logging.WARNING
