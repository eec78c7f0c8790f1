import io

from promptengine import get_input
from promptengine.core.logging import Logger, logger
from promptengine.system.settings import Settings, SettingsData


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PROMPTENGINE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PROMPTENGINE_COLOR_DISABLED", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)
    data = Settings.load().data
    assert data.log_level == "WARN"
    assert data.color is True


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("PROMPTENGINE_LOG_LEVEL", "debug")
    monkeypatch.setenv("PROMPTENGINE_COLOR_DISABLED", "1")
    data = Settings.load().data
    assert data.log_level == "DEBUG"
    assert data.color is False


def test_invalid_level_normalizes_to_default():
    data = SettingsData(log_level="LOUD")
    data.normalize()
    assert data.log_level == "WARN"


def test_logger_threshold_and_fields():
    buf = io.StringIO()
    log = Logger("INFO", stream=buf)
    log.debug("Hidden")
    log.info("Shown", attempt=2)
    out = buf.getvalue()
    assert "Hidden" not in out
    assert "[INFO] Shown attempt=2" in out


def test_apply_sets_global_level(monkeypatch):
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    Settings(SettingsData(log_level="ERROR")).apply()
    assert not logger.is_enabled("WARN")
    assert logger.is_enabled("ERROR")


def test_rejected_attempts_are_logged_at_debug(terminal, monkeypatch, capsys):
    monkeypatch.setattr(logger, "threshold", logger.threshold)
    logger.set_level("DEBUG")
    terminal("nope", "3")
    assert get_input("N? ", int) == 3
    captured = capsys.readouterr()
    assert "InputParseFailed" in captured.err
    assert captured.out == ""


def test_colour_follows_settings(monkeypatch):
    from promptengine.ui.colors import colored_text
    buf = io.StringIO()
    log = Logger("INFO", stream=buf)

    monkeypatch.setenv("PROMPTENGINE_COLOR_DISABLED", "1")
    assert colored_text("oops", "red") == "oops"
    log.info("Plain")
    assert "\x1b[" not in buf.getvalue()

    monkeypatch.delenv("PROMPTENGINE_COLOR_DISABLED")
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert colored_text("oops", "red").startswith("\x1b[")
    log.info("Coloured")
    assert "\x1b[" in buf.getvalue()
