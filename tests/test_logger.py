import pytest

from towerengine.logger import LogType, log, set_config


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "log.txt"
    yield path
    set_config(False, False, str(tmp_path / "off.txt"))


def test_labels():
    assert LogType.VERBOSE.label() == "VERBOSE"
    assert LogType.DEBUGGING.label() == "DEBUGGING"
    assert LogType.INFO.label() == "INFO"
    assert LogType.WARN.label() == "WARN"
    assert LogType.ERROR.label() == "ERROR"


def test_set_config_clears_file(log_file):
    log_file.write_text("old content\n")
    set_config(True, False, str(log_file))
    assert log_file.read_text() == ""


def test_log_writes_to_stdout_and_file(log_file, capsys):
    set_config(True, False, str(log_file))
    log(LogType.INFO, "Changed to ", "play", " scene")
    out = capsys.readouterr().out
    assert out == "[INFO] Changed to play scene\n"
    assert log_file.read_text() == out


def test_log_appends_lines(log_file):
    set_config(True, False, str(log_file))
    log(LogType.WARN, "a")
    log(LogType.ERROR, "b", 2)
    assert log_file.read_text().splitlines() == ["[WARN] a", "[ERROR] b2"]


def test_disabled_logs_nothing(log_file, capsys):
    set_config(False, True, str(log_file))
    log(LogType.ERROR, "ignored")
    assert capsys.readouterr().out == ""
    assert log_file.read_text() == ""


def test_verbose_suppressed_unless_enabled(log_file, capsys):
    set_config(True, False, str(log_file))
    log(LogType.VERBOSE, "hidden")
    assert capsys.readouterr().out == ""
    set_config(True, True, str(log_file))
    log(LogType.VERBOSE, "shown")
    assert capsys.readouterr().out == "[VERBOSE] shown\n"