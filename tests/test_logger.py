import datetime
import re

import pytest

from dominion import logger as log
from dominion.exceptions import LoggerError
from dominion.logger import LogLevel, Logger


@pytest.mark.parametrize(
    "text, level",
    [("debug", LogLevel.DEBUG), ("info", LogLevel.INFO), ("warn", LogLevel.WARN), ("error", LogLevel.ERROR)],
)
def test_parse_log_level(text, level):
    assert log.parse_log_level(text) is level


@pytest.mark.parametrize("text", ["", "WARN", "verbose", "warning"])
def test_parse_log_level_unknown(text):
    assert log.parse_log_level(text) is None


def test_level_order_puts_info_lowest():
    levels = [log.parse_log_level(text) for text in ("error", "warn", "info", "debug")]
    assert sorted(levels) == [LogLevel.INFO, LogLevel.DEBUG, LogLevel.WARN, LogLevel.ERROR]


@pytest.mark.parametrize("level", list(LogLevel))
def test_level_name_round_trips(level):
    assert log.parse_log_level(log.level_name(level).lower()) is level


def test_format_level_plain_for_file():
    assert log.format_level(LogLevel.ERROR, True) == "ERROR"


def test_format_level_coloured_for_console():
    assert log.format_level(LogLevel.WARN, False) == "\033[0;33mWARN\033[0m"


@pytest.mark.parametrize("level", list(LogLevel))
def test_format_log_level_file_width(level):
    text = log.format_log_level(level, True)
    assert text.startswith("[") and text.endswith("]")
    assert len(text) == 7
    assert text[1:-1].rstrip() == log.level_name(level)


@pytest.mark.parametrize("level", list(LogLevel))
def test_format_log_level_console_contains_colour(level):
    text = log.format_log_level(level, False)
    assert log.format_level(level, False) in text
    assert len(text) >= 18


def test_strip_file_path_with_marker():
    assert log.strip_file_path("/home/dev/dominion/modules/a.cpp") == "modules/a.cpp"


def test_strip_file_path_without_marker():
    path = "/tmp/other/file.py"
    assert log.strip_file_path(path) == path


def test_format_file_line():
    assert log.format_file_line("x/dominion/y.py", 12) == "[y.py:12]"


def test_format_timestamp_shape():
    stamp = log.format_timestamp()
    assert re.fullmatch(r"\[\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3}\]", stamp) is not None
    parsed = datetime.datetime.strptime(stamp[1:-1], "%Y-%m-%d %H:%M:%S.%f")
    assert abs((datetime.datetime.now() - parsed).total_seconds()) < 60


def test_logger_filters_below_minimum(capsys):
    logger = Logger()
    logger.write(LogLevel.INFO, "hidden")
    logger.write(LogLevel.ERROR, "shown")
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown\n" in err


def test_logger_log_includes_location(capsys):
    logger = Logger(LogLevel.INFO)
    logger.log(LogLevel.WARN, "message body", "/src/dominion/game.py", 42)
    err = capsys.readouterr().err
    assert "[game.py:42] - message body" in err
    assert log.format_level(LogLevel.WARN, False) in err


def test_logger_log_uses_caller_location(capsys):
    logger = Logger(LogLevel.INFO)
    logger.log(LogLevel.ERROR, "where am i")
    err = capsys.readouterr().err
    assert "test_logger.py:" in err


def test_logger_writes_to_file(tmp_path, capsys):
    target = tmp_path / "nested" / "game.log"
    logger = Logger(LogLevel.DEBUG)
    logger.write_to(str(target))
    logger.log(LogLevel.DEBUG, "into file", "f.py", 1)
    logger.log(LogLevel.INFO, "dropped", "f.py", 2)
    logger.close()
    content = target.read_text(encoding="utf-8")
    assert "[DEBUG] [f.py:1] - into file" in content
    assert "dropped" not in content
    assert content.endswith("[INFO] - END LOG\n")
    assert "into file" not in capsys.readouterr().err


def test_logger_write_to_empty_returns_to_stderr(tmp_path, capsys):
    target = tmp_path / "game.log"
    logger = Logger()
    logger.write_to(str(target))
    logger.write_to("")
    logger.write(LogLevel.ERROR, "back on stderr")
    assert "back on stderr" in capsys.readouterr().err
    assert "back on stderr" not in target.read_text(encoding="utf-8")


def test_logger_write_to_unopenable_path_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    logger = Logger()
    with pytest.raises(LoggerError):
        logger.write_to(str(blocker / "sub" / "game.log"))


def test_logger_appends(tmp_path):
    target = tmp_path / "game.log"
    for text in ("first", "second"):
        with Logger() as logger:
            logger.write_to(str(target))
            logger.write(LogLevel.ERROR, text)
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines.index("first") < lines.index("second")


def test_global_logger_is_shared_and_initialize_refuses_twice():
    first = log.get_logger()
    assert log.get_logger() is first
    with pytest.raises(LoggerError):
        log.initialize()


def test_global_set_and_get_level():
    original = log.get_level()
    try:
        log.set_level(LogLevel.ERROR)
        assert log.get_level() is LogLevel.ERROR
        assert log.get_logger().min_level is LogLevel.ERROR
    finally:
        log.set_level(original)