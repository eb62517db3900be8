import io
import json

from super_services.logger import new_logger


def lines(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_info_is_written_as_json():
    stream = io.StringIO()
    logger = new_logger("test.info", stream)
    logger.info("hello %s", "world")
    entries = lines(stream)
    assert len(entries) == 1
    assert entries[0]["level"] == "info"
    assert entries[0]["msg"] == "hello world"
    assert entries[0]["logger"] == "test.info"


def test_debug_is_suppressed():
    stream = io.StringIO()
    logger = new_logger("test.debug", stream)
    logger.debug("hidden")
    assert stream.getvalue() == ""


def test_error_level_and_caller():
    stream = io.StringIO()
    logger = new_logger("test.error", stream)
    logger.error("broken")
    entry = lines(stream)[0]
    assert entry["level"] == "error"
    assert entry["caller"].startswith("test_logger.py:")


def test_repeated_creation_does_not_duplicate_output():
    first = io.StringIO()
    second = io.StringIO()
    new_logger("test.repeat", first)
    logger = new_logger("test.repeat", second)
    logger.warning("once")
    assert first.getvalue() == ""
    assert len(lines(second)) == 1