# flake8: noqa
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))  # noqa: E402

import json
import logging

from recipes_api.logger import ColoredFormatter, JSONFormatter, get_logger, setup_logging


def _record(msg="Recipe saved: %s", args=("Toast",), level=logging.INFO):
    return logging.LogRecord("recipes_api.crud", level, __file__, 10, msg, args, None)


def test_json_formatter():
    line = JSONFormatter().format(_record())
    entry = json.loads(line)
    assert entry["level"] == "INFO"
    assert entry["logger"] == "recipes_api.crud"
    assert entry["message"] == "Recipe saved: Toast"


def test_colored_formatter_keeps_record_intact():
    record = _record(level=logging.ERROR)
    out = ColoredFormatter("%(levelname)s %(message)s").format(record)
    assert "\033[31mERROR" in out
    assert record.levelname == "ERROR"


def test_get_logger_is_namespaced():
    assert get_logger("crud").name == "recipes_api.crud"
    assert get_logger("recipes_api.app").name == "recipes_api.app"


def test_setup_logging_installs_one_handler():
    setup_logging("DEBUG")
    logger = setup_logging("WARNING", json_format=True)
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_json_formatter_merges_extra_fields():
    record = _record()
    record.extra_fields = {"method": "DELETE", "path": "/recipes/abc"}
    entry = json.loads(JSONFormatter().format(record))
    assert entry["method"] == "DELETE"
    assert entry["path"] == "/recipes/abc"
