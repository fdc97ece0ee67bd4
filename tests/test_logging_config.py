import json
import logging

import pytest

from cdc_platform.config import HttpSettings, default_settings
from cdc_platform.logging_config import JsonFormatter, configure_logging


def test_logging_level_config():
    level = getattr(logging, default_settings.log_level.upper(), logging.INFO)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        name="cdc_platform.platform_api.client",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg="[%s] - %s",
        args=("token/transfer", "insufficient funds"),
        exc_info=None,
    )
    record.operation = "token/transfer"
    record.error = "insufficient funds"
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {
        "level": "ERROR",
        "message": "[token/transfer] - insufficient funds",
        "name": "cdc_platform.platform_api.client",
        "operation": "token/transfer",
        "error": "insufficient funds",
    }


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)


@pytest.mark.parametrize("log_format,json_handler", [("json", True), ("plain", False)])
def test_configure_logging(restore_root_logger, log_format, json_handler):
    configure_logging(HttpSettings(log_level="warning", log_format=log_format))
    root = restore_root_logger
    assert root.level == logging.WARNING
    formatters = [type(handler.formatter) for handler in root.handlers]
    assert (JsonFormatter in formatters) is json_handler
