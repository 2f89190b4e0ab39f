import json
import logging

from rich.logging import RichHandler

from shopsphere.logging_config import LOGGER_ROOT, StructuredFormatter, setup_logging


def test_structured_formatter_emits_json():
    record = logging.LogRecord(
        name="shopsphere.cart",
        level=logging.ERROR,
        pathname=__file__,
        lineno=12,
        msg="Error fetching %s",
        args=("passengers",),
        exc_info=None,
    )
    payload = json.loads(StructuredFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "shopsphere.cart"
    assert payload["message"] == "Error fetching passengers"
    assert payload["line"] == 12


def test_setup_logging_selects_handler():
    logger = setup_logging("debug", "json")
    assert logger.name == LOGGER_ROOT
    assert logger.level == logging.DEBUG
    assert isinstance(logger.handlers[0].formatter, StructuredFormatter)

    logger = setup_logging("INFO", "rich")
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)
