import json
import logging
import logging.config

from hostel_allocation.config.logging import CustomJsonFormatter, build_logging_config
from hostel_allocation.config.settings import Settings


def _record(**extra):
    record = logging.LogRecord("hostel_allocation.test", logging.INFO, __file__, 1, "Room added", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_carries_environment_and_context():
    formatter = CustomJsonFormatter("%(message)s", environment="staging")

    payload = json.loads(formatter.format(_record(room_number="A-102", request_id="req-1")))

    assert payload["message"] == "Room added"
    assert payload["environment"] == "staging"
    assert payload["room_number"] == "A-102"
    assert payload["request_id"] == "req-1"
    assert payload["level"] == "INFO"


def test_formatters_do_not_share_environment():
    production = CustomJsonFormatter("%(message)s", environment="production")
    staging = CustomJsonFormatter("%(message)s", environment="staging")

    assert json.loads(production.format(_record()))["environment"] == "production"
    assert json.loads(staging.format(_record()))["environment"] == "staging"


def test_build_logging_config_passes_environment_to_json_formatter():
    config = build_logging_config(Settings(ENVIRONMENT="production", LOG_FORMAT="json", LOG_FILE=None))

    json_formatter = config["formatters"]["json"]
    assert json_formatter["environment"] == "production"
    assert config["handlers"]["console"]["formatter"] == "json"
    assert "environment" not in vars(CustomJsonFormatter)


def test_dict_config_builds_json_formatter_with_environment():
    config = build_logging_config(Settings(ENVIRONMENT="production", LOG_FORMAT="json", LOG_FILE=None))
    logger = logging.getLogger("hostel_allocation")
    saved_handlers, saved_level, saved_propagate = logger.handlers[:], logger.level, logger.propagate

    try:
        logging.config.dictConfig(config)
        formatter = logger.handlers[0].formatter

        assert isinstance(formatter, CustomJsonFormatter)
        assert formatter.environment == "production"
    finally:
        logger.handlers[:] = saved_handlers
        logger.setLevel(saved_level)
        logger.propagate = saved_propagate
