import json
import logging

from triangle_agency_bot.logging_config import HumanFormatter, JsonFormatter, ServiceFilter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("triangle_agency_bot.handlers.roll", logging.INFO, __file__, 1, "Dice rolled", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_service_and_roll_fields() -> None:
    record = _record(service="bot", correlation_id=7, result="Success", hits=2, chaos=4)
    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "triangle_agency_bot.handlers.roll"
    assert payload["message"] == "Dice rolled"
    assert payload["service"] == "bot"
    assert payload["correlation_id"] == 7
    assert (payload["result"], payload["hits"], payload["chaos"]) == ("Success", 2, 4)
    assert "exception_type" not in payload


def test_json_formatter_reports_exceptions() -> None:
    try:
        raise ValueError("boom")
    except ValueError:
        import sys

        record = _record()
        record.exc_info = sys.exc_info()
    payload = json.loads(JsonFormatter().format(record))

    assert payload["exception_type"] == "ValueError"
    assert payload["exception_message"] == "boom"
    assert "Traceback" in payload["traceback"]


def test_human_formatter_appends_context_fields() -> None:
    line = HumanFormatter().format(_record(service="bot", hits=0, chaos=6))
    assert "| INFO     | bot | triangle_agency_bot.handlers.roll | Dice rolled | hits=0 chaos=6" in line


def test_service_filter_keeps_explicit_service() -> None:
    record = _record(service="other")
    assert ServiceFilter("bot").filter(record)
    assert record.service == "other"

    record = _record()
    ServiceFilter("bot").filter(record)
    assert record.service == "bot"


def test_configure_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        configure_logging("bot", json_enabled=False, level_value="warning")
        configure_logging("bot", json_enabled=True, level_value="nonsense")

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, JsonFormatter)
        assert root.level == logging.INFO
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
