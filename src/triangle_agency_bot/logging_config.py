import json
import logging
from datetime import datetime, timezone

# Extra attributes handlers attach to records via `extra=`
CONTEXT_FIELDS = ("correlation_id", "user_id", "inline_query_id", "result", "hits", "chaos")


def _context(record: logging.LogRecord) -> dict:
    return {
        name: getattr(record, name)
        for name in CONTEXT_FIELDS
        if getattr(record, name, None) is not None
    }


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        base = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        service = getattr(record, "service", None)
        if service:
            base["service"] = service
        base.update(_context(record))
        if record.exc_info and record.exc_info[0] is not None:
            base["exception_type"] = record.exc_info[0].__name__
            base["exception_message"] = str(record.exc_info[1])
            base["traceback"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)


class HumanFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        service = getattr(record, "service", "-")
        fields = " ".join(f"{k}={v}" for k, v in _context(record).items())
        line = f"{ts} | {record.levelname:<8} | {service} | {record.name} | {record.getMessage()}"
        if fields:
            line = f"{line} | {fields}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


class ServiceFilter(logging.Filter):
    def __init__(self, service_name: str) -> None:
        super().__init__()
        self.service_name = service_name

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = self.service_name
        return True


def _safe_level(level_value: str | None) -> int:
    level = getattr(logging, (level_value or "INFO").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(service_name: str, json_enabled: bool = True, level_value: str | None = "INFO") -> None:
    root = logging.getLogger()
    # Clear existing handlers
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.addFilter(ServiceFilter(service_name))
    handler.setFormatter(JsonFormatter() if json_enabled else HumanFormatter())

    root.addHandler(handler)
    root.setLevel(_safe_level(level_value))

    # python-telegram-bot logs every polling request through httpx
    for noisy in ("httpx",):
        logging.getLogger(noisy).setLevel(logging.WARNING)
