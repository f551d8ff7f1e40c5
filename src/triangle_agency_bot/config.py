import os
from dataclasses import dataclass

DEFAULT_SERVICE_NAME = "triangle-agency-bot"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    token: str
    service_name: str = DEFAULT_SERVICE_NAME
    log_json: bool = True
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read bot settings from the environment; the token is mandatory."""
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN is not set")
    return Settings(
        token=token,
        service_name=os.getenv("LOG_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        log_json=os.getenv("LOG_JSON", "true").lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )
