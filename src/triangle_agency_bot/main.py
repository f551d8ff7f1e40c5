import logging

from telegram.ext import Application, ApplicationBuilder, CommandHandler, InlineQueryHandler, filters

from triangle_agency_bot.config import Settings, load_settings
from triangle_agency_bot.handlers import COMMANDS, help_command, inline_roll, roll_command
from triangle_agency_bot.logging_config import configure_logging

logger = logging.getLogger(__name__)

_CALLBACKS = {
    "help": help_command,
    "roll": roll_command,
}


async def _on_error(update, context) -> None:
    """Global error handler: log full traceback without raising."""
    log = logging.getLogger("triangle_agency_bot.errors")
    err = getattr(context, "error", None)
    exc_info = (type(err), err, err.__traceback__) if err is not None else True
    log.error("Unhandled error in update handler", exc_info=exc_info)


def build_application(settings: Settings) -> Application:
    application = ApplicationBuilder().token(settings.token).build()

    application.add_error_handler(_on_error)

    # New messages only; edits of a command message carry no `update.message`
    for name, aliases, _ in COMMANDS:
        application.add_handler(CommandHandler([name, *aliases], _CALLBACKS[name], filters=filters.UpdateType.MESSAGE))
    application.add_handler(CommandHandler("start", help_command, filters=filters.UpdateType.MESSAGE))
    application.add_handler(InlineQueryHandler(inline_roll))
    return application


def main() -> None:
    settings = load_settings()
    configure_logging(
        service_name=settings.service_name,
        json_enabled=settings.log_json,
        level_value=settings.log_level,
    )
    logger.info("Starting bot")

    application = build_application(settings)
    application.run_polling()


if __name__ == "__main__":
    main()
