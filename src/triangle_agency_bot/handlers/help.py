import logging

from telegram import Update
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)

# (command, aliases, description)
COMMANDS: list[tuple[str, tuple[str, ...], str]] = [
    ("help", ("h",), "Display this text."),
    ("roll", ("r",), "Roll 6d4."),
]


def help_text() -> str:
    lines = ["These commands are supported:", ""]
    for name, aliases, description in COMMANDS:
        names = ", ".join(f"/{command}" for command in (name, *aliases))
        lines.append(f"{names} — {description}")
    return "\n".join(lines)


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    chat_id = update.effective_chat.id if update.effective_chat else None
    user_id = update.effective_user.id if update.effective_user else None
    logger.info("Help requested", extra={"correlation_id": chat_id, "user_id": user_id})
    await update.message.reply_text(help_text())
