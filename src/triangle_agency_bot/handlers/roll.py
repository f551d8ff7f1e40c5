import logging

from telegram import InlineQueryResultArticle, InputTextMessageContent, Update
from telegram.ext import ContextTypes

from triangle_agency_bot.dice import RollOutcome, roll
from triangle_agency_bot.rng import create_rng

logger = logging.getLogger(__name__)

INLINE_RESULT_ID = "roll_6d4"
INLINE_TITLE = "🎲 Roll 6d4"
INLINE_DESCRIPTION = "Roll to alter reality"


def _log_outcome(outcome: RollOutcome, extra: dict) -> None:
    logger.info(
        "Dice rolled",
        extra={**extra, "result": type(outcome.result).__name__, "hits": outcome.result.hits, "chaos": outcome.chaos},
    )


async def roll_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    chat_id = update.effective_chat.id if update.effective_chat else None
    user_id = update.effective_user.id if update.effective_user else None
    message_id = update.message.message_id if update.message else None
    # Fresh generator per request, keyed by the message identity
    outcome = roll(create_rng(f"{chat_id}:{message_id}"))
    _log_outcome(outcome, {"correlation_id": chat_id, "user_id": user_id})
    await update.message.reply_text(outcome.to_display_text())


async def inline_roll(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    query = update.inline_query
    user_id = query.from_user.id if query.from_user else None
    outcome = roll(create_rng(str(query.id)))
    _log_outcome(outcome, {"inline_query_id": query.id, "user_id": user_id})

    result = InlineQueryResultArticle(
        id=INLINE_RESULT_ID,
        title=INLINE_TITLE,
        input_message_content=InputTextMessageContent(outcome.to_display_text()),
        description=INLINE_DESCRIPTION,
    )
    # No caching: every query is a new roll
    await query.answer([result], cache_time=0)
