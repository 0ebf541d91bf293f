import logging
from telegram import Update
from telegram.ext import ContextTypes

from wizards_bot.config import Config
from wizards_bot.handlers.messages import check_rate_limit, is_allowed_user
from wizards_bot.handlers.replies import reply_text
from wizards_bot.mirrors.rewrite import rewrite_urls
from wizards_bot.utils.text_format import is_blank

logger = logging.getLogger(__name__)

EMPTY_TEXT_REPLY = "You need to supply a URL"

HELP_TEXT = """🤖 Wizards Bot

Send me a Twitter or Medium link and I will reply with a Nitter or Scribe link instead.

Commands:
/nit <text> — convert Twitter and Medium links in the text
/help — this message

In groups I answer when mentioned, or to every message if the admin enabled it."""


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/start and /help"""
    if not update.message:
        return
    await update.message.reply_text(HELP_TEXT)


async def nit_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/nit <text>"""
    message = update.message
    if not message:
        return

    config: Config = context.application.bot_data["config"]
    if not is_allowed_user(update, config):
        logger.debug("Ignoring /nit from a user outside TELEGRAM_USER_IDS")
        return

    # Everything after the command itself, whitespace kept
    parts = (message.text or "").split(maxsplit=1)
    text = parts[1] if len(parts) > 1 else ""
    if is_blank(text):
        await reply_text(message, EMPTY_TEXT_REPLY)
        return

    if not check_rate_limit(update, context.application.bot_data["rate_limiter"]):
        return

    await reply_text(message, rewrite_urls(text))
