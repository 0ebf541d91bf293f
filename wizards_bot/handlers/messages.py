import logging
from telegram import Update
from telegram.ext import ContextTypes

from wizards_bot.config import Config
from wizards_bot.handlers.replies import reply_text
from wizards_bot.mirrors.rewrite import has_mirror_links, rewrite_urls
from wizards_bot.utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


def _should_reply_in_group(update: Update, config: Config, bot_username: str | None) -> bool:
    chat = update.effective_chat
    if not chat:
        return False
    if chat.type in {"private"}:
        return True
    if config.reply_in_groups:
        return True
    if not bot_username or not update.message or not update.message.entities:
        return False
    text = update.message.text or ""
    for entity in update.message.entities:
        if entity.type == "mention":
            mention = text[entity.offset : entity.offset + entity.length]
            if mention.lower() == f"@{bot_username.lower()}":
                return True
    return False


def is_allowed_user(update: Update, config: Config) -> bool:
    if not config.telegram_user_ids:
        return True
    user = update.effective_user
    return user is not None and user.id in config.telegram_user_ids


def check_rate_limit(update: Update, limiter: RateLimiter) -> bool:
    user = update.effective_user
    chat = update.effective_chat
    if not user or not chat:
        return True
    if limiter.is_allowed(user.id, chat.id):
        return True
    logger.info(f"Rate limit hit: user {user.id}, chat {chat.id}")
    return False


async def message_handler(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    message = update.message
    if not message or not message.text:
        return

    config: Config = context.application.bot_data["config"]
    limiter: RateLimiter = context.application.bot_data["rate_limiter"]

    if not is_allowed_user(update, config):
        logger.debug("Ignoring message from a user outside TELEGRAM_USER_IDS")
        return

    if not _should_reply_in_group(update, config, context.bot.username):
        return

    if not has_mirror_links(message.text):
        return

    if not check_rate_limit(update, limiter):
        return

    await reply_text(message, rewrite_urls(message.text))
