import logging
from telegram import Update
from telegram.ext import Application, CommandHandler, ContextTypes, MessageHandler, filters

from wizards_bot.config import Config, load_config, require
from wizards_bot.handlers.commands import nit_command, start
from wizards_bot.handlers.messages import message_handler
from wizards_bot.utils.rate_limit import RateLimiter

logger = logging.getLogger(__name__)


async def cleanup_job(context: ContextTypes.DEFAULT_TYPE) -> None:
    """Periodic rate limiter cleanup"""
    limiter: RateLimiter = context.application.bot_data["rate_limiter"]
    limiter.cleanup_old_entries(max_age=3600)


async def post_init(application: Application) -> None:
    logger.info(f"Bot @{application.bot.username} is up")


def build_application(config: Config) -> Application:
    application = (
        Application.builder()
        .token(require(config.bot_token, "BOT_TOKEN"))
        .post_init(post_init)
        .build()
    )
    application.bot_data["config"] = config
    application.bot_data["rate_limiter"] = RateLimiter(
        config.rate_limit_seconds,
        config.rate_limit_chat_seconds,
    )

    application.add_handler(CommandHandler(["start", "help"], start))
    application.add_handler(CommandHandler("nit", nit_command))
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, message_handler))

    if application.job_queue is not None:
        application.job_queue.run_repeating(cleanup_job, interval=3600, first=3600)
    return application


def main():
    config = load_config()
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=getattr(logging, config.log_level, logging.INFO),
    )

    application = build_application(config)
    logger.info("Starting in polling mode")
    application.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == '__main__':
    main()
