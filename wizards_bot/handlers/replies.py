from telegram import Message

from wizards_bot.utils.text_format import MESSAGE_LIMIT, split_message


def get_thread_id(message: Message | None) -> int | None:
    if not message:
        return None
    return getattr(message, "message_thread_id", None)


async def reply_text(message: Message, text: str, limit: int = MESSAGE_LIMIT) -> None:
    """Replies in the same forum topic, splitting long text into several messages"""
    thread_id = get_thread_id(message)
    for part in split_message(text, limit):
        await message.reply_text(
            part,
            message_thread_id=thread_id,
        )
