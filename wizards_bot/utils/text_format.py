MESSAGE_LIMIT = 4096


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def split_message(text: str, max_length: int = MESSAGE_LIMIT) -> list[str]:
    """Splits text into chunks that fit in one Telegram message, preferring line breaks"""
    if len(text) <= max_length:
        return [text]

    parts = []
    remaining = text
    while len(remaining) > max_length:
        cut = remaining.rfind("\n", 0, max_length + 1)
        if cut <= 0:
            cut = remaining.rfind(" ", 0, max_length + 1)
        if cut <= 0:
            # No break point, hard cut
            parts.append(remaining[:max_length])
            remaining = remaining[max_length:]
            continue
        parts.append(remaining[:cut])
        remaining = remaining[cut + 1:]
    if remaining:
        parts.append(remaining)
    return parts
