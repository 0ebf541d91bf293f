import os
from dataclasses import dataclass

DEFAULT_PORT = 8888


def _env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None:
        return default
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_port(name: str, default: int = DEFAULT_PORT) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        port = int(value)
    except ValueError:
        return default
    if not 0 < port < 65536:
        return default
    return port


@dataclass(frozen=True)
class Config:
    mm_slash_token: str
    bot_token: str
    address: str
    port: int
    revision: str
    telegram_user_ids: frozenset[int]
    reply_in_groups: bool
    rate_limit_seconds: float
    rate_limit_chat_seconds: float
    log_level: str


def load_config() -> Config:
    ids_raw = _env("TELEGRAM_USER_IDS", "")
    ids = set()
    if ids_raw:
        for part in ids_raw.split(","):
            part = part.strip()
            if part:
                ids.add(int(part))

    return Config(
        mm_slash_token=_env("MM_SLASH_TOKEN", "") or "",
        bot_token=_env("BOT_TOKEN", "") or "",
        address=_env("WIZARDS_BOT_ADDRESS", "0.0.0.0") or "0.0.0.0",
        port=_env_port("WIZARDS_BOT_PORT"),
        revision=_env("WIZARDS_BOT_REVISION", "dev") or "dev",
        telegram_user_ids=frozenset(ids),
        reply_in_groups=_env_bool("REPLY_IN_GROUPS", False),
        rate_limit_seconds=float(_env("RATE_LIMIT_SECONDS", "2") or "2"),
        rate_limit_chat_seconds=float(_env("RATE_LIMIT_CHAT_SECONDS", "1") or "1"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
    )


def require(value: str, name: str) -> str:
    if not value:
        raise RuntimeError(f"{name} is not set")
    return value
