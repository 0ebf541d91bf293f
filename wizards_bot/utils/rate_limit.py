import time


class RateLimiter:
    def __init__(self, user_seconds: float, chat_seconds: float, clock=time.monotonic):
        self.user_seconds = user_seconds
        self.chat_seconds = chat_seconds
        self._clock = clock
        self.user_timestamps: dict[int, float] = {}
        self.chat_timestamps: dict[int, float] = {}

    def _check(self, timestamps: dict, key: int, window: float, now: float) -> bool:
        last_request = timestamps.get(key)
        return last_request is None or now - last_request >= window

    def is_allowed(self, user_id: int, chat_id: int) -> bool:
        """Checks both limits and records the request only when it passes"""
        now = self._clock()
        if not self._check(self.user_timestamps, user_id, self.user_seconds, now):
            return False
        if not self._check(self.chat_timestamps, chat_id, self.chat_seconds, now):
            return False
        self.user_timestamps[user_id] = now
        self.chat_timestamps[chat_id] = now
        return True

    def cleanup_old_entries(self, max_age: float = 3600):
        """Drops entries older than max_age seconds"""
        now = self._clock()

        old_users = [uid for uid, ts in self.user_timestamps.items() if now - ts > max_age]
        for uid in old_users:
            del self.user_timestamps[uid]

        old_chats = [cid for cid, ts in self.chat_timestamps.items() if now - ts > max_age]
        for cid in old_chats:
            del self.chat_timestamps[cid]
