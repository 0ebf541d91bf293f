from wizards_bot.utils.rate_limit import RateLimiter


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_user_limit():
    clock = FakeClock()
    limiter = RateLimiter(user_seconds=5, chat_seconds=0, clock=clock)
    assert limiter.is_allowed(1, 100)
    assert not limiter.is_allowed(1, 200)
    assert limiter.is_allowed(2, 100)
    clock.now += 5
    assert limiter.is_allowed(1, 200)


def test_chat_limit():
    clock = FakeClock()
    limiter = RateLimiter(user_seconds=0, chat_seconds=3, clock=clock)
    assert limiter.is_allowed(1, 100)
    assert not limiter.is_allowed(2, 100)
    assert limiter.is_allowed(2, 101)


def test_rejected_request_is_not_recorded():
    """A request blocked by the chat limit must not reset the user's window"""
    clock = FakeClock()
    limiter = RateLimiter(user_seconds=5, chat_seconds=5, clock=clock)
    assert limiter.is_allowed(1, 100)
    clock.now += 1
    assert not limiter.is_allowed(2, 100)
    assert 2 not in limiter.user_timestamps


def test_cleanup_old_entries():
    clock = FakeClock()
    limiter = RateLimiter(user_seconds=1, chat_seconds=1, clock=clock)
    limiter.is_allowed(1, 100)
    clock.now += 10
    limiter.is_allowed(2, 200)
    limiter.cleanup_old_entries(max_age=5)
    assert list(limiter.user_timestamps) == [2]
    assert list(limiter.chat_timestamps) == [200]
