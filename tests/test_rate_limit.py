from fridge import rate_limit
from fridge.rate_limit import InMemoryRateLimiter, check_user_budget, reset_rate_limiter
from fridge.settings import settings


def test_rate_limit_triggers(client, auth_headers):
    reset_rate_limiter()
    prev_limit = settings.API_RATE_LIMIT_PER_MIN
    prev_window = settings.API_RATE_WINDOW_SEC
    settings.API_RATE_LIMIT_PER_MIN = 2
    settings.API_RATE_WINDOW_SEC = 60

    try:
        assert client.get("/ingredients", headers=auth_headers).status_code == 200
        assert client.get("/ingredients", headers=auth_headers).status_code == 200
        resp = client.get("/ingredients", headers=auth_headers)
        assert resp.status_code == 429
        assert "Retry-After" in resp.headers
    finally:
        settings.API_RATE_LIMIT_PER_MIN = prev_limit
        settings.API_RATE_WINDOW_SEC = prev_window
        reset_rate_limiter()


def test_in_memory_limiter_is_per_key():
    limiter = InMemoryRateLimiter()
    assert limiter.allow("a", 1, 60).allowed
    assert not limiter.allow("a", 1, 60).allowed
    assert limiter.allow("b", 1, 60).allowed


def test_budget_is_per_user():
    prev_limit = settings.API_RATE_LIMIT_PER_MIN
    settings.API_RATE_LIMIT_PER_MIN = 1
    try:
        assert check_user_budget(1).allowed
        blocked = check_user_budget(1)
        assert not blocked.allowed
        assert blocked.retry_after >= 1
        assert check_user_budget(2).allowed
    finally:
        settings.API_RATE_LIMIT_PER_MIN = prev_limit


def test_redis_url_without_client_falls_back(monkeypatch):
    monkeypatch.setattr(rate_limit, "redis", None)
    monkeypatch.setattr(settings, "REDIS_URL", "redis://localhost:6379/0")
    assert isinstance(rate_limit.get_rate_limiter(), InMemoryRateLimiter)
