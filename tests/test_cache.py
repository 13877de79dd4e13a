from wardview.config.settings import Settings
from wardview.services.cache import RedisResponseCache, ResponseCache, build_cache


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


class FakeRedis:
    """Just the redis calls the cache makes"""

    def __init__(self):
        self.values = {}
        self.ttls = {}

    def setex(self, key, ttl, value):
        self.values[key] = value
        self.ttls[key] = ttl

    def get(self, key):
        return self.values.get(key)

    def delete(self, *keys):
        for key in keys:
            self.values.pop(key, None)

    def scan_iter(self, match):
        prefix = match.rstrip("*")
        return [key for key in self.values if key.startswith(prefix)]


def test_entries_expire_after_ttl():
    clock = FakeClock()
    cache = ResponseCache(ttl=300, clock=clock)
    cache.set("departments", "[]")

    clock.now += 299
    assert cache.get("departments") == "[]"

    clock.now += 1
    assert cache.get("departments") is None
    assert len(cache) == 0


def test_set_overwrites():
    cache = ResponseCache()
    cache.set("overview", "a")
    cache.set("overview", "b")
    assert cache.get("overview") == "b"


def test_invalidate():
    cache = ResponseCache()
    cache.set("overview", "a")
    cache.set("quality", "b")

    cache.invalidate("overview")
    cache.invalidate("missing")
    assert cache.get("overview") is None
    assert cache.get("quality") == "b"

    cache.invalidate_all()
    assert len(cache) == 0


def test_redis_cache_uses_prefixed_keys():
    client = FakeRedis()
    cache = RedisResponseCache(client, ttl=120)

    cache.set("financial", "{}")
    assert client.values == {"wardview:cache:financial": "{}"}
    assert client.ttls["wardview:cache:financial"] == 120
    assert cache.get("financial") == "{}"

    client.values["unrelated"] = "keep"
    cache.set("quality", "{}")
    cache.invalidate_all()
    assert client.values == {"unrelated": "keep"}


def test_build_cache_defaults_to_memory():
    cache = build_cache(Settings(cache_ttl_seconds=30))
    assert isinstance(cache, ResponseCache)
    assert cache.ttl == 30
