import time

import pytest

from pokedexcli.cache import Cache


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("https://example.com", b"testdata"),
        ("https://example.com/path", b"moretestdata"),
    ],
)
def test_add_get(key, value):
    with Cache(5.0) as cache:
        cache.add(key, value)
        assert cache.get(key) == value


def test_reap_loop():
    with Cache(0.005) as cache:
        cache.add("https://example.com", b"testdata")
        assert cache.get("https://example.com") == b"testdata"

        deadline = time.monotonic() + 2.0
        while cache.get("https://example.com") is not None and time.monotonic() < deadline:
            time.sleep(0.01)

        assert cache.get("https://example.com") is None


def test_get_missing_key_returns_none():
    with Cache(5.0) as cache:
        assert cache.get("https://example.com/missing") is None


def test_add_replaces_value():
    with Cache(5.0) as cache:
        cache.add("https://example.com", b"first")
        cache.add("https://example.com", b"second")
        assert cache.get("https://example.com") == b"second"
        assert len(cache) == 1


def test_reap_removes_only_old_entries():
    with Cache(60.0) as cache:
        cache.add("https://example.com", b"testdata")
        cache.reap(now=time.monotonic(), max_age=60.0)
        assert "https://example.com" in cache

        cache.reap(now=time.monotonic() + 120.0, max_age=60.0)
        assert "https://example.com" not in cache
        assert len(cache) == 0


def test_close_stops_reaping():
    cache = Cache(0.005)
    cache.close()
    cache.add("https://example.com", b"testdata")
    time.sleep(0.05)
    assert cache.get("https://example.com") == b"testdata"


@pytest.mark.parametrize("interval", [0, -1.0])
def test_non_positive_interval_rejected(interval):
    with pytest.raises(ValueError):
        Cache(interval)