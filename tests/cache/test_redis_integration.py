from __future__ import annotations

import os
import uuid

import pytest

from transcendia.cache import LayeredTranslationCache, RedisCacheTier, SharedTierState


def _redis_url() -> str | None:
    return os.getenv("TRANSCENDIA_TEST_REDIS_URL")


@pytest.mark.skipif(_redis_url() is None, reason="TRANSCENDIA_TEST_REDIS_URL is not set")
@pytest.mark.asyncio
async def test_layered_cache_with_real_redis():
    redis = pytest.importorskip("redis.asyncio")
    client = redis.Redis.from_url(_redis_url())
    prefix = f"itest:cache:{uuid.uuid4().hex}"
    cache = LayeredTranslationCache(shared=RedisCacheTier(client, prefix=prefix))

    assert await cache.connect() is True
    assert cache.state is SharedTierState.CONNECTED

    await cache.set("intent:greeting+context:app_entry", "tr", "Merhaba")
    await cache.set("intent:greeting+context:app_entry", "de", "Hallo")
    assert await cache.get("intent:greeting+context:app_entry", "tr") == "Merhaba"
    assert cache.stats().local_entry_count == 0

    await cache.clear_language("tr")
    assert await cache.get("intent:greeting+context:app_entry", "tr") is None
    assert await cache.get("intent:greeting+context:app_entry", "de") == "Hallo"

    # Prefixed tier clears only its own namespace.
    await cache.clear_all()
    assert await cache.get("intent:greeting+context:app_entry", "de") is None

    await cache.aclose()
