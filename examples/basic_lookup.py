"""
basic_lookup.py: minimal Transcendia lookup example.

Seeds an in-memory store, approves one contribution, then resolves the key
twice to show the cache taking over.

Usage:
    export TRANSCENDIA_CACHE_BACKEND=memory   # or point TRANSCENDIA_REDIS_URL at Redis
    python examples/basic_lookup.py
"""

from transcendia import InMemoryTranslationStore, build_services
from transcendia.store import Language


async def main() -> None:
    store = InMemoryTranslationStore([Language("tr", "Turkish", "Türkçe")])
    services = build_services(store=store)
    await services.cache.connect()

    contribution = await services.contributions.submit(
        {"key": "intent:greeting+context:app_entry", "lang": "tr", "value": "Merhaba"}
    )
    await services.contributions.approve(contribution.id)

    for _ in range(2):
        result = await services.translations.translate(
            "intent:greeting+context:app_entry", "tr"
        )
        print(result)

    print(services.cache.stats())
    await services.cache.aclose()


if __name__ == "__main__":
    import asyncio

    asyncio.run(main())
