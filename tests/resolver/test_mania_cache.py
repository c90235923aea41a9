from __future__ import annotations

import threading

import pytest

from legacy_skin.domain.configuration import ManiaConfiguration
from legacy_skin.domain.errors import LookupContractError
from legacy_skin.resolver.mania_cache import ManiaConfigurationCache


def test_get_or_create_materializes_once() -> None:
    calls: list[int] = []

    def _factory(keys: int) -> ManiaConfiguration:
        calls.append(keys)
        return ManiaConfiguration.defaults(keys)

    cache = ManiaConfigurationCache(factory=_factory)
    first = cache.get_or_create(4)
    second = cache.get_or_create(4)
    assert first is second
    assert calls == [4]


def test_decoded_blocks_seed_cache_and_later_blocks_win() -> None:
    # Duplicate key counts keep the last decoded block.
    early = ManiaConfiguration.defaults(4)
    late = ManiaConfiguration.defaults(4)
    cache = ManiaConfigurationCache([early, late])
    assert cache.get_or_create(4) is late
    assert len(cache) == 1


def test_get_does_not_create() -> None:
    cache = ManiaConfigurationCache()
    assert cache.get(5) is None
    assert 5 not in cache


def test_non_positive_keys_rejected() -> None:
    with pytest.raises(LookupContractError):
        ManiaConfigurationCache().get_or_create(0)


def test_concurrent_first_access_creates_single_configuration() -> None:
    # Check-then-insert runs under one lock, so racing threads share one configuration.
    calls: list[int] = []
    barrier = threading.Barrier(8)

    def _factory(keys: int) -> ManiaConfiguration:
        calls.append(keys)
        return ManiaConfiguration.defaults(keys)

    cache = ManiaConfigurationCache(factory=_factory)
    results: list[ManiaConfiguration] = []
    results_lock = threading.Lock()

    def _worker() -> None:
        barrier.wait()
        configuration = cache.get_or_create(7)
        with results_lock:
            results.append(configuration)

    threads = [threading.Thread(target=_worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert calls == [7]
    assert len(results) == 8
    assert all(item is results[0] for item in results)
