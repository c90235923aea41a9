from __future__ import annotations

from collections.abc import Callable, Iterable
from threading import Lock

from legacy_skin.domain.configuration import ManiaConfiguration
from legacy_skin.domain.errors import LookupContractError


class ManiaConfigurationCache:
    """Per key-count mania configurations, seeded from decoded blocks.

    Key counts without a decoded block get a default configuration on first
    access. The check and the insert happen under one lock so concurrent
    first lookups never produce two configurations for the same key count.
    """

    def __init__(
        self,
        decoded: Iterable[ManiaConfiguration] = (),
        *,
        factory: Callable[[int], ManiaConfiguration] = ManiaConfiguration.defaults,
    ) -> None:
        self._lock = Lock()
        self._factory = factory
        self._configurations: dict[int, ManiaConfiguration] = {}
        # Later blocks for the same key count replace earlier ones.
        for configuration in decoded:
            self._configurations[configuration.keys] = configuration

    def get_or_create(self, keys: int) -> ManiaConfiguration:
        if keys < 1:
            raise LookupContractError(f"mania lookups need a positive key count, got {keys}")
        with self._lock:
            existing = self._configurations.get(keys)
            if existing is None:
                existing = self._factory(keys)
                self._configurations[keys] = existing
            return existing

    def get(self, keys: int) -> ManiaConfiguration | None:
        with self._lock:
            return self._configurations.get(keys)

    def __contains__(self, keys: object) -> bool:
        with self._lock:
            return keys in self._configurations

    def __len__(self) -> int:
        with self._lock:
            return len(self._configurations)
