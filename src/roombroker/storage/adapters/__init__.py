"""Storage adapters — concrete key-value store implementations."""

from roombroker.storage.adapters.memory import InMemoryKeyValueStore
from roombroker.storage.adapters.redis import RedisKeyValueStore

__all__ = ["InMemoryKeyValueStore", "RedisKeyValueStore"]
