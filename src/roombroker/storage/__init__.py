"""roombroker storage — key-value store port with in-memory and Redis backends."""

from roombroker.storage.adapters.memory import InMemoryKeyValueStore
from roombroker.storage.adapters.redis import RedisKeyValueStore
from roombroker.storage.ports.outbound import KeyValueStore

__all__ = ["InMemoryKeyValueStore", "KeyValueStore", "RedisKeyValueStore"]
