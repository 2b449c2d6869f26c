"""roombroker concurrency — per-key call serialization."""

from roombroker.concurrency.keyed_serializer import KeyedSerializer, serialized_per_key

__all__ = ["KeyedSerializer", "serialized_per_key"]
