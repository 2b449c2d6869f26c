"""Storage ports."""

from roombroker.storage.ports.outbound import KeyValueStore

__all__ = ["KeyValueStore"]
