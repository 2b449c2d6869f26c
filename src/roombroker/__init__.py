"""roombroker — coordinate shared video room sessions and captions across concurrent requests."""

from roombroker.captions.coordinator import CaptionsCoordinator
from roombroker.concurrency.keyed_serializer import KeyedSerializer, serialized_per_key
from roombroker.service import RoomService
from roombroker.sessions.models import CaptionsState, SessionRecord
from roombroker.sessions.registry import SessionRegistry
from roombroker.storage.adapters.memory import InMemoryKeyValueStore
from roombroker.storage.adapters.redis import RedisKeyValueStore
from roombroker.storage.ports.outbound import KeyValueStore

__version__ = "0.1.0"

__all__ = [
    "CaptionsCoordinator",
    "CaptionsState",
    "InMemoryKeyValueStore",
    "KeyValueStore",
    "KeyedSerializer",
    "RedisKeyValueStore",
    "RoomService",
    "SessionRecord",
    "SessionRegistry",
    "serialized_per_key",
]
