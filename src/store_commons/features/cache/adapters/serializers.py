"""Cache value serializers for out-of-process cache backends."""

import pickle
from typing import Any

from ....core.exceptions import CacheSerializationError


class PickleSerializer:
    """Pickle serializer for trusted, same-codebase cache data.

    Domain entities (dataclasses, sets, datetimes) round-trip without
    per-type mapping code.
    """

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        if protocol < 0 or protocol > pickle.HIGHEST_PROTOCOL:
            protocol = pickle.HIGHEST_PROTOCOL
        self._protocol = protocol

    def serialize(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise CacheSerializationError(f"Failed to pickle value of type {type(value).__name__}: {e}")

    def deserialize(self, data: bytes) -> Any:
        try:
            return pickle.loads(data)
        except (pickle.UnpicklingError, EOFError, AttributeError, ImportError) as e:
            raise CacheSerializationError(f"Failed to unpickle cached value: {e}")

