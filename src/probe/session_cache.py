"""Client-side TLS session caches."""
import logging
import ssl
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Optional

from .constants import ProbeConstants


logger = logging.getLogger(__name__)


class SessionCache(ABC):
    """Stores TLS sessions keyed by server name for later resumption."""

    @abstractmethod
    def put(self, key: str, session: Optional[ssl.SSLSession]) -> None:
        """Store a session for the given key."""
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[ssl.SSLSession]:
        """Return the cached session for key, or None when there is none."""
        pass


class LRUSessionCache(SessionCache):
    """Bounded least-recently-used session cache."""

    def __init__(self, capacity: int = ProbeConstants.SESSION_CACHE_SIZE):
        if capacity < 1:
            raise ValueError(f"Session cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: "OrderedDict[str, ssl.SSLSession]" = OrderedDict()

    def put(self, key: str, session: Optional[ssl.SSLSession]) -> None:
        if session is None:
            self._entries.pop(key, None)
            return
        self._entries[key] = session
        self._entries.move_to_end(key)
        while len(self._entries) > self.capacity:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted TLS session for {evicted}")

    def get(self, key: str) -> Optional[ssl.SSLSession]:
        session = self._entries.get(key)
        if session is not None:
            self._entries.move_to_end(key)
        return session

    def __len__(self) -> int:
        return len(self._entries)


class NullSessionCache(SessionCache):
    """Cache that never remembers anything, so sessions are never resumed."""

    def put(self, key: str, session: Optional[ssl.SSLSession]) -> None:
        pass

    def get(self, key: str) -> Optional[ssl.SSLSession]:
        return None
