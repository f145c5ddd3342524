# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Bounded, time-expiring in-memory cache for live Portal responses.
Disabled when ttl <= 0.
"""

import time
from collections import OrderedDict
from typing import Any, Hashable, Optional, Tuple


class ResponseCache:
    """Keyed on (operation, params). Oldest entry is evicted when full."""

    def __init__(self, ttl: float, max_entries: int = 256):
        self.ttl = ttl
        self.max_entries = max(1, max_entries)
        self._entries: "OrderedDict[Hashable, Tuple[float, Any]]" = OrderedDict()

    @property
    def enabled(self) -> bool:
        return self.ttl > 0

    @staticmethod
    def make_key(operation: str, params: dict) -> Hashable:
        return (operation, tuple(sorted((k, str(v)) for k, v in params.items())))

    def get(self, key: Hashable) -> Optional[Any]:
        if not self.enabled:
            return None
        entry = self._entries.get(key)
        if entry is None:
            return None
        expires_at, value = entry
        if expires_at <= time.monotonic():
            del self._entries[key]
            return None
        return value

    def set(self, key: Hashable, value: Any) -> None:
        if not self.enabled:
            return
        self._entries.pop(key, None)
        while len(self._entries) >= self.max_entries:
            self._entries.popitem(last=False)
        self._entries[key] = (time.monotonic() + self.ttl, value)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
