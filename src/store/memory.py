
import threading
from collections import defaultdict
from typing import Dict, Set
from src.store.base import KeyValueStore

class MemoryStore(KeyValueStore):
    """
    In-process store for a single worker (local runs and tests).
    Every operation holds the lock, so each call is atomic like its redis counterpart.
    """
    def __init__(self):
        self._lock = threading.Lock()
        self._sets: Dict[str, Set[str]] = defaultdict(set)
        self._counters: Dict[str, int] = defaultdict(int)

    def set_add(self, key: str, member: str) -> None:
        with self._lock:
            self._sets[key].add(member)

    def set_is_member(self, key: str, member: str) -> bool:
        with self._lock:
            return member in self._sets.get(key, ())

    def set_cardinality(self, key: str) -> int:
        with self._lock:
            return len(self._sets.get(key, ()))

    def counter_increment(self, key: str) -> int:
        with self._lock:
            self._counters[key] += 1
            return self._counters[key]

    def counter_get(self, key: str) -> int:
        with self._lock:
            return self._counters.get(key, 0)
