"""
Blackboard Store

The per-agent key/value mapping. It is a bare, ungated map: protection is
applied by the operations, never here.
"""
from typing import Any, Dict, List, Optional, Tuple

from blackboard.storage.core_types import Key, Value


_MISSING = object()


class Storage:
    """In-memory key/value store owned by a single agent."""

    def __init__(self, initial: Optional[Dict[Key, Value]] = None):
        self._data: Dict[Key, Value] = dict(initial or {})

    def get(self, key: Key) -> Optional[Value]:
        return self._data.get(key)

    def put(self, key: Key, value: Value) -> Optional[Value]:
        """Store value under key and return the replaced value, if any."""
        previous = self._data.get(key)
        self._data[key] = value
        return previous

    def remove(self, key: Key) -> Optional[Value]:
        return self._data.pop(key, None)

    def pop(self, key: Key) -> Tuple[bool, Optional[Value]]:
        """
        Remove key and report whether it was present.

        Unlike ``remove`` this tells an absent key apart from a stored None.
        """
        value = self._data.pop(key, _MISSING)
        if value is _MISSING:
            return False, None
        return True, value

    def contains_key(self, key: Key) -> bool:
        return key in self._data

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return not self._data

    def keys(self) -> List[Key]:
        """Snapshot of the current keys, order unspecified."""
        return list(self._data.keys())

    def values(self) -> List[Value]:
        return list(self._data.values())

    def items(self) -> List[Tuple[Key, Value]]:
        return list(self._data.items())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: Any) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Storage(size={len(self._data)})"
