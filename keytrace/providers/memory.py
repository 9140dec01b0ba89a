from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Tuple

from ._flatten import flatten


class MemoryProvider:
    """Provider over an in-memory mapping.

    Nested mappings and lists are flattened into ``:``-delimited keys.
    """

    def __init__(self, data: Optional[Mapping[str, Any]] = None, name: Optional[str] = None):
        self.name = name
        self._data: Dict[str, Any] = flatten(dict(data or {}))

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        folded = key.casefold()
        if folded in self._data:
            return True, self._data[folded]
        return False, None

    def __str__(self) -> str:
        if self.name:
            return f"MemoryProvider for '{self.name}'"
        return "MemoryProvider"
