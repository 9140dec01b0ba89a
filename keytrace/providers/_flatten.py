"""Helpers shared by the provider adapters."""

from __future__ import annotations

from typing import Any, Dict, Iterator, Tuple

KEY_DELIMITER = ":"


def iter_hierarchical(data: Any, parent: str = "") -> Iterator[Tuple[str, Any]]:
    """Flatten nested mappings and lists into ``:``-delimited keys.

    List items are keyed by their index, so ``{"Hosts": ["a"]}`` yields
    ``("Hosts:0", "a")``. Empty containers yield nothing.
    """
    if isinstance(data, dict):
        items = ((str(k), v) for k, v in data.items())
    elif isinstance(data, list):
        items = ((str(i), v) for i, v in enumerate(data))
    else:
        yield parent, data
        return

    for key, value in items:
        full_key = key if not parent else f"{parent}{KEY_DELIMITER}{key}"
        yield from iter_hierarchical(value, full_key)


def as_text(value: Any) -> Any:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten(data: Any) -> Dict[str, Any]:
    """Flatten ``data`` into a case-insensitive lookup table of strings."""
    return {key.casefold(): as_text(value) for key, value in iter_hierarchical(data)}
