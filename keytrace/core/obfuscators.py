"""Obfuscators turning sensitive values into a redacted display form."""

from __future__ import annotations

from typing import Any, Callable, Dict, Protocol


class Obfuscator(Protocol):
    def obfuscate(self, value: str) -> str:
        ...


class PlainTextObfuscator:
    """Leaves the value as it is."""

    def obfuscate(self, value: str) -> str:
        return value

    def __repr__(self) -> str:
        return "PlainTextObfuscator()"


class FixedStringObfuscator:
    """Replaces any value with the same fixed text."""

    def __init__(self, text: str = "REDACTED"):
        self.text = text

    def obfuscate(self, value: str) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"FixedStringObfuscator({self.text!r})"


class AsteriskObfuscator:
    """Replaces each character with ``*``.

    Args:
        visible: Number of trailing characters left readable. Values at
            least as long as ``visible`` are masked completely.
    """

    def __init__(self, visible: int = 0):
        if visible < 0:
            raise ValueError("visible must not be negative")
        self.visible = visible

    def obfuscate(self, value: str) -> str:
        if self.visible == 0 or len(value) <= self.visible:
            return "*" * len(value)
        hidden = len(value) - self.visible
        return "*" * hidden + value[hidden:]

    def __repr__(self) -> str:
        return f"AsteriskObfuscator(visible={self.visible})"


_OBFUSCATORS: Dict[str, Callable[..., Obfuscator]] = {
    "plain": PlainTextObfuscator,
    "fixed": FixedStringObfuscator,
    "asterisk": AsteriskObfuscator,
}


def obfuscator_from_name(name: str, **kwargs: Any) -> Obfuscator:
    """Build an obfuscator by name.

    Args:
        name: One of ``plain``, ``fixed`` or ``asterisk``.
        **kwargs: Passed to the obfuscator constructor.

    Raises:
        ValueError: If the name is unknown or the options do not fit.
    """
    factory = _OBFUSCATORS.get(name.lower())
    if factory is None:
        raise ValueError(
            f"Unknown obfuscator: {name!r} (expected one of {', '.join(sorted(_OBFUSCATORS))})"
        )
    try:
        return factory(**kwargs)
    except TypeError as e:
        raise ValueError(f"Invalid options for obfuscator {name!r}: {e}") from e
