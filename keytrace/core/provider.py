"""Provider protocol and the ordered provider root."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class ConfigurationProvider(Protocol):
    """A single layer of configuration values.

    Providers answer whether they hold a value for a key. Their display
    identity is whatever ``str(provider)`` returns.
    """

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        """Look up a key.

        Args:
            key: Configuration key, e.g. ``Db:Password``.

        Returns:
            ``(True, value)`` when the provider holds the key,
            ``(False, None)`` otherwise.
        """
        ...


@runtime_checkable
class ProviderRoot(Protocol):
    """Ordered aggregate of the active providers of a configuration."""

    @property
    def providers(self) -> Sequence[ConfigurationProvider]:
        ...


@dataclass
class ConfigurationRoot:
    """Plain ordered container of providers.

    Later providers usually take precedence in the configuration system
    that owns them; this container only keeps them in order.
    """

    _providers: List[ConfigurationProvider] = field(default_factory=list)

    @property
    def providers(self) -> Sequence[ConfigurationProvider]:
        return tuple(self._providers)

    def add(self, provider: ConfigurationProvider) -> "ConfigurationRoot":
        self._providers.append(provider)
        return self

    def __iter__(self) -> Iterator[ConfigurationProvider]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def providers_of(root: object) -> Sequence[ConfigurationProvider]:
    """Return the ordered providers of a root or a plain iterable.

    Raises:
        TypeError: If ``root`` exposes no providers and is not iterable.
    """
    if isinstance(root, ProviderRoot):
        return list(root.providers)
    if isinstance(root, Iterable) and not isinstance(root, (str, bytes)):
        return list(root)
    raise TypeError(f"Expected a provider root or a sequence of providers, got {type(root).__name__}")
