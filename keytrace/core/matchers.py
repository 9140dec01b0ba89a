"""Key matchers deciding which configuration keys hold sensitive values."""

from __future__ import annotations

import re
from typing import Pattern, Protocol, Tuple, Union

DEFAULT_SENSITIVE_FRAGMENTS: Tuple[str, ...] = (
    "password",
    "secret",
    "connectionstring",
    "apikey",
    "api_key",
    "token",
)


class KeyMatcher(Protocol):
    def matches(self, key: str) -> bool:
        ...


class NullMatcher:
    """Matches nothing, so no value is ever obfuscated."""

    def matches(self, key: str) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullMatcher()"


class ContainsMatcher:
    """Match keys containing any of the given fragments.

    Args:
        *fragments: Substrings to look for. Empty fragments are ignored.
        case_sensitive: Compare case sensitively when True.
    """

    def __init__(self, *fragments: str, case_sensitive: bool = False):
        self.case_sensitive = case_sensitive
        cleaned = [f for f in fragments if f]
        self.fragments: Tuple[str, ...] = tuple(
            cleaned if case_sensitive else (f.casefold() for f in cleaned)
        )

    def matches(self, key: str) -> bool:
        candidate = key if self.case_sensitive else key.casefold()
        return any(fragment in candidate for fragment in self.fragments)

    def __repr__(self) -> str:
        return f"ContainsMatcher({', '.join(map(repr, self.fragments))})"


class RegexMatcher:
    """Match keys with a regular expression using ``search`` semantics."""

    def __init__(self, pattern: Union[str, Pattern[str]], flags: int = re.IGNORECASE):
        self.pattern: Pattern[str] = (
            re.compile(pattern, flags) if isinstance(pattern, str) else pattern
        )

    def matches(self, key: str) -> bool:
        return self.pattern.search(key) is not None

    def __repr__(self) -> str:
        return f"RegexMatcher({self.pattern.pattern!r})"


class AnyMatcher:
    """Match when any child matcher matches."""

    def __init__(self, *matchers: KeyMatcher):
        self.matchers: Tuple[KeyMatcher, ...] = matchers

    def matches(self, key: str) -> bool:
        return any(m.matches(key) for m in self.matchers)

    def __repr__(self) -> str:
        return f"AnyMatcher({', '.join(map(repr, self.matchers))})"


def sensitive_key_matcher() -> ContainsMatcher:
    return ContainsMatcher(*DEFAULT_SENSITIVE_FRAGMENTS)
