"""Diagnostics options and the process-wide default."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .matchers import AnyMatcher, ContainsMatcher, KeyMatcher, NullMatcher, RegexMatcher
from .obfuscators import Obfuscator, PlainTextObfuscator, obfuscator_from_name


@dataclass(frozen=True)
class DiagnosticsOptions:
    """Options controlling how reports treat sensitive keys.

    Attributes:
        key_matcher: Decides whether a key is sensitive.
        obfuscator: Redacts the values of sensitive keys.
    """

    key_matcher: KeyMatcher = field(default_factory=NullMatcher)
    obfuscator: Obfuscator = field(default_factory=PlainTextObfuscator)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> "DiagnosticsOptions":
        """Create options from a ``diagnostics`` mapping.

        Recognised keys are ``sensitive_keys`` (list of fragments),
        ``sensitive_regex``, ``obfuscator`` and ``obfuscator_options``.

        Args:
            d: Mapping, typically read from ``keytrace.yaml``.

        Returns:
            Options; defaults when ``d`` is None or empty.

        Raises:
            ValueError: If the obfuscator is unknown or a field has the
                wrong type.
        """
        if not d:
            return DiagnosticsOptions()

        matchers: List[KeyMatcher] = []
        fragments = d.get("sensitive_keys")
        if fragments:
            if isinstance(fragments, str) or not isinstance(fragments, list):
                raise ValueError("sensitive_keys must be a list of strings")
            matchers.append(ContainsMatcher(*(str(f) for f in fragments)))
        regex = d.get("sensitive_regex")
        if regex:
            matchers.append(RegexMatcher(str(regex)))

        if not matchers:
            key_matcher: KeyMatcher = NullMatcher()
        elif len(matchers) == 1:
            key_matcher = matchers[0]
        else:
            key_matcher = AnyMatcher(*matchers)

        obfuscator_options = d.get("obfuscator_options") or {}
        if not isinstance(obfuscator_options, dict):
            raise ValueError("obfuscator_options must be a mapping")
        obfuscator = obfuscator_from_name(str(d.get("obfuscator", "plain")), **obfuscator_options)

        return DiagnosticsOptions(key_matcher=key_matcher, obfuscator=obfuscator)


_global_options = DiagnosticsOptions()


def get_global_options() -> DiagnosticsOptions:
    """Options used when a call site passes none."""
    return _global_options


def set_global_options(options: DiagnosticsOptions) -> None:
    global _global_options
    _global_options = options


def reset_global_options() -> None:
    set_global_options(DiagnosticsOptions())
