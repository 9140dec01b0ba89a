"""Reports describing which providers supply a configuration key."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

from .levels import DEBUG, INFORMATION, TRACE
from .options import DiagnosticsOptions, get_global_options
from .provider import ConfigurationProvider, providers_of


class LogSink(Protocol):
    """Anything accepting ``log(level, msg)``, e.g. ``logging.Logger``."""

    def log(self, level: int, msg: str) -> None:
        ...


def build_report(
    providers: Iterable[ConfigurationProvider],
    key: str,
    compressed: bool = False,
    options: Optional[DiagnosticsOptions] = None,
) -> str:
    """Describe what each provider holds for ``key``.

    Args:
        providers: Providers in precedence order.
        key: Configuration key to trace.
        compressed: Skip providers without a value for the key.
        options: Sensitivity options; the global options when None.

    Returns:
        The report text, lines separated by ``\\n``.
    """
    providers = list(providers)
    if not providers:
        return f"Cannot track {key}. No configuration providers found."

    if options is None:
        options = get_global_options()
    obfuscate = options.key_matcher.matches(key)

    found = False
    lines: List[str] = [f"Provider sources for value of {key}"]
    for provider in providers:
        has_value, value = provider.try_get(key)
        if has_value:
            found = True
            text = "" if value is None else value
            if obfuscate:
                shown = options.obfuscator.obfuscate(text)
            else:
                shown = f'"{text}"'
            lines.append(f"* {provider} ==> {shown}")
        elif not compressed:
            lines.append(f"* {provider} ==> null")

    if not found:
        if compressed:
            lines[-1] += " were not found."
        else:
            lines.append(f"{key} not found in any provider.")

    return "\n".join(lines)


def log_configuration_key_source(
    logger: LogSink,
    level: int,
    root: object,
    key: str,
    compressed: bool = False,
    options: Optional[DiagnosticsOptions] = None,
) -> None:
    """Log the provider sources of ``key`` at ``level``.

    ``root`` is a provider root (anything with ``providers``) or a plain
    sequence of providers.
    """
    logger.log(level, build_report(providers_of(root), key, compressed, options))


def log_configuration_key_source_as_trace(
    logger: LogSink,
    root: object,
    key: str,
    compressed: bool = False,
    options: Optional[DiagnosticsOptions] = None,
) -> None:
    log_configuration_key_source(logger, TRACE, root, key, compressed, options)


def log_configuration_key_source_as_debug(
    logger: LogSink,
    root: object,
    key: str,
    compressed: bool = False,
    options: Optional[DiagnosticsOptions] = None,
) -> None:
    log_configuration_key_source(logger, DEBUG, root, key, compressed, options)


def log_configuration_key_source_as_information(
    logger: LogSink,
    root: object,
    key: str,
    compressed: bool = False,
    options: Optional[DiagnosticsOptions] = None,
) -> None:
    log_configuration_key_source(logger, INFORMATION, root, key, compressed, options)
