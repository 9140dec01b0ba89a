from .levels import DEBUG, INFORMATION, TRACE
from .matchers import AnyMatcher, ContainsMatcher, KeyMatcher, NullMatcher, RegexMatcher
from .obfuscators import AsteriskObfuscator, FixedStringObfuscator, Obfuscator, PlainTextObfuscator
from .options import DiagnosticsOptions, get_global_options, reset_global_options, set_global_options
from .placeholder import placeholder
from .provider import ConfigurationProvider, ConfigurationRoot, ProviderRoot
from .report import (
    build_report,
    log_configuration_key_source,
    log_configuration_key_source_as_debug,
    log_configuration_key_source_as_information,
    log_configuration_key_source_as_trace,
)

__all__ = [
    "DEBUG",
    "INFORMATION",
    "TRACE",
    "AnyMatcher",
    "ContainsMatcher",
    "KeyMatcher",
    "NullMatcher",
    "RegexMatcher",
    "AsteriskObfuscator",
    "FixedStringObfuscator",
    "Obfuscator",
    "PlainTextObfuscator",
    "DiagnosticsOptions",
    "get_global_options",
    "reset_global_options",
    "set_global_options",
    "placeholder",
    "ConfigurationProvider",
    "ConfigurationRoot",
    "ProviderRoot",
    "build_report",
    "log_configuration_key_source",
    "log_configuration_key_source_as_debug",
    "log_configuration_key_source_as_information",
    "log_configuration_key_source_as_trace",
]
