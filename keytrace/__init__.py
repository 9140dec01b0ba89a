"""keytrace - configuration key source diagnostics.

Report which configuration providers supply a value for a key, in
precedence order, with sensitive values obfuscated.
"""

from .core.config_loader import ConfigLoader
from .core.options import DiagnosticsOptions
from .core.placeholder import placeholder
from .core.provider import ConfigurationRoot
from .core.report import (
    build_report,
    log_configuration_key_source,
    log_configuration_key_source_as_debug,
    log_configuration_key_source_as_information,
    log_configuration_key_source_as_trace,
)

__all__ = [
    "ConfigLoader",
    "ConfigurationRoot",
    "DiagnosticsOptions",
    "build_report",
    "log_configuration_key_source",
    "log_configuration_key_source_as_debug",
    "log_configuration_key_source_as_information",
    "log_configuration_key_source_as_trace",
    "placeholder",
]
