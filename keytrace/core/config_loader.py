"""Loader for keytrace.yaml diagnostics settings."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .options import DiagnosticsOptions

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "keytrace.yaml"


class ConfigLoader:
    """Handles loading and parsing of keytrace.yaml files."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """Initialize config loader.

        Args:
            config_path: Path to keytrace.yaml. If None, looks in the current
                directory and its parents.
        """
        self.config_path = self._find_config_file(config_path)
        self._config: Optional[Dict[str, Any]] = None

    def _find_config_file(
        self, config_path: Optional[Union[str, Path]] = None
    ) -> Optional[Path]:
        if config_path is not None:
            path = Path(config_path)
            if path.exists():
                return path
            return None

        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            if current == current.parent:
                return None
            current = current.parent

    def load(self) -> Dict[str, Any]:
        """Load the configuration file.

        Returns:
            Parsed configuration dictionary, or empty dict if no config file.

        Raises:
            ValueError: If the file is not valid YAML or not a mapping.
        """
        if self.config_path is None:
            return {}

        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(
                f"Invalid {CONFIG_FILENAME} at {self.config_path}: {e}"
            ) from e
        except OSError as e:
            logger.warning("Could not read %s at %s: %s", CONFIG_FILENAME, self.config_path, e)
            return {}

        if not isinstance(data, dict):
            raise ValueError(
                f"Invalid {CONFIG_FILENAME} at {self.config_path}: expected a mapping"
            )
        logger.debug("Loaded diagnostics settings from %s", self.config_path)
        self._config = data
        return self._config

    def get_diagnostics_config(self) -> Optional[Dict[str, Any]]:
        """Return the ``diagnostics`` section, or None when absent."""
        section = self.load().get("diagnostics")
        if section is not None and not isinstance(section, dict):
            raise ValueError("The diagnostics section must be a mapping")
        return section

    def options(self) -> DiagnosticsOptions:
        """Build diagnostics options from the ``diagnostics`` section."""
        return DiagnosticsOptions.from_dict(self.get_diagnostics_config())
