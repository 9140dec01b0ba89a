"""File based provider adapters."""

from __future__ import annotations

import configparser
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ._flatten import KEY_DELIMITER, flatten

logger = logging.getLogger(__name__)


class FileProvider:
    """Base for providers reading a whole file into a lookup table.

    Subclasses implement ``_read`` and return the nested data of the file.
    """

    def __init__(self, path: Union[str, Path], optional: bool = False):
        self.path = Path(path)
        self.optional = optional
        self._data: Dict[str, Any] = {}
        self.reload()

    def _read(self) -> Any:
        raise NotImplementedError

    def reload(self) -> None:
        """Re-read the file.

        Raises:
            FileNotFoundError: If the file is missing and not optional.
        """
        if not self.path.exists():
            if not self.optional:
                raise FileNotFoundError(f"Configuration file not found: {self.path}")
            logger.debug("Optional configuration file %s is missing", self.path)
            self._data = {}
            return
        data = self._read()
        self._data = flatten(data) if isinstance(data, dict) else {}
        logger.debug("Loaded %d keys from %s", len(self._data), self.path)

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        folded = key.casefold()
        if folded in self._data:
            return True, self._data[folded]
        return False, None

    def __str__(self) -> str:
        text = f"{type(self).__name__} for '{self.path.name}'"
        if self.optional:
            text += " (Optional)"
        return text


class YamlFileProvider(FileProvider):
    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}


class JsonFileProvider(FileProvider):
    def _read(self) -> Any:
        with open(self.path, "r", encoding="utf-8") as f:
            return json.load(f)


class IniFileProvider(FileProvider):
    """INI files; keys are ``section:option``."""

    def _read(self) -> Any:
        parser = configparser.ConfigParser(interpolation=None)
        parser.read(self.path, encoding="utf-8")
        return {
            section: dict(parser.items(section))
            for section in parser.sections()
        }
