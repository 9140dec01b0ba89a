from __future__ import annotations

import os
from typing import Dict, Mapping, Optional, Tuple

from ._flatten import KEY_DELIMITER


class EnvironmentVariablesProvider:
    """Provider over process environment variables.

    A double underscore in a variable name stands for the ``:`` key
    delimiter, so ``DB__PASSWORD`` answers for ``Db:Password``. When a
    prefix is given only variables starting with it are visible, with the
    prefix stripped.
    """

    def __init__(self, prefix: str = "", environ: Optional[Mapping[str, str]] = None):
        self.prefix = prefix
        self._environ = environ
        self._data: Dict[str, str] = {}
        self.reload()

    def reload(self) -> None:
        environ = os.environ if self._environ is None else self._environ
        folded_prefix = self.prefix.casefold()
        data: Dict[str, str] = {}
        for name, value in environ.items():
            folded = name.casefold()
            if not folded.startswith(folded_prefix):
                continue
            key = folded[len(folded_prefix) :].replace("__", KEY_DELIMITER)
            if key:
                data[key] = value
        self._data = data

    def try_get(self, key: str) -> Tuple[bool, Optional[str]]:
        folded = key.casefold()
        if folded in self._data:
            return True, self._data[folded]
        return False, None

    def __str__(self) -> str:
        if self.prefix:
            return f"EnvironmentVariablesProvider Prefix: '{self.prefix}'"
        return "EnvironmentVariablesProvider"
