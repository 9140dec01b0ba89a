"""Provider adapters over common configuration layers.

File providers (yaml, json, ini), environment variables, in-memory data
and Redis. Keys use ``:`` as the hierarchy delimiter and are matched
case-insensitively, except by Redis.
"""

from .environment import EnvironmentVariablesProvider
from .file import FileProvider, IniFileProvider, JsonFileProvider, YamlFileProvider
from .memory import MemoryProvider
from .redis_kv import RedisProvider

__all__ = [
    "EnvironmentVariablesProvider",
    "FileProvider",
    "IniFileProvider",
    "JsonFileProvider",
    "MemoryProvider",
    "RedisProvider",
    "YamlFileProvider",
]
