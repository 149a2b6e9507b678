"""Key-value storage backends used in place of browser local storage."""

from .base import KeyValueStorage, decode_value, encode_value
from .factory import close_storage, create_storage, get_storage
from .memory import InMemoryStorage
from .sql import SqlKeyValueStorage

__all__ = [
    "InMemoryStorage",
    "KeyValueStorage",
    "SqlKeyValueStorage",
    "close_storage",
    "create_storage",
    "decode_value",
    "encode_value",
    "get_storage",
]
