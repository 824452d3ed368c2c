"""Storage backends for people and their ledgers."""

from .base import Storage, unit_of_work
from .memory import MemoryStorage
from .sql import SqlStorage

__all__ = ["Storage", "MemoryStorage", "SqlStorage", "unit_of_work"]
