"""Database layer for gatofit."""

from .engine import ENTRIES_SLOT, get_db_path, init_db
from .repositories import StorageSlotRepository

__all__ = [
    "ENTRIES_SLOT",
    "get_db_path",
    "init_db",
    "StorageSlotRepository",
]
