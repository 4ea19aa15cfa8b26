"""Data access layer for gatofit."""

from pathlib import Path

import aiosqlite

from .engine import get_db_path


class StorageSlotRepository:
    """Repository for named key-value storage slots."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def read(self, key: str) -> str | None:
        """Get the raw value stored under a key, or None if absent."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT value FROM storage_slots WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return row["value"]

    async def write(self, key: str, value: str) -> None:
        """Overwrite the value stored under a key."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO storage_slots (key, value, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, value),
            )
            await db.commit()
