"""Database engine setup and initialization."""

from pathlib import Path

import aiosqlite

from ..config import Config

# Fixed name of the slot holding the weight collection
ENTRIES_SLOT = "cat_weight_entries"


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = Config.from_env().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "gatofit.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        # Named key-value slots, each holding one JSON document
        await db.execute("""
            CREATE TABLE IF NOT EXISTS storage_slots (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.commit()
