"""Authoritative collection of weight records."""

import asyncio
import json
import logging
from pathlib import Path

import aiosqlite

from ..db.engine import ENTRIES_SLOT
from ..db.repositories import StorageSlotRepository
from ..models.weight import NewWeightRecord, WeightRecord

logger = logging.getLogger(__name__)


class EntryStore:
    """Holds the unordered record collection and persists it to one slot.

    The whole collection is rewritten after every add or remove, and the
    in-memory copy only changes once that write has succeeded.
    """

    def __init__(
        self,
        db_path: Path | None = None,
        repository: StorageSlotRepository | None = None,
        slot: str = ENTRIES_SLOT,
    ):
        self.repository = repository or StorageSlotRepository(db_path)
        self.slot = slot
        self._records: list[WeightRecord] = []
        self._lock = asyncio.Lock()

    async def load(self) -> tuple[WeightRecord, ...]:
        """Read the persisted collection.

        Missing, unreadable or malformed data gives an empty collection.
        """
        try:
            raw = await self.repository.read(self.slot)
        except (aiosqlite.Error, OSError) as e:
            logger.warning(f"Could not read stored records: {e}")
            raw = None

        self._records = self._decode(raw)
        logger.debug(f"Loaded {len(self._records)} records")
        return self.all()

    def all(self) -> tuple[WeightRecord, ...]:
        """Get the current records, in storage (insertion) order."""
        return tuple(self._records)

    async def add(self, entry: NewWeightRecord) -> None:
        """Store a new record under a fresh id."""
        await self.insert(WeightRecord.create(entry))

    async def insert(self, record: WeightRecord) -> None:
        """Store an already-identified record.

        Raises:
            ValueError: if a record with the same id is already stored
        """
        async with self._lock:
            if self.get(record.id) is not None:
                raise ValueError(f"Duplicate record id: {record.id}")
            updated = [*self._records, record]
            await self._persist(updated)
            self._records = updated
        logger.info(f"Added record {record.id} ({record.date}, {record.weight} kg)")

    async def remove(self, record_id: str) -> None:
        """Delete the record with this id. Unknown ids are ignored."""
        async with self._lock:
            remaining = [r for r in self._records if r.id != record_id]
            await self._persist(remaining)
            if len(remaining) == len(self._records):
                logger.debug(f"No record with id {record_id}")
            else:
                logger.info(f"Removed record {record_id}")
            self._records = remaining

    def get(self, record_id: str) -> WeightRecord | None:
        """Get a record by id."""
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    async def _persist(self, records: list[WeightRecord]) -> None:
        # Callers replace self._records only after this returns.
        payload = json.dumps([r.to_dict() for r in records])
        await self.repository.write(self.slot, payload)

    def _decode(self, raw: str | None) -> list[WeightRecord]:
        if not raw:
            return []
        try:
            data = json.loads(raw)
            if not isinstance(data, list):
                raise ValueError(f"expected a list, got {type(data).__name__}")
            return [WeightRecord.from_dict(item) for item in data]
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            # json.JSONDecodeError is a ValueError
            logger.warning(f"Ignoring malformed stored records: {e}")
            return []
