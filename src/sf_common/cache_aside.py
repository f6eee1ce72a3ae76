"""CachedRecordService — cache-aside read and write-through create for one entity.

Read:   cache → (miss) primary store → best-effort cache fill
Create: primary store INSERT (one transaction) → best-effort cache fill

The store write and the cache write are not atomic. A cache fill that fails is
logged and reported as CacheFill.FAILED; it never fails the request.
A cache read that fails (anything other than a definitive miss) does fail the
request: there is no fallback to the store while the cache is unavailable.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.sf_common.errors import StoreWriteError
from src.sf_common.lookup import (
    CacheFill,
    Dependency,
    Found,
    LookupResult,
    NotFound,
    RecordSource,
    StoreError,
)
from src.sf_common.record_cache import CacheDecodeError, RecordCache

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class RecordRepositoryProtocol(Protocol[RecordT]):
    async def get_by_id(self, db: AsyncSession, record_id: str) -> RecordT | None: ...

    async def insert(self, db: AsyncSession, record: RecordT) -> None: ...


@dataclass(frozen=True)
class CreateOutcome:
    record_id: str
    cache_fill: CacheFill


class CachedRecordService(Generic[RecordT]):
    """Stateless apart from its injected handles — instantiate once per process."""

    entity: str = "record"

    def __init__(
        self,
        repo: RecordRepositoryProtocol[RecordT],
        cache: RecordCache[RecordT],
    ) -> None:
        self._repo = repo
        self._cache = cache

    async def get(self, db: AsyncSession, record_id: str) -> LookupResult[RecordT]:
        try:
            cached = await self._cache.get(record_id)
        except (RedisError, CacheDecodeError) as exc:
            logger.error(
                "Failed to fetch from cache for %s id %s: %s", self.entity, record_id, exc
            )
            return StoreError(record_id, exc, Dependency.CACHE)

        if cached is not None:
            logger.debug("Cache hit for %s id %s", self.entity, record_id)
            return Found(cached, RecordSource.CACHE)

        logger.info("No cache found for %s id %s", self.entity, record_id)
        try:
            record = await self._repo.get_by_id(db, record_id)
        except (SQLAlchemyError, OSError) as exc:
            logger.error(
                "Failed to fetch from DB for %s id %s: %s", self.entity, record_id, exc
            )
            return StoreError(record_id, exc)

        if record is None:
            return NotFound(record_id)

        fill = await self._fill_cache(record, record_id)
        return Found(record, RecordSource.STORE, fill)

    async def create(self, db: AsyncSession, record: RecordT) -> CreateOutcome:
        record_id: str = record.id  # type: ignore[attr-defined]
        try:
            async with db.begin():
                await self._repo.insert(db, record)
        except (SQLAlchemyError, OSError) as exc:
            logger.error(
                "Failed to save to DB for %s id %s: %s", self.entity, record_id, exc
            )
            raise StoreWriteError() from exc
        logger.info("Successfully saved to DB for %s id %s", self.entity, record_id)

        fill = await self._fill_cache(record, record_id)
        return CreateOutcome(record_id, fill)

    async def _fill_cache(self, record: RecordT, record_id: str) -> CacheFill:
        try:
            await self._cache.put(record)
        except RedisError as exc:
            logger.warning(
                "Failed to save to cache for %s id %s: %s", self.entity, record_id, exc
            )
            return CacheFill.FAILED
        logger.info("Successfully saved to cache for %s id %s", self.entity, record_id)
        return CacheFill.STORED
