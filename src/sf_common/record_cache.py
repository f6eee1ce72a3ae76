"""RecordCache — JSON-encoded records in Redis keyed by record id.

Entries are written with no expiry and are never invalidated; records have no
update path, so a cached value only goes stale if the table is edited out of
band.

Key: f"{key_prefix}{record_id}" (empty prefix → the raw id, shared keyspace).
"""

from typing import Generic, TypeVar

import redis.asyncio as aioredis
from pydantic import TypeAdapter, ValidationError

RecordT = TypeVar("RecordT")


class CacheDecodeError(ValueError):
    """A cached value exists but does not decode into the record type."""


class RecordCache(Generic[RecordT]):
    def __init__(
        self,
        redis: aioredis.Redis,
        record_type: type[RecordT],
        key_prefix: str = "",
    ) -> None:
        self._redis = redis
        self._record_type = record_type
        self._adapter: TypeAdapter[RecordT] = TypeAdapter(record_type)
        self._key_prefix = key_prefix

    def key(self, record_id: str) -> str:
        return f"{self._key_prefix}{record_id}"

    async def get(self, record_id: str) -> RecordT | None:
        """Return the cached record, or None on a definitive miss.

        Raises redis.RedisError on connection/protocol failures and
        CacheDecodeError when the stored value is not a valid record
        (bad JSON, missing fields, non-string field values).
        """
        raw = await self._redis.get(self.key(record_id))
        if raw is None:
            return None
        try:
            return self._adapter.validate_json(raw, strict=True)
        except ValidationError as exc:
            raise CacheDecodeError(
                f"cached value for {self.key(record_id)!r} is not a valid "
                f"{self._record_type.__name__}: {exc.error_count()} error(s)"
            ) from exc

    async def put(self, record: RecordT) -> None:
        """SET without expiry. Raises redis.RedisError on failure."""
        payload = self._adapter.dump_json(record)
        await self._redis.set(self.key(record.id), payload)  # type: ignore[attr-defined]
