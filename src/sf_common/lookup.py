"""Record lookup result — one tagged variant consumed by every read handler.

    Found(record)       → 200
    NotFound(id)        → 404
    StoreError(id, ...) → 500 (cache or primary store, told apart by `dependency`)

Found also reports where the record came from and what happened to the
best-effort cache fill, so a degraded-but-successful read is observable.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

from src.sf_common.errors import CacheReadError, RecordNotFoundError, StoreReadError

RecordT = TypeVar("RecordT")


class RecordSource(str, Enum):
    CACHE = "cache"
    STORE = "store"


class CacheFill(str, Enum):
    NOT_ATTEMPTED = "not_attempted"  # cache hit, or no cache in front of the store
    STORED = "stored"
    FAILED = "failed"


class Dependency(str, Enum):
    CACHE = "cache"
    STORE = "store"


@dataclass(frozen=True)
class Found(Generic[RecordT]):
    record: RecordT
    source: RecordSource = RecordSource.STORE
    cache_fill: CacheFill = CacheFill.NOT_ATTEMPTED

    @property
    def degraded(self) -> bool:
        return self.cache_fill is CacheFill.FAILED


@dataclass(frozen=True)
class NotFound:
    record_id: str


@dataclass(frozen=True)
class StoreError:
    record_id: str
    cause: Exception
    dependency: Dependency = Dependency.STORE


LookupResult = Union[Found[RecordT], NotFound, StoreError]


def found_or_raise(
    result: LookupResult[RecordT],
    entity: str,
    store_message: str = "failed to fetch from DB",
) -> Found[RecordT]:
    """Map a lookup result onto the HTTP error taxonomy.

    Returns the Found variant unchanged; raises RecordNotFoundError,
    CacheReadError or StoreReadError otherwise.
    """
    if isinstance(result, Found):
        return result
    if isinstance(result, NotFound):
        raise RecordNotFoundError(entity)
    if result.dependency is Dependency.CACHE:
        raise CacheReadError()
    raise StoreReadError(store_message)
