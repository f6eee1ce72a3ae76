"""CustomerApplicationService — same cache-aside flow as products, keyed by customer id."""

from src.sf_common.cache_aside import CachedRecordService
from src.sf_common.record_cache import RecordCache
from src.sf_customer.domain.models import Customer
from src.sf_customer.domain.repository import CustomerRepositoryProtocol
from src.sf_customer.infrastructure.persistence import CustomerRepository


class CustomerApplicationService(CachedRecordService[Customer]):
    entity = "customer"

    def __init__(
        self,
        cache: RecordCache[Customer],
        repo: CustomerRepositoryProtocol | None = None,
    ) -> None:
        super().__init__(repo or CustomerRepository(), cache)
