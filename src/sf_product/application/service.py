"""ProductApplicationService — cache-aside over the product table."""

from src.sf_common.cache_aside import CachedRecordService
from src.sf_common.record_cache import RecordCache
from src.sf_product.domain.models import Product
from src.sf_product.domain.repository import ProductRepositoryProtocol
from src.sf_product.infrastructure.persistence import ProductRepository


class ProductApplicationService(CachedRecordService[Product]):
    entity = "product"

    def __init__(
        self,
        cache: RecordCache[Product],
        repo: ProductRepositoryProtocol | None = None,
    ) -> None:
        super().__init__(repo or ProductRepository(), cache)
