"""Product service: validation plus storage orchestration for the product lifecycle and queries."""

import logging

from stockroom.core.errors import InvalidArgument, NotInitialized
from stockroom.schemas.product import ProductRecord
from stockroom.services.reporting import logs_storage_failure
from stockroom.services.validation import is_blank, validate_product
from stockroom.storage.base import ProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """
    Stateless facade over a ProductStore.

    Every public method raises NotInitialized when no store is configured. StorageFailure
    from the store is logged and propagates unchanged. Lookups return None for absence;
    update and delete return False when the target does not exist.
    """

    def __init__(self, store: ProductStore | None = None) -> None:
        self._store = store

    def set_store(self, store: ProductStore) -> None:
        self._store = store

    @property
    def store(self) -> ProductStore:
        if self._store is None:
            raise NotInitialized("Product storage is not initialized")
        return self._store

    @logs_storage_failure
    def add_product(self, product: ProductRecord) -> int:
        """Validate and persist product; the assigned id is written back onto product and returned."""
        store = self.store
        validate_product(product)
        product_id = store.create(product)
        product.id = product_id
        logger.info("Product created: id=%s name=%r", product_id, product.name)
        return product_id

    @logs_storage_failure
    def update_product(self, product: ProductRecord) -> bool:
        store = self.store
        validate_product(product)
        updated = store.update(product)
        if updated:
            logger.info("Product updated: id=%s", product.id)
        return updated

    @logs_storage_failure
    def delete_product(self, product_id: int) -> bool:
        deleted = self.store.delete(product_id)
        if deleted:
            logger.info("Product deleted: id=%s", product_id)
        return deleted

    @logs_storage_failure
    def get_product_by_id(self, product_id: int) -> ProductRecord | None:
        return self.store.get_by_id(product_id)

    @logs_storage_failure
    def get_all_products(self) -> list[ProductRecord]:
        return self.store.list_all()

    @logs_storage_failure
    def search_by_category(self, category: str | None) -> list[ProductRecord]:
        """Products whose category equals category exactly (case-sensitive)."""
        store = self.store
        if is_blank(category):
            raise InvalidArgument("Category cannot be null or empty")
        return store.find_by_category(category)

    @logs_storage_failure
    def search_by_name(self, fragment: str | None) -> list[ProductRecord]:
        """Products whose name contains fragment anywhere, ignoring case."""
        store = self.store
        if is_blank(fragment):
            raise InvalidArgument("Name cannot be null or empty")
        return store.find_by_name(fragment)

    @logs_storage_failure
    def get_low_stock_products(self, threshold: int) -> list[ProductRecord]:
        """Products with quantity <= threshold."""
        store = self.store
        if threshold < 0:
            raise InvalidArgument("Threshold cannot be negative")
        return store.find_low_stock(threshold)

    @logs_storage_failure
    def update_stock_quantity(self, product_id: int, new_quantity: int) -> bool:
        """
        Set only the quantity of an existing product.

        Skips full product validation since no other field changes. The read and the write
        are separate storage calls with no isolation between them.
        """
        store = self.store
        if new_quantity < 0:
            raise InvalidArgument("Quantity cannot be negative")
        product = store.get_by_id(product_id)
        if product is None:
            return False
        product.quantity = new_quantity
        updated = store.update(product)
        if updated:
            logger.info("Stock updated: id=%s quantity=%s", product_id, new_quantity)
        return updated

    @logs_storage_failure
    def get_all_categories(self) -> list[str]:
        """Sorted distinct categories across all products."""
        return sorted(set(self.store.distinct_categories()))
