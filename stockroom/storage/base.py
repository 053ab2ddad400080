"""Storage contract the service layer depends on.

Engines implement one store per record kind. Every method may raise StorageFailure;
absence is reported as None (lookups) or False (update/delete), never as an error.
"""

from abc import ABC, abstractmethod

from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord


class ProductStore(ABC):
    """Durable keyed store for products."""

    @abstractmethod
    def create(self, product: ProductRecord) -> int:
        """Persist a new product and return its assigned id."""

    @abstractmethod
    def get_by_id(self, product_id: int) -> ProductRecord | None: ...

    @abstractmethod
    def list_all(self) -> list[ProductRecord]: ...

    @abstractmethod
    def update(self, product: ProductRecord) -> bool:
        """Overwrite the product matching product.id; False if there is none."""

    @abstractmethod
    def delete(self, product_id: int) -> bool: ...

    @abstractmethod
    def find_by_category(self, category: str) -> list[ProductRecord]:
        """Products whose category equals category exactly."""

    @abstractmethod
    def find_by_name(self, fragment: str) -> list[ProductRecord]:
        """Products whose name contains fragment, ignoring case."""

    @abstractmethod
    def find_low_stock(self, threshold: int) -> list[ProductRecord]:
        """Products with quantity <= threshold."""

    @abstractmethod
    def distinct_categories(self) -> list[str]:
        """Sorted distinct category values."""

    def ping(self) -> bool:
        """True if the backing store is reachable."""
        return True


class UserStore(ABC):
    """Durable keyed store for users; username is the alternate key."""

    @abstractmethod
    def create(self, user: UserRecord) -> int: ...

    @abstractmethod
    def get_by_id(self, user_id: int) -> UserRecord | None: ...

    @abstractmethod
    def get_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    def list_all(self) -> list[UserRecord]: ...

    @abstractmethod
    def update(self, user: UserRecord) -> bool: ...

    @abstractmethod
    def delete(self, user_id: int) -> bool: ...

    @abstractmethod
    def find_by_credentials(self, username: str, password: str) -> UserRecord | None:
        """The user whose username and password both match exactly."""

    def ping(self) -> bool:
        return True
