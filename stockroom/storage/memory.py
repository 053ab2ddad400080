"""In-process storage engine backed by dicts. Used by tests and STORAGE_BACKEND=memory."""

from itertools import count

from stockroom.core.errors import StorageFailure
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord
from stockroom.storage.base import ProductStore, UserStore


class InMemoryProductStore(ProductStore):
    """Stores copies of records so callers cannot mutate stored state by reference."""

    def __init__(self) -> None:
        self._rows: dict[int, ProductRecord] = {}
        self._ids = count(1)

    def create(self, product: ProductRecord) -> int:
        new_id = next(self._ids)
        self._rows[new_id] = product.model_copy(update={"id": new_id})
        return new_id

    def get_by_id(self, product_id: int) -> ProductRecord | None:
        row = self._rows.get(product_id)
        return row.model_copy() if row is not None else None

    def list_all(self) -> list[ProductRecord]:
        return [row.model_copy() for row in self._rows.values()]

    def update(self, product: ProductRecord) -> bool:
        if product.id is None or product.id not in self._rows:
            return False
        self._rows[product.id] = product.model_copy()
        return True

    def delete(self, product_id: int) -> bool:
        return self._rows.pop(product_id, None) is not None

    def find_by_category(self, category: str) -> list[ProductRecord]:
        return [p for p in self.list_all() if p.category == category]

    def find_by_name(self, fragment: str) -> list[ProductRecord]:
        needle = fragment.lower()
        return [p for p in self.list_all() if p.name and needle in p.name.lower()]

    def find_low_stock(self, threshold: int) -> list[ProductRecord]:
        return [p for p in self.list_all() if p.quantity is not None and p.quantity <= threshold]

    def distinct_categories(self) -> list[str]:
        return sorted({p.category for p in self._rows.values() if p.category})


class InMemoryUserStore(UserStore):
    """Enforces username uniqueness the way a unique index would."""

    def __init__(self) -> None:
        self._rows: dict[int, UserRecord] = {}
        self._ids = count(1)

    def _check_unique(self, username: str | None, user_id: int | None) -> None:
        for row in self._rows.values():
            if row.username == username and row.id != user_id:
                raise StorageFailure(f"Username {username!r} already exists")

    def create(self, user: UserRecord) -> int:
        self._check_unique(user.username, None)
        new_id = next(self._ids)
        self._rows[new_id] = user.model_copy(update={"id": new_id})
        return new_id

    def get_by_id(self, user_id: int) -> UserRecord | None:
        row = self._rows.get(user_id)
        return row.model_copy() if row is not None else None

    def get_by_username(self, username: str) -> UserRecord | None:
        for row in self._rows.values():
            if row.username == username:
                return row.model_copy()
        return None

    def list_all(self) -> list[UserRecord]:
        return [row.model_copy() for row in self._rows.values()]

    def update(self, user: UserRecord) -> bool:
        if user.id is None or user.id not in self._rows:
            return False
        self._check_unique(user.username, user.id)
        self._rows[user.id] = user.model_copy()
        return True

    def delete(self, user_id: int) -> bool:
        return self._rows.pop(user_id, None) is not None

    def find_by_credentials(self, username: str, password: str) -> UserRecord | None:
        row = self.get_by_username(username)
        if row is not None and row.password == password:
            return row
        return None
