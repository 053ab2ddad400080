"""SQLAlchemy storage engine. Each operation runs in its own session and commits on success."""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import String, func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from stockroom.core.database import check_db_connected
from stockroom.core.errors import StorageFailure
from stockroom.models import Product, User
from stockroom.schemas.product import ProductRecord
from stockroom.schemas.user import UserRecord
from stockroom.storage.base import ProductStore, UserStore

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


@contextmanager
def session_scope(session_factory: SessionFactory, action: str) -> Iterator[Session]:
    """Yield a session, commit on success, roll back and raise StorageFailure on any DB error."""
    session = session_factory()
    try:
        yield session
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning("Constraint violation during %s: %s", action, e.orig)
        raise StorageFailure(f"Constraint violation during {action}", cause=e) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning("Database error during %s: %s", action, e)
        raise StorageFailure(f"Database error during {action}", cause=e) from e
    finally:
        session.close()


def _ping(session_factory: SessionFactory) -> bool:
    session = session_factory()
    try:
        return check_db_connected(session)
    finally:
        session.close()


def _to_product(row: Product) -> ProductRecord:
    return ProductRecord.model_validate(row)


def _to_user(row: User) -> UserRecord:
    return UserRecord.model_validate(row)


class SqlProductStore(ProductStore):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def create(self, product: ProductRecord) -> int:
        with session_scope(self._session_factory, "product create") as session:
            row = Product(
                name=product.name,
                category=product.category,
                price=product.price,
                quantity=product.quantity,
            )
            session.add(row)
            session.flush()
            new_id = row.id
        return new_id

    def get_by_id(self, product_id: int) -> ProductRecord | None:
        with session_scope(self._session_factory, "product lookup") as session:
            row = session.get(Product, product_id)
            return _to_product(row) if row is not None else None

    def list_all(self) -> list[ProductRecord]:
        with session_scope(self._session_factory, "product listing") as session:
            return [_to_product(r) for r in session.query(Product).all()]

    def update(self, product: ProductRecord) -> bool:
        if product.id is None:
            return False
        with session_scope(self._session_factory, "product update") as session:
            row = session.get(Product, product.id)
            if row is None:
                return False
            row.name = product.name
            row.category = product.category
            row.price = product.price
            row.quantity = product.quantity
        return True

    def delete(self, product_id: int) -> bool:
        with session_scope(self._session_factory, "product delete") as session:
            deleted = (
                session.query(Product)
                .filter(Product.id == product_id)
                .delete(synchronize_session=False)
            )
        return deleted > 0

    def find_by_category(self, category: str) -> list[ProductRecord]:
        with session_scope(self._session_factory, "category search") as session:
            rows = session.query(Product).filter(Product.category == category).all()
            return [_to_product(r) for r in rows]

    def find_by_name(self, fragment: str) -> list[ProductRecord]:
        lowered_name = func.lower(Product.name, type_=String)
        with session_scope(self._session_factory, "name search") as session:
            rows = (
                session.query(Product)
                .filter(lowered_name.contains(fragment.lower(), autoescape=True))
                .all()
            )
            return [_to_product(r) for r in rows]

    def find_low_stock(self, threshold: int) -> list[ProductRecord]:
        with session_scope(self._session_factory, "low stock search") as session:
            rows = session.query(Product).filter(Product.quantity <= threshold).all()
            return [_to_product(r) for r in rows]

    def distinct_categories(self) -> list[str]:
        with session_scope(self._session_factory, "category listing") as session:
            rows = (
                session.query(Product.category)
                .filter(Product.category.isnot(None))
                .distinct()
                .order_by(Product.category)
                .all()
            )
            return [r[0] for r in rows]

    def ping(self) -> bool:
        return _ping(self._session_factory)


class SqlUserStore(UserStore):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def create(self, user: UserRecord) -> int:
        with session_scope(self._session_factory, "user create") as session:
            row = User(username=user.username, password=user.password, role=user.role)
            session.add(row)
            session.flush()
            new_id = row.id
        return new_id

    def get_by_id(self, user_id: int) -> UserRecord | None:
        with session_scope(self._session_factory, "user lookup") as session:
            row = session.get(User, user_id)
            return _to_user(row) if row is not None else None

    def get_by_username(self, username: str) -> UserRecord | None:
        with session_scope(self._session_factory, "username lookup") as session:
            row = session.query(User).filter(User.username == username).first()
            return _to_user(row) if row is not None else None

    def list_all(self) -> list[UserRecord]:
        with session_scope(self._session_factory, "user listing") as session:
            return [_to_user(r) for r in session.query(User).order_by(User.id).all()]

    def update(self, user: UserRecord) -> bool:
        if user.id is None:
            return False
        with session_scope(self._session_factory, "user update") as session:
            row = session.get(User, user.id)
            if row is None:
                return False
            row.username = user.username
            row.password = user.password
            row.role = user.role
        return True

    def delete(self, user_id: int) -> bool:
        with session_scope(self._session_factory, "user delete") as session:
            deleted = (
                session.query(User)
                .filter(User.id == user_id)
                .delete(synchronize_session=False)
            )
        return deleted > 0

    def find_by_credentials(self, username: str, password: str) -> UserRecord | None:
        with session_scope(self._session_factory, "credential lookup") as session:
            row = (
                session.query(User)
                .filter(User.username == username, User.password == password)
                .first()
            )
            return _to_user(row) if row is not None else None

    def ping(self) -> bool:
        return _ping(self._session_factory)
