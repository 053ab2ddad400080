"""User service: user lifecycle and credential verification."""

import logging

from stockroom.core.errors import InvalidArgument, NotInitialized
from stockroom.core.security import hash_password, verify_password
from stockroom.schemas.user import UserRecord
from stockroom.services.reporting import logs_storage_failure
from stockroom.services.validation import is_blank, validate_user
from stockroom.storage.base import UserStore

logger = logging.getLogger(__name__)


class UserService:
    """
    Stateless facade over a UserStore.

    password_hashing=False compares passwords exactly as stored. With True, new and changed
    passwords are stored as bcrypt hashes and authentication verifies against the hash.
    """

    def __init__(self, store: UserStore | None = None, password_hashing: bool = False) -> None:
        self._store = store
        self.password_hashing = password_hashing

    def set_store(self, store: UserStore) -> None:
        self._store = store

    @property
    def store(self) -> UserStore:
        if self._store is None:
            raise NotInitialized("User storage is not initialized")
        return self._store

    @logs_storage_failure
    def authenticate_user(self, username: str | None, password: str | None) -> UserRecord | None:
        """Return the user matching both credentials, or None. No lockout or rate limiting."""
        store = self.store
        if is_blank(username):
            raise InvalidArgument("Username cannot be null or empty")
        if is_blank(password):
            raise InvalidArgument("Password cannot be null or empty")
        if self.password_hashing:
            user = store.get_by_username(username)
            if user is None or not verify_password(password, user.password or ""):
                user = None
        else:
            user = store.find_by_credentials(username, password)
        if user is None:
            logger.info("Authentication failed for username=%r", username)
        else:
            logger.info("Authenticated user id=%s role=%s", user.id, user.role)
        return user

    def _check_username_free(self, store: UserStore, user: UserRecord) -> None:
        holder = store.get_by_username(user.username)
        if holder is not None and holder.id != user.id:
            raise InvalidArgument(f"Username '{user.username}' already exists")

    @logs_storage_failure
    def add_user(self, user: UserRecord) -> int:
        """Validate and persist user; the assigned id is written back onto user and returned."""
        store = self.store
        validate_user(user)
        self._check_username_free(store, user)
        to_store = user
        if self.password_hashing:
            to_store = user.model_copy(update={"password": hash_password(user.password)})
        user_id = store.create(to_store)
        user.id = user_id
        logger.info("User created: id=%s username=%r role=%s", user_id, user.username, user.role)
        return user_id

    @logs_storage_failure
    def update_user(self, user: UserRecord) -> bool:
        store = self.store
        validate_user(user)
        self._check_username_free(store, user)
        to_store = user
        if self.password_hashing:
            current = store.get_by_id(user.id) if user.id is not None else None
            if current is None:
                return False
            # An unchanged password is already the stored hash.
            if current.password != user.password:
                to_store = user.model_copy(update={"password": hash_password(user.password)})
        updated = store.update(to_store)
        if updated:
            logger.info("User updated: id=%s", user.id)
        return updated

    @logs_storage_failure
    def delete_user(self, user_id: int) -> bool:
        deleted = self.store.delete(user_id)
        if deleted:
            logger.info("User deleted: id=%s", user_id)
        return deleted

    @logs_storage_failure
    def get_user_by_id(self, user_id: int) -> UserRecord | None:
        return self.store.get_by_id(user_id)

    @logs_storage_failure
    def get_user_by_username(self, username: str) -> UserRecord | None:
        return self.store.get_by_username(username)

    @logs_storage_failure
    def get_all_users(self) -> list[UserRecord]:
        return self.store.list_all()
