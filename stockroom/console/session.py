"""Console session: unauthenticated until a successful login, then bound to one user until it ends."""

from stockroom.schemas.user import UserRecord
from stockroom.services.access import can_access
from stockroom.services.users import UserService


class Session:
    """
    Two states: unauthenticated (user is None) and authenticated(user).

    Every later action in the session is attributed to self.user. There is no expiry;
    logout returns to unauthenticated.
    """

    def __init__(self, users: UserService) -> None:
        self._users = users
        self.user: UserRecord | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def login(self, username: str, password: str) -> bool:
        """Authenticate and bind the session on success. InvalidArgument propagates for blank input."""
        user = self._users.authenticate_user(username, password)
        if user is None:
            return False
        self.user = user
        return True

    def logout(self) -> None:
        self.user = None

    def can(self, operation: str) -> bool:
        return self.user is not None and can_access(self.user.role, operation)
