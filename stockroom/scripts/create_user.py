"""
Create a user (e.g. first admin). Run from project root:
  python -m stockroom.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m stockroom.scripts.create_user admin your-secure-password admin
"""
import argparse
import sys

from stockroom.core.config import get_settings
from stockroom.core.errors import InvalidArgument, StorageFailure
from stockroom.schemas.user import UserRecord
from stockroom.services.users import UserService
from stockroom.storage import build_stores


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Stockroom user (no registration UI).")
    parser.add_argument("username", help="Username (unique)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="staff", choices=["staff", "admin"])
    args = parser.parse_args(argv)

    settings = get_settings()
    _, user_store = build_stores(settings)
    users = UserService(user_store, password_hashing=settings.PASSWORD_HASHING)
    user = UserRecord(username=args.username.strip(), password=args.password, role=args.role)
    try:
        user_id = users.add_user(user)
    except InvalidArgument as e:
        print(e.message, file=sys.stderr)
        return 1
    except StorageFailure as e:
        print(f"Could not create user: {e.message}", file=sys.stderr)
        return 1
    print(f"Created user '{user.username}' with role '{user.role}' (id={user_id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
