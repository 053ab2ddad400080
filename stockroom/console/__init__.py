"""Interactive console front end: login session and role-filtered menu."""

from stockroom.console.menu import ConsoleMenu
from stockroom.console.session import Session

__all__ = ["ConsoleMenu", "Session"]
