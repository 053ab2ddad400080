"""Role capabilities: which operations each role may perform.

Presentation layers (console menu, API dependencies) call can_access; the services
themselves do not enforce roles.
"""

from typing import Literal

Operation = Literal[
    "view_products",
    "search_products",
    "view_low_stock",
    "view_categories",
    "update_stock",
    "add_product",
    "update_product",
    "delete_product",
    "manage_users",
]

ALL_OPERATIONS: frozenset[str] = frozenset(
    {
        "view_products",
        "search_products",
        "view_low_stock",
        "view_categories",
        "update_stock",
        "add_product",
        "update_product",
        "delete_product",
        "manage_users",
    }
)

STAFF_OPERATIONS: frozenset[str] = frozenset(
    {
        "view_products",
        "search_products",
        "view_low_stock",
        "view_categories",
        "update_stock",
    }
)

ROLE_CAPABILITIES: dict[str, frozenset[str]] = {
    "admin": ALL_OPERATIONS,
    "staff": STAFF_OPERATIONS,
}


def can_access(role: str | None, operation: str) -> bool:
    """True if role may perform operation. Unknown roles and unknown operations are denied."""
    if not role:
        return False
    return operation in ROLE_CAPABILITIES.get(role, frozenset())
