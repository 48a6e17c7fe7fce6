"""Domain value objects for Logus."""

from enum import Enum


class UserRole(str, Enum):
    """Role of a user on the platform."""

    USER = "user"
    BLOGGER = "blogger"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"
