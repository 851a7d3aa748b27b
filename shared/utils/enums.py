from enum import Enum


class UserRole(str, Enum):
    ADMIN = "admin"
    RECEPTIONIST = "receptionist"
    MANAGER = "manager"


class UserStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
