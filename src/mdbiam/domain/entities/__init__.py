"""Domain entities."""

from mdbiam.domain.entities.permission_diff import PermissionDiff
from mdbiam.domain.entities.role import Privilege, Role, RoleAssignment

__all__ = [
    "PermissionDiff",
    "Privilege",
    "Role",
    "RoleAssignment",
]
