"""Role entities as reported by rolesInfo / usersInfo."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RoleAssignment:
    """Role granted to a user on a database."""

    role: str
    db: str


@dataclass(frozen=True)
class Privilege:
    """Resource scope plus the actions allowed on it."""

    resource: dict[str, Any]
    actions: tuple[str, ...] = ()


@dataclass
class Role:
    """Named bundle of privileges, built-in or custom."""

    name: str
    db: str
    is_builtin: bool = False
    privileges: list[Privilege] = field(default_factory=list)
    inherited_privileges: list[Privilege] = field(default_factory=list)
    roles: list[RoleAssignment] = field(default_factory=list)
    inherited_roles: list[RoleAssignment] = field(default_factory=list)

    def all_actions(self) -> frozenset[str]:
        """Action names from direct and inherited privileges; resource scope is dropped."""
        actions: set[str] = set()
        for privilege in (*self.privileges, *self.inherited_privileges):
            actions.update(privilege.actions)
        return frozenset(actions)
