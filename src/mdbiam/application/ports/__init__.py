"""Application ports - interfaces for external adapters."""

from mdbiam.application.ports.admin_session import AdminSession, AdminSessionFactory
from mdbiam.application.ports.identity_resolver import IdentityResolver
from mdbiam.application.ports.role_manager import RoleManager

__all__ = [
    "AdminSession",
    "AdminSessionFactory",
    "IdentityResolver",
    "RoleManager",
]
