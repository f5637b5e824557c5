"""MongoDB IAM utility - role and permission auditing."""

__version__ = "1.0.3"

from mdbiam.role_manager import MongoRoleManager

__all__ = ["MongoRoleManager", "__version__"]
