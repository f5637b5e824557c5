"""Application DTOs."""

from mdbiam.application.dto.auth_options import AuthOptions

__all__ = ["AuthOptions"]
