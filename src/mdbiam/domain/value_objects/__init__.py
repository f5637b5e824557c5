"""Domain value objects."""

from mdbiam.domain.value_objects.auth_type import AuthType

__all__ = ["AuthType"]
