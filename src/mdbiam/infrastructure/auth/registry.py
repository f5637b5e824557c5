"""Registry: select the identity variant by authentication type and memoize the service."""

from collections.abc import Callable

from mdbiam.application.dto import AuthOptions
from mdbiam.application.ports import AdminSessionFactory, IdentityResolver
from mdbiam.application.services.role_manager import RoleManagerService
from mdbiam.domain.value_objects import AuthType
from mdbiam.infrastructure.auth.connection_status_resolver import (
    ConnectionStatusIdentityResolver,
)
from mdbiam.infrastructure.auth.credential_resolver import CredentialIdentityResolver
from mdbiam.infrastructure.mongodb.connection import create_session_factory

ResolverFactory = Callable[[AuthOptions, AdminSessionFactory], IdentityResolver]


def _credential(options: AuthOptions, session_factory: AdminSessionFactory) -> IdentityResolver:
    return CredentialIdentityResolver(options.uri)


def _generic(options: AuthOptions, session_factory: AdminSessionFactory) -> IdentityResolver:
    return CredentialIdentityResolver(None)


def _connection_status(
    options: AuthOptions, session_factory: AdminSessionFactory
) -> IdentityResolver:
    return ConnectionStatusIdentityResolver(session_factory)


# auth type -> identity resolver factory
_RESOLVERS: dict[AuthType, ResolverFactory] = {
    AuthType.GENERIC: _generic,
    AuthType.SCRAM: _credential,
    AuthType.LDAP: _credential,
    AuthType.X509: _connection_status,
    AuthType.AWS_IAM: _connection_status,
    AuthType.OIDC: _connection_status,
    AuthType.KERBEROS: _connection_status,
}


class AuthMethodRegistry:
    """Builds one RoleManagerService per auth type for a fixed set of options."""

    def __init__(
        self,
        options: AuthOptions,
        session_factory_builder: Callable[[AuthOptions], AdminSessionFactory] = create_session_factory,
    ) -> None:
        self._options = options
        self._session_factory_builder = session_factory_builder
        self._cache: dict[AuthType, RoleManagerService] = {}

    @property
    def options(self) -> AuthOptions:
        return self._options

    @property
    def cache_keys(self) -> list[AuthType]:
        """Auth types with a constructed service."""
        return list(self._cache)

    def get(self, auth_type: AuthType | str | None = None) -> RoleManagerService:
        """Return the service for auth_type (defaults to the options' type).

        Raises UnsupportedAuthType for unknown type names.
        """
        key = AuthType.parse(auth_type) if auth_type else self._options.auth_type
        service = self._cache.get(key)
        if service is None:
            session_factory = self._session_factory_builder(self._options)
            resolver = _RESOLVERS[key](self._options, session_factory)
            service = RoleManagerService(session_factory, resolver)
            self._cache[key] = service
        return service


def supported_auth_types() -> list[str]:
    """Return sorted list of supported authentication type names."""
    return sorted(t.value for t in _RESOLVERS)
