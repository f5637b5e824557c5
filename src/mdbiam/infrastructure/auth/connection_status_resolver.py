"""Server-derived identity - username reported by connectionStatus."""

import structlog

from mdbiam.application.ports import AdminSessionFactory
from mdbiam.domain.exceptions import IdentityUnresolved, SessionError

logger = structlog.get_logger(__name__)


class ConnectionStatusIdentityResolver:
    """X.509, AWS.IAM, OIDC and Kerberos: ask the server who is authenticated.

    For X.509 the user is the certificate subject DN, e.g.
    CN=username,OU=team,O=org,L=city,ST=state,C=country.
    """

    def __init__(self, session_factory: AdminSessionFactory) -> None:
        self._session_factory = session_factory
        self._username: str | None = None

    async def resolve(self, username: str | None = None) -> str:
        if username:
            return username
        if self._username:
            return self._username

        try:
            async with self._session_factory() as session:
                users = await session.get_authenticated_users()
        except SessionError as e:
            logger.error("Failed to retrieve authenticated user", error=str(e))
            raise IdentityUnresolved(f"Authenticated user cannot be determined: {e}") from e

        if not users:
            raise IdentityUnresolved("Authenticated user cannot be determined.")
        self._username = users[0]
        return self._username
