"""Credential-derived identity - username taken from the connection string."""

import structlog
from pymongo.errors import InvalidURI
from pymongo.uri_parser import parse_userinfo

logger = structlog.get_logger(__name__)


def username_from_uri(uri: str | None) -> str:
    """User from mongodb:// or mongodb+srv:// userinfo, decoded as the driver does; "" if absent."""
    if not uri or "://" not in uri:
        return ""
    host_part = uri.split("://", 1)[1].partition("/")[0]
    userinfo, _, _ = host_part.rpartition("@")
    if not userinfo:
        return ""
    try:
        return parse_userinfo(userinfo)[0]
    except InvalidURI as e:
        logger.warning("Connection string user info rejected", error=str(e))
        return ""


class CredentialIdentityResolver:
    """Generic, SCRAM and LDAP: the subject is the user the URI authenticates as."""

    def __init__(self, uri: str | None = None) -> None:
        self._username = username_from_uri(uri)

    async def resolve(self, username: str | None = None) -> str:
        return username or self._username or ""
