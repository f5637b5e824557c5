"""MongoDB client creation and per-operation session factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from mdbiam.application.dto import AuthOptions
from mdbiam.domain.exceptions import SessionError
from mdbiam.infrastructure.mongodb.admin_session import MongoAdminSession

logger = structlog.get_logger(__name__)


def create_client(options: AuthOptions) -> AsyncMongoClient:
    """Create async client. Connects lazily on the first command."""
    if not options.uri:
        raise SessionError("No MongoDB connection string configured")
    try:
        return AsyncMongoClient(options.uri, **options.client_kwargs())
    except (PyMongoError, ValueError) as e:
        raise SessionError(f"Invalid MongoDB client options: {e}") from e


def create_session_factory(options: AuthOptions) -> object:
    """Create AdminSession factory (async context manager).

    Every call opens a fresh client and closes it when the block exits,
    successfully or not.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[MongoAdminSession]:
        client = create_client(options)
        try:
            yield MongoAdminSession(client)
        finally:
            await client.close()
            logger.debug("MongoDB session closed")

    return factory
