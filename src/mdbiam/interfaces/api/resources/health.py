"""Health check endpoints."""

import falcon
import falcon.asgi
import structlog

from mdbiam.application.ports import RoleManager
from mdbiam.domain.exceptions import SessionError

logger = structlog.get_logger(__name__)


class HealthResource:
    """Liveness of the API and reachability of the audited cluster."""

    def __init__(self, role_manager: RoleManager) -> None:
        self._role_manager = role_manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - 503 while the cluster cannot be reached."""
        try:
            await self._role_manager.check_connection()
        except SessionError as e:
            logger.warning("Cluster unreachable", error=str(e))
            resp.media = {"status": "unavailable", "error": str(e)}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
