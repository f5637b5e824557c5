"""Falcon ASGI application."""

import falcon
import falcon.asgi
import structlog
from falcon.asgi import App

from mdbiam.application.ports import RoleManager
from mdbiam.interfaces.api.resources.health import HealthResource
from mdbiam.interfaces.api.resources.roles import (
    RolePrivilegesResource,
    UsernameResource,
    UserRolesResource,
)
from mdbiam.interfaces.api.resources.verify import VerifyResource

logger = structlog.get_logger(__name__)


async def _log_exception(req, resp, ex, params):
    logger.error("Unhandled API error", path=req.path, error=str(ex), exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


def create_app(role_manager: RoleManager) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App()
    app.add_error_handler(Exception, _log_exception)

    health = HealthResource(role_manager)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/username", UsernameResource(role_manager))
    app.add_route("/v1/roles", UserRolesResource(role_manager))
    app.add_route("/v1/roles/{role_name}/privileges", RolePrivilegesResource(role_manager))
    app.add_route("/v1/verify", VerifyResource(role_manager))
    return app
