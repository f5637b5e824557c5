"""Identity and role API resources."""

import falcon.asgi

from mdbiam.application.ports import RoleManager
from mdbiam.domain.exceptions import AggregationFailed, IdentityUnresolved, MissingSubject


class UsernameResource:
    """GET /v1/username - subject of the audited connection."""

    def __init__(self, role_manager: RoleManager) -> None:
        self._role_manager = role_manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            username = await self._role_manager.get_username(req.get_param("username"))
        except IdentityUnresolved as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        resp.media = {"username": username}
        resp.status = falcon.HTTP_200


class UserRolesResource:
    """GET /v1/roles - roles granted to the subject."""

    def __init__(self, role_manager: RoleManager) -> None:
        self._role_manager = role_manager

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        try:
            username = await self._role_manager.get_username(req.get_param("username"))
            roles = await self._role_manager.get_user_roles(username)
        except MissingSubject as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except IdentityUnresolved as e:
            resp.status = falcon.HTTP_422
            resp.media = {"error": str(e)}
            return
        except AggregationFailed as e:
            resp.status = falcon.HTTP_502
            resp.media = {"error": str(e)}
            return
        resp.media = {"username": username, "roles": sorted(roles)}
        resp.status = falcon.HTTP_200


class RolePrivilegesResource:
    """GET /v1/roles/{role_name}/privileges - actions granted by a role."""

    def __init__(self, role_manager: RoleManager) -> None:
        self._role_manager = role_manager

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        role_name: str,
    ) -> None:
        privileges = await self._role_manager.get_privileges_of_role(role_name)
        resp.media = {"role": role_name, "privileges": sorted(privileges)}
        resp.status = falcon.HTTP_200
