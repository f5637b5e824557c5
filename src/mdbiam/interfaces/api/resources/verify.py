"""Permission verification API resource."""

import falcon.asgi

from mdbiam.application.ports import RoleManager


def _string_list(value: object) -> list[str] | None:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        return None
    return value


class VerifyResource:
    """POST /v1/verify - diff required actions against the subject's effective actions."""

    def __init__(self, role_manager: RoleManager) -> None:
        self._role_manager = role_manager

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Body: {"required": [...], "roles": [...] (optional)}."""
        try:
            body = await req.get_media()
        except (falcon.MediaNotFoundError, falcon.MediaMalformedError):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Invalid JSON body"}
            return

        if not isinstance(body, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Body must be a JSON object"}
            return

        required = _string_list(body.get("required"))
        if required is None:
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Field 'required' must be a list of strings"}
            return

        roles = None
        if body.get("roles") is not None:
            roles = _string_list(body["roles"])
            if roles is None:
                resp.status = falcon.HTTP_400
                resp.media = {"error": "Field 'roles' must be a list of strings"}
                return

        diff = await self._role_manager.verify_permissions(required, roles)
        resp.media = diff.to_dict()
        resp.status = falcon.HTTP_200
