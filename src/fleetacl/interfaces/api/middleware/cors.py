"""CORS middleware for the admin front end."""

import falcon
import falcon.asgi

_ALLOW_METHODS = "GET, POST, PUT, DELETE, OPTIONS"
_ALLOW_HEADERS = "Authorization, Content-Type"


class CORSMiddleware:
    """Echoes allowed origins and answers OPTIONS preflights directly."""

    def __init__(self, origins: list[str]) -> None:
        self._origins = set(origins)

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        origin = req.get_header("Origin")
        if not origin or origin not in self._origins:
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", _ALLOW_METHODS)
        resp.set_header("Access-Control-Allow-Headers", _ALLOW_HEADERS)

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            self._set_cors_headers(req, resp)
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        self._set_cors_headers(req, resp)
