"""Health check endpoints."""

import logging

import falcon.asgi
from psycopg_pool import AsyncConnectionPool

from fleetacl.infrastructure.persistence.postgres.connection import ping

logger = logging.getLogger(__name__)


class HealthResource:
    """Liveness and readiness endpoints."""

    def __init__(self, pool: AsyncConnectionPool | None = None) -> None:
        self._pool = pool

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (database reachable)."""
        if self._pool is not None:
            try:
                ready = await ping(self._pool)
            except Exception:
                logger.warning("Readiness check failed", exc_info=True)
                ready = False
            if not ready:
                resp.media = {"status": "unavailable"}
                resp.status = falcon.HTTP_503
                return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
