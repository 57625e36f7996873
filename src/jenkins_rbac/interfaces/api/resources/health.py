"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, jenkins_url: str = "") -> None:
        self._jenkins_url = jenkins_url

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - ready once a Jenkins URL is configured."""
        if not self._jenkins_url:
            resp.media = {"status": "unconfigured", "error": "jenkins_url is not set"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready", "jenkins_url": self._jenkins_url}
        resp.status = falcon.HTTP_200
