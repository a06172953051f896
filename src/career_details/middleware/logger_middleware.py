import time

import structlog
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = structlog.getLogger(__name__)


class StructLogMiddleware:
    """Log one structured event per HTTP request.

    Binds method and path into the structlog context for the duration of the
    request, records status and duration, and logs unhandled exceptions
    before letting them propagate.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            method=scope.get("method"),
            path=scope.get("path"),
        )

        status_code = 500
        start = time.perf_counter()

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception:
            logger.exception("Unhandled exception while processing request")
            raise
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info("Request handled", status_code=status_code, duration_ms=duration_ms)
            structlog.contextvars.clear_contextvars()
