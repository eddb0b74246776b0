"""
Request diagnostics: a SQL statement counter and response timing headers.

Each response carries ``X-Response-Time-Ms`` and ``X-Query-Count``.  The
count shows how many lookups the ownership checks of a request needed (an
employee create reads the organization, payroll, division, job and bank
before it writes).
"""
import logging
import time
from contextvars import ContextVar

from sqlalchemy import event
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)

query_count_var: ContextVar[int] = ContextVar("query_count", default=0)


def install_query_counter(engine) -> None:
    """Count every statement *engine* executes into ``query_count_var``."""

    @event.listens_for(engine.sync_engine, "before_cursor_execute")
    def _count_query(conn, cursor, statement, parameters, context, executemany):
        query_count_var.set(query_count_var.get() + 1)


class TimingMiddleware:
    # Plain ASGI callable: the counter is read in the same context the
    # endpoint ran in.

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        query_count_var.set(0)
        started = time.perf_counter()

        async def send_with_diagnostics(message: Message) -> None:
            if message["type"] == "http.response.start":
                elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
                queries = query_count_var.get()
                message["headers"] = [
                    *message.get("headers", []),
                    (b"x-response-time-ms", str(elapsed_ms).encode()),
                    (b"x-query-count", str(queries).encode()),
                ]
                logger.debug(
                    "%s %s -> %s in %.2fms (%d queries)",
                    scope["method"],
                    scope["path"],
                    message["status"],
                    elapsed_ms,
                    queries,
                )
            await send(message)

        await self.app(scope, receive, send_with_diagnostics)
