"""
HTTP router for API Gateway events.

Wraps a list of route declarations into a single Lambda-compatible callable:
``router(event, context)`` picks the handler for the event's method and path,
merges the extracted path parameters into the event and calls the handler.

Handlers may be plain functions or coroutine functions. The synchronous
entrypoint drives awaitable results to completion; callers that already run
an event loop should use ``invoke_async`` instead.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Dict, Iterable, Optional, Tuple

from middleware.event_normalizer import normalize_http_event
from models.event import EventVersion
from models.route import RouteMatch, RouteTable
from routing.compiler import Declaration, compile_routes
from routing.matcher import resolve_route
from utils.settings import RouterSettings


async def _settle(result: Awaitable[Any]) -> Any:
    return await result


def _loop_is_running() -> bool:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return False
    return True


class HttpRouter:
    """Compiled route table plus dispatch.

    The table is built in ``__init__`` and never changes afterwards, so one
    instance can serve every invocation of a warm Lambda.
    """

    def __init__(
        self,
        routes: Iterable[Declaration],
        settings: Optional[RouterSettings] = None,
    ):
        self.settings = settings or RouterSettings.from_environment()
        self.table: RouteTable = compile_routes(routes)

    def route(self, event: Dict[str, Any]) -> Tuple[RouteMatch, Dict[str, Any]]:
        """Resolve the event and build the event the handler will receive.

        The inbound event is left untouched; the returned copy carries a
        fresh ``pathParameters`` dict holding the previous parameters
        overlaid with the newly bound ones.
        """
        if self.settings.normalize_events:
            event = normalize_http_event(event)

        method, path = EventVersion.from_event(event).extract_route(event)
        match = resolve_route(self.table, method, path)

        routed = dict(event)
        routed["pathParameters"] = {
            **(event.get("pathParameters") or {}),
            **match.path_parameters,
        }
        return match, routed

    def __call__(self, event: Dict[str, Any], context: Any) -> Any:
        match, routed = self.route(event)
        result = match.handler(routed, context)
        if inspect.isawaitable(result):
            if _loop_is_running():
                close = getattr(result, "close", None)
                if close is not None:
                    close()
                raise RuntimeError(
                    f"Async handler for {match.route.path} called from a running "
                    "event loop; use invoke_async instead"
                )
            result = asyncio.run(_settle(result))
        return result

    async def invoke_async(self, event: Dict[str, Any], context: Any) -> Any:
        """Coroutine entrypoint for callers already running an event loop."""
        match, routed = self.route(event)
        result = match.handler(routed, context)
        if inspect.isawaitable(result):
            result = await result
        return result


def http_router(
    routes: Iterable[Declaration], settings: Optional[RouterSettings] = None
) -> HttpRouter:
    """Build a router; raises InvalidMethodError for unsupported methods."""
    return HttpRouter(routes, settings=settings)
