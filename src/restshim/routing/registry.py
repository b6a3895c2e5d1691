"""Registers route collections with the host's REST server."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from restshim.context import get_host
from restshim.host.host import Host
from restshim.routing.route import Route

logger = logging.getLogger("restshim.routing")

ACTION_REGISTER = "restshim.register_routes"
"""Action fired with ``(routes, namespace)`` before the routes are registered."""


class RouteRegistry:
    """Registers routes under one namespace.

    Usage::

        routes = RouteCollection().add(Route("items", Options.with_callback(list_items)))
        RouteRegistry("shop/v1").register_routes(routes)
    """

    ACTION_REGISTER = ACTION_REGISTER

    __slots__ = ("_host", "namespace")

    def __init__(self, namespace: str, *, host: Host | None = None) -> None:
        self.namespace = namespace
        self._host = host

    def register_routes(self, routes: Iterable[Route]) -> None:
        """Fire the register action, then register every route in *routes*.

        Listeners of the action may still add routes to the collection.
        """
        host = self._host or get_host()
        host.hooks.do_action(ACTION_REGISTER, routes, self.namespace)
        count = 0
        for route in routes:
            host.server.register_route(self.namespace, route.url, route.options())
            count += 1
        logger.debug("Registered %d route(s) under %s", count, self.namespace)
