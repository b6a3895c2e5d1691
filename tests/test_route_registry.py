"""Tests for restshim.routing.registry — registering routes with the host."""

from typing import Any

import pytest

from restshim.errors import ConfigurationError
from restshim.host.host import Host
from restshim.routing.collection import RouteCollection
from restshim.routing.options import Options
from restshim.routing.registry import ACTION_REGISTER, RouteRegistry
from restshim.routing.route import Route


def list_items(request: Any) -> list[Any]:
    return []


class TestRouteRegistry:
    def test_empty_collection_fires_action(self, host: Host) -> None:
        seen: list[tuple[Any, str]] = []
        host.hooks.add_action(
            ACTION_REGISTER, lambda routes, namespace: seen.append((routes, namespace))
        )
        routes = RouteCollection()
        RouteRegistry("shop/v1").register_routes(routes)
        assert seen == [(routes, "shop/v1")]
        assert host.server.routes == {}

    def test_registers_every_route(self, host: Host) -> None:
        foo = Route("foo", Options.with_callback(list_items))
        bar = Route("bar", Options({"methods": "POST"}))
        routes = RouteCollection().add(foo).add(bar).add(foo)
        RouteRegistry("shop/v1").register_routes(routes)
        registered = host.server.routes
        assert list(registered) == ["/shop/v1/foo", "/shop/v1/bar"]
        assert len(registered["/shop/v1/foo"]) == 2
        assert registered["/shop/v1/bar"] == [{"endpoints": [{"methods": "POST"}]}]

    def test_listener_can_add_routes(self, host: Host) -> None:
        def add_health(routes: RouteCollection, namespace: str) -> None:
            routes.add(Route("health", Options.with_callback(list_items)))

        host.hooks.add_action(ACTION_REGISTER, add_health)
        RouteRegistry("shop/v1").register_routes(RouteCollection())
        assert "/shop/v1/health" in host.server.routes

    def test_explicit_host(self, host: Host) -> None:
        other = Host()
        RouteRegistry("shop/v1", host=other).register_routes(
            RouteCollection().add(Route("items", Options()))
        )
        assert "/shop/v1/items" in other.server.routes
        assert host.server.routes == {}
        assert other.hooks.did_action(RouteRegistry.ACTION_REGISTER) == 1

    def test_empty_namespace(self) -> None:
        with pytest.raises(ConfigurationError):
            RouteRegistry("").register_routes(RouteCollection().add(Route("items", Options())))
