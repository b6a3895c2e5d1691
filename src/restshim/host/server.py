"""The host's REST server registration tables and URL rules.

The server records what route and field registrations hand it and knows
how REST URLs are built and recognised. Matching a request against the
registered routes and calling the callbacks is the host's dispatcher's
job, not this module's.
"""

import logging
from typing import Any
from urllib.parse import parse_qsl

import httpx

from restshim.config import AdapterConfig
from restshim.errors import ConfigurationError
from restshim.host.native import HostRequest

logger = logging.getLogger("restshim.host")


class RestServer:
    """Route and field registration tables for one host."""

    # HTTP method sets used in route options
    READABLE = "GET"
    CREATABLE = "POST"
    EDITABLE = "POST, PUT, PATCH"
    DELETABLE = "DELETE"
    ALLMETHODS = "GET, POST, PUT, PATCH, DELETE"

    __slots__ = ("_fields", "_routes", "config")

    def __init__(self, config: AdapterConfig | None = None) -> None:
        self.config = config or AdapterConfig()
        self._routes: dict[str, list[dict[str, Any]]] = {}
        self._fields: dict[str, dict[str, dict[str, Any]]] = {}

    # -- Routes --

    def register_route(
        self,
        namespace: str,
        route: str,
        options: dict[str, Any],
        override: bool = False,
    ) -> str:
        """Record *options* for ``/{namespace}/{route}`` and return that path.

        Registrations for the same path accumulate unless *override* is set.
        """
        namespace = namespace.strip("/")
        if not namespace:
            msg = f"Routes must be namespaced; got an empty namespace for route {route!r}."
            raise ConfigurationError(msg)
        path = f"/{namespace}/{route.lstrip('/')}".rstrip("/")
        if override or path not in self._routes:
            self._routes[path] = [options]
        else:
            self._routes[path].append(options)
        logger.debug("Registered REST route %s", path)
        return path

    @property
    def routes(self) -> dict[str, list[dict[str, Any]]]:
        """Registered route path -> list of option sets."""
        return {path: list(options) for path, options in self._routes.items()}

    # -- Fields --

    @property
    def fields_enabled(self) -> bool:
        return self.config.rest_fields

    def register_field(self, object_type: str, name: str, definition: dict[str, Any]) -> None:
        """Record a custom field *name* for objects of *object_type*."""
        if not self.fields_enabled:
            msg = "This host does not support custom REST fields."
            raise ConfigurationError(msg)
        self._fields.setdefault(object_type, {})[name] = {
            "get_callback": None,
            "update_callback": None,
            "schema": None,
            **definition,
        }
        logger.debug("Registered REST field %s.%s", object_type, name)

    def get_fields(self, object_type: str) -> dict[str, dict[str, Any]]:
        """Return field name -> definition for *object_type*."""
        return dict(self._fields.get(object_type, {}))

    # -- URLs --

    def rest_url(self, route: str = "") -> str:
        """Return the absolute REST URL for *route*."""
        return f"{self.config.rest_base_url.rstrip('/')}/{route.lstrip('/')}"

    def request_from_url(self, url: httpx.URL | str) -> HostRequest | None:
        """Build a GET request for a REST *url*, or None if it is not one.

        A URL is a REST URL when its path lives under the REST base URL (an
        absolute URL must also match scheme and authority), or when it
        carries the route in the ``rest_route`` query parameter.
        """
        url = httpx.URL(url) if isinstance(url, str) else url
        base = httpx.URL(self.config.rest_base_url)
        query = dict(parse_qsl(url.query.decode("ascii"), keep_blank_values=True))

        route = self._route_under_base(url, base)
        if route is None:
            route = query.pop(self.config.rest_route_param, None)
            if route is None:
                return None

        request = HostRequest("GET", "/" + route.lstrip("/"))
        request.set_query_params(query)
        return request

    @staticmethod
    def _route_under_base(url: httpx.URL, base: httpx.URL) -> str | None:
        if url.host and (url.scheme, url.host, url.port) != (base.scheme, base.host, base.port):
            return None
        base_path = base.path.rstrip("/")
        path = url.path
        if path == base_path:
            return "/"
        if not path.startswith(base_path + "/"):
            return None
        return path[len(base_path) :]
