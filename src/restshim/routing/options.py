"""Route options: the endpoint option sets of one route, plus an optional schema."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from restshim.contracts import Arguments, EndpointSchema, RequestHandler
from restshim.host.server import RestServer


class Options:
    """Endpoint option sets for a route.

    Each endpoint is a dict (``methods``, ``callback``, ``args``, ...).
    A route has one or more endpoints and at most one schema, which the
    host calls to describe the route's resource.

    Usage::

        options = Options.from_arguments(handler, args, RestServer.CREATABLE)
        options.add(Options.with_callback(list_items))
        options.set_schema(item_schema)
        options.to_dict()
        # {"endpoints": [{...}, {...}], "schema": item_schema.definition}
    """

    DEFAULT_METHODS = RestServer.READABLE

    __slots__ = ("_endpoints", "_schema")

    def __init__(self, options: Mapping[str, Any] | None = None) -> None:
        self._endpoints: list[dict[str, Any]] = [dict(options)] if options else []
        self._schema: EndpointSchema | None = None

    def __repr__(self) -> str:
        return f"<Options endpoints={len(self._endpoints)} schema={self._schema is not None}>"

    @classmethod
    def from_arguments(
        cls,
        handler: RequestHandler | None = None,
        args: Arguments | None = None,
        methods: str = DEFAULT_METHODS,
        options: Mapping[str, Any] | None = None,
    ) -> Options:
        """Build options for one endpoint served by *handler*."""
        endpoint: dict[str, Any] = {}
        if handler is not None:
            endpoint["callback"] = handler.handle_request
        if args is not None:
            endpoint["args"] = args.to_dict()
        endpoint["methods"] = methods
        endpoint.update(options or {})
        return cls(endpoint)

    @classmethod
    def with_callback(
        cls,
        callback: Callable[..., Any],
        args: Arguments | Mapping[str, Any] | None = None,
        methods: str = DEFAULT_METHODS,
        options: Mapping[str, Any] | None = None,
    ) -> Options:
        """Build options for one endpoint served by a plain callable."""
        if isinstance(args, Arguments):
            args = args.to_dict()
        endpoint: dict[str, Any] = {
            "methods": methods,
            "callback": callback,
            "args": dict(args or {}),
        }
        endpoint.update(options or {})
        return cls(endpoint)

    @classmethod
    def with_schema(
        cls, schema: EndpointSchema, options: Mapping[str, Any] | None = None
    ) -> Options:
        return cls(options).set_schema(schema)

    def add(self, options: Options | Mapping[str, Any]) -> Options:
        """Append endpoints; another ``Options`` contributes all of its endpoints.

        The schema of an added ``Options`` is ignored.
        """
        if isinstance(options, Options):
            self._endpoints.extend(dict(endpoint) for endpoint in options._endpoints)
        else:
            self._endpoints.append(dict(options))
        return self

    def set_schema(self, schema: EndpointSchema) -> Options:
        self._schema = schema
        return self

    def to_dict(self) -> dict[str, Any]:
        """Return the options in the form the host's ``register_route`` takes."""
        options: dict[str, Any] = {"endpoints": [dict(endpoint) for endpoint in self._endpoints]}
        if self._schema is not None:
            options["schema"] = self._schema.definition
        return options
