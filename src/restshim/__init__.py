"""restshim — immutable HTTP messages on top of a host framework's REST objects.

Wraps the host's mutable REST request and response in immutable,
standards-shaped HTTP messages, and provides the builders an API author
needs to register routes and custom fields with the host.

Basic usage::

    from restshim import Options, Request, Response, Route, RouteCollection, RouteRegistry

    def list_items(request: Request) -> Response:
        return Response([{"id": 1}]).with_header("X-Total", 1)

    routes = RouteCollection().add(Route("items", Options.with_callback(list_items)))
    RouteRegistry("shop/v1").register_routes(routes)

    request = Request("GET", "/shop/v1/items").with_header("Accept", "application/json")
    request.get_uri()          # URL('http://localhost/api/shop/v1/items')
"""

from importlib import import_module

__version__ = "0.1.0"

# Public name -> module that defines it
_LAZY_IMPORTS: dict[str, str] = {
    # Messages
    "Request": "restshim.http.request",
    "Response": "restshim.http.response",
    "HeaderStore": "restshim.http.headers",
    "Stream": "restshim.http.stream",
    "stream_for": "restshim.http.stream",
    # Host
    "AdapterConfig": "restshim.config",
    "Host": "restshim.host.host",
    "HostError": "restshim.host.native",
    "HostRequest": "restshim.host.native",
    "HostResponse": "restshim.host.native",
    "get_host": "restshim.context",
    "use_host": "restshim.context",
    # Routes and fields
    "Options": "restshim.routing.options",
    "Route": "restshim.routing.route",
    "RouteCollection": "restshim.routing.collection",
    "RouteRegistry": "restshim.routing.registry",
    "Field": "restshim.fields.field",
    "FieldCollection": "restshim.fields.collection",
    "FieldProcessor": "restshim.fields.processor",
    "FieldRegistry": "restshim.fields.registry",
    "HostFieldAccess": "restshim.fields.access",
    "SchemaFieldProcessor": "restshim.fields.processor",
    # Factories
    "ErrorFactory": "restshim.factory.error",
    "PermissionCallback": "restshim.factory.permission",
    "ResponseFactory": "restshim.factory.response",
    # Errors
    "ConfigurationError": "restshim.errors",
    "InvalidArgument": "restshim.errors",
    "InvalidClass": "restshim.errors",
    "RestShimError": "restshim.errors",
}

__all__ = [
    "AdapterConfig",
    "ConfigurationError",
    "ErrorFactory",
    "Field",
    "FieldCollection",
    "FieldProcessor",
    "FieldRegistry",
    "HeaderStore",
    "Host",
    "HostError",
    "HostFieldAccess",
    "HostRequest",
    "HostResponse",
    "InvalidArgument",
    "InvalidClass",
    "Options",
    "PermissionCallback",
    "Request",
    "Response",
    "ResponseFactory",
    "RestShimError",
    "Route",
    "RouteCollection",
    "RouteRegistry",
    "SchemaFieldProcessor",
    "Stream",
    "get_host",
    "stream_for",
    "use_host",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import restshim`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
