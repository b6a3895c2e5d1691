"""Immutable request façade over the host-native request.

``Request`` *is* a ``HostRequest``: it can be handed to any host code that
expects one. On top of that it offers the immutable message API. Host-side
setters (``set_body``, ``set_header`` and friends) keep working and go
through the same header store and body binder, so both views stay in sync.

The URI is derived from the route: ``Request("GET", "/shop/v1/items")``
gets the host's REST URL for that route, and a ``Host`` header for it
unless one was passed in.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Self

import httpx

from restshim.context import get_host
from restshim.errors import InvalidMethod, InvalidRequestTarget, InvalidUri
from restshim.host.host import Host
from restshim.host.native import HostRequest, canonical_header_key
from restshim.http.body import BodyBinder
from restshim.http.headers import HeadersInput, HeaderStore
from restshim.http.message import HTTPMessage

_WHITESPACE = re.compile(r"\s")


def host_header_for(uri: httpx.URL) -> str | None:
    """Return the ``Host`` header value for *uri* (``host[:port]``), if it has a host."""
    if not uri.host:
        return None
    if uri.port is None:
        return uri.host
    return f"{uri.host}:{uri.port}"


class Request(HTTPMessage, HostRequest):
    """A host-native REST request with an immutable HTTP-message API.

    Usage::

        request = Request("POST", "/shop/v1/items", body={"name": "mug"})
        request = request.with_header("Content-Type", "application/json")
        request.get_header_line("content-type")   # "application/json"
        request.body                               # {"name": "mug"}
    """

    def __init__(
        self,
        method: str = "",
        route: str = "",
        attributes: Mapping[str, Any] | None = None,
        headers: HeadersInput | None = None,
        body: Any = None,
        protocol_version: str | None = None,
        *,
        host: Host | None = None,
    ) -> None:
        self._host = host or get_host()
        self._header_store = HeaderStore()
        self._body = BodyBinder()
        self._request_target: str | None = None
        self._protocol_version = str(protocol_version or self._host.config.protocol_version)
        super().__init__(method, route, attributes)

        self._uri = httpx.URL(self._host.server.rest_url(self.route))
        store = HeaderStore(headers or ())
        if "host" not in store:
            store = _with_host_header(store, self._uri)
        self._header_store = store
        self._sync_native_headers()
        if body is not None:
            self.set_body(body)

    @classmethod
    def from_native(
        cls,
        native: HostRequest,
        headers: HeadersInput | None = None,
        body: Any = None,
        protocol_version: str | None = None,
        *,
        host: Host | None = None,
    ) -> Self:
        """Wrap a host-native request.

        Method, route, attributes and parameters are copied from *native*.
        Headers, body and protocol version come from the arguments.
        """
        request = cls(
            native.get_method(),
            native.get_route(),
            native.get_attributes(),
            headers,
            body,
            protocol_version,
            host=host,
        )
        request.params = {group: dict(values) for group, values in native.params.items()}
        return request

    # -- Body (host view) --

    @property
    def body(self) -> Any:
        """The structured payload; assigning to it replaces the body."""
        return self._body.payload

    @body.setter
    def body(self, data: Any) -> None:
        self.set_body(data)

    def set_body(self, data: Any) -> None:
        self._body.set_payload(data)

    # -- Headers (host view) --

    def set_header(self, name: str, value: Any) -> None:
        self._header_store = self._header_store.with_header(name, value)
        self._sync_native_headers()

    def add_header(self, name: str, value: Any) -> None:
        self._header_store = self._header_store.with_added_header(name, value)
        self._sync_native_headers()

    def remove_header(self, name: str) -> None:
        self._header_store = self._header_store.without_header(name)
        self._sync_native_headers()

    def set_headers(self, headers: Mapping[str, Any], override: bool = True) -> None:
        store = HeaderStore() if override else self._header_store
        for name, values in HeaderStore(headers).items():
            store = store.with_header(name, values)
        self._header_store = store
        self._sync_native_headers()

    # -- Method --

    def with_method(self, method: str) -> Self:
        """Return a request using *method*.

        Raises:
            InvalidMethod: *method* is not in the host's allowed set.
        """
        method = str(method).upper()
        allowed = self._host.allowed_methods(self)
        if method not in allowed:
            raise InvalidMethod(method, allowed)
        if method == self.method:
            return self
        clone = self._clone()
        clone.set_method(method)
        return clone

    # -- Request target --

    def get_request_target(self) -> str:
        """Return the explicit request target, or origin-form built from the URI."""
        if self._request_target is not None:
            return self._request_target
        target = self._uri.raw_path.split(b"?", 1)[0].decode("ascii") or "/"
        query = self._uri.query.decode("ascii")
        if query:
            target = f"{target}?{query}"
        return target

    def with_request_target(self, target: str) -> Self:
        target = str(target)
        if _WHITESPACE.search(target):
            msg = f"Request target {target!r} must not contain whitespace."
            raise InvalidRequestTarget(msg)
        clone = self._clone()
        clone._request_target = target
        return clone

    # -- URI --

    def get_uri(self) -> httpx.URL:
        return self._uri

    def with_uri(self, uri: httpx.URL | str, preserve_host: bool = False) -> Self:
        """Return a request for *uri*.

        The URI is resolved with the host's REST routing rules, which set
        route and query parameters. Method, attributes, headers, protocol
        version, request target and body carry over. Unless
        *preserve_host* is set, the ``Host`` header follows the new URI.

        Raises:
            InvalidUri: *uri* is not a REST URL of this host.
        """
        uri = httpx.URL(uri) if isinstance(uri, str) else uri
        if uri == self._uri:
            return self
        native = self._host.server.request_from_url(uri)
        if native is None:
            msg = f"{str(uri)!r} is not a REST URL."
            raise InvalidUri(msg)
        native.set_method(self.method)
        native.set_attributes(self.attributes)

        request = type(self).from_native(
            native, protocol_version=self._protocol_version, host=self._host
        )
        request._uri = uri
        request._request_target = self._request_target
        request._body = self._body.copy()
        store = self._header_store
        if not preserve_host:
            store = _with_host_header(store, uri)
        request._header_store = store
        request._sync_native_headers()
        return request

    # -- Internals --

    def _sync_native_headers(self) -> None:
        native: dict[str, list[str]] = {}
        for name, values in self._header_store.items():
            native.setdefault(canonical_header_key(name), []).extend(values)
        self.headers = native

    def _write_payload(self, payload: Any) -> None:
        self.set_body(payload)


def _with_host_header(store: HeaderStore, uri: httpx.URL) -> HeaderStore:
    value = host_header_for(uri)
    if value is None:
        return store
    return store.with_leading_header(store.canonical_name("host") or "Host", value)
