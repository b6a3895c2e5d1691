"""Convert between restshim messages and httpx messages.

Lets generic HTTP client code exchange messages with the adapter::

    request = Request("GET", "/shop/v1/items")
    response = from_httpx_response(client.send(to_httpx_request(request)))
"""

import json

import httpx

from restshim.context import get_host
from restshim.errors import InvalidUri
from restshim.host.host import Host
from restshim.http.request import Request
from restshim.http.response import Response


def _raw_headers(headers: httpx.Headers) -> list[tuple[str, str]]:
    encoding = headers.encoding
    return [(name.decode(encoding), value.decode(encoding)) for name, value in headers.raw]


def _protocol_version(http_version: str) -> str | None:
    return http_version.removeprefix("HTTP/") or None


def to_httpx_request(request: Request) -> httpx.Request:
    """Build an ``httpx.Request`` with the method, URI, headers and body of *request*."""
    return httpx.Request(
        request.get_method() or "GET",
        request.get_uri(),
        headers=request.get_header_items(),
        content=bytes(request.get_body()),
    )


def from_httpx_request(request: httpx.Request, *, host: Host | None = None) -> Request:
    """Build a ``Request`` from an ``httpx.Request`` aimed at the host's REST API.

    Raises:
        InvalidUri: The request URL is not a REST URL of the host.
    """
    host = host or get_host()
    native = host.server.request_from_url(request.url)
    if native is None:
        msg = f"{str(request.url)!r} is not a REST URL."
        raise InvalidUri(msg)
    native.set_method(request.method)
    content = request.read()
    converted = Request.from_native(
        native,
        headers=_raw_headers(request.headers),
        body=content.decode("utf-8", errors="surrogateescape") if content else None,
        host=host,
    )
    return converted.with_uri(request.url, preserve_host=True)


def from_httpx_response(response: httpx.Response, *, host: Host | None = None) -> Response:
    """Build a ``Response`` from a read ``httpx.Response``.

    JSON bodies become structured data; anything else stays text.
    """
    data = None
    if response.content:
        content_type = response.headers.get("content-type", "")
        if "json" in content_type:
            try:
                data = response.json()
            except json.JSONDecodeError:
                data = response.text
        else:
            data = response.text
    return Response(
        data,
        response.status_code,
        _raw_headers(response.headers),
        _protocol_version(response.http_version),
        response.reason_phrase,
        host=host,
    )


def to_httpx_response(response: Response) -> httpx.Response:
    """Build an ``httpx.Response`` with the status, headers and body of *response*."""
    return httpx.Response(
        response.get_status_code(),
        headers=response.get_header_items(),
        content=bytes(response.get_body()),
        extensions={
            "http_version": f"HTTP/{response.get_protocol_version()}".encode("ascii"),
            "reason_phrase": response.get_reason_phrase().encode("ascii", errors="replace"),
        },
    )
