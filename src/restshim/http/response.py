"""Immutable response façade over the host-native response.

``Response`` is a ``HostResponse`` that also speaks the immutable message
API. The host writes through ``set_data``, ``set_headers`` and ``header``;
message code uses ``with_*``. Both end up in the same header store and
body binder, and the host's comma-joined header dict is rewritten from
the store after every change.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from restshim.context import get_host
from restshim.errors import InvalidStatusCode
from restshim.host.host import Host
from restshim.host.native import HostResponse
from restshim.http.body import BodyBinder
from restshim.http.headers import HeadersInput, HeaderStore
from restshim.http.message import HTTPMessage
from restshim.http.status import reason_phrases


def _status_code(status: object) -> int | None:
    if isinstance(status, bool):
        return None
    if isinstance(status, int):
        return status
    if isinstance(status, str) and status.strip().isdigit():
        return int(status)
    return None


class Response(HTTPMessage, HostResponse):
    """A host-native REST response with an immutable HTTP-message API.

    Usage::

        response = Response({"id": 7}, 201, {"Location": "/shop/v1/items/7"})
        response.get_reason_phrase()            # "Created"
        bytes(response.get_body())              # b'{"id":7}'
        response = response.with_status(404)
    """

    def __init__(
        self,
        data: Any = None,
        status: int = 200,
        headers: HeadersInput | None = None,
        protocol_version: str | None = None,
        reason_phrase: str = "",
        *,
        host: Host | None = None,
    ) -> None:
        self._host = host or get_host()
        self._header_store = HeaderStore()
        self._body = BodyBinder()
        self._protocol_version = str(protocol_version or self._host.config.protocol_version)
        self._reason_phrase = ""
        super().__init__(data, status, headers)
        self._set_reason_phrase(reason_phrase)

    @classmethod
    def from_native(
        cls,
        native: HostResponse,
        protocol_version: str | None = None,
        reason_phrase: str = "",
        *,
        host: Host | None = None,
    ) -> Self:
        """Wrap a host-native response, taking over its data, status and headers."""
        return cls(
            native.get_data(),
            native.get_status(),
            native.headers,
            protocol_version,
            reason_phrase,
            host=host,
        )

    # -- Data (host view) --

    @property
    def data(self) -> Any:
        """The structured payload; assigning to it replaces the body."""
        return self._body.payload

    @data.setter
    def data(self, value: Any) -> None:
        self.set_data(value)

    def set_data(self, data: Any) -> None:
        self._body.set_payload(data)

    # -- Headers (host view) --

    def set_headers(self, headers: HeadersInput) -> None:
        """Replace all headers.

        String values are split on commas. Names differing only in case
        are merged under the first casing.
        """
        self._header_store = HeaderStore(headers)
        self._sync_native_headers()

    def header(self, name: str, value: Any, replace: bool = True) -> None:
        if replace:
            self._header_store = self._header_store.with_header(name, value)
        else:
            self._header_store = self._header_store.with_added_header(name, value)
        self._sync_native_headers()

    # -- Status --

    def get_status_code(self) -> int:
        return self.status

    def get_reason_phrase(self) -> str:
        return self._reason_phrase

    def with_status(self, status: int | str, reason_phrase: str = "") -> Self:
        """Return a response with *status*.

        An empty *reason_phrase* selects the standard phrase for the code.

        Raises:
            InvalidStatusCode: *status* is not a known status code.
        """
        code = _status_code(status)
        if code is None or code not in self._status_table():
            raise InvalidStatusCode(status)
        clone = self._clone()
        clone.set_status(code)
        clone._set_reason_phrase(str(reason_phrase))
        return clone

    # -- Internals --

    def _status_table(self) -> Mapping[int, str]:
        return reason_phrases(self._host.config.extended_status_codes)

    def _set_reason_phrase(self, reason_phrase: str) -> None:
        if reason_phrase == "":
            reason_phrase = self._status_table().get(self.status, "")
        self._reason_phrase = reason_phrase

    def _sync_native_headers(self) -> None:
        self.headers = self._header_store.to_native()

    def _write_payload(self, payload: Any) -> None:
        self.set_data(payload)
