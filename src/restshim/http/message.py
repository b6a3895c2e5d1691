"""Immutable HTTP-message surface shared by Request and Response.

Mixed into the host-native request and response. A message keeps its
headers in a ``HeaderStore`` and its body in a ``BodyBinder``; the host's
own header table and payload attribute are views rewritten from those
after every change, so host code and message code always agree.

Every ``with_*`` method returns a clone (or ``self`` when nothing would
change). Arguments are validated before cloning, so a rejected call
leaves no half-built message behind.
"""

from __future__ import annotations

import copy
from typing import Any, Self

from restshim.http.body import BodyBinder
from restshim.http.headers import HeaderInput, HeaderStore
from restshim.http.stream import Stream, stream_for


class HTTPMessage:
    """Header, body and protocol-version operations.

    Subclasses set ``_header_store``, ``_body`` and ``_protocol_version``
    before the host-native constructor runs, and implement
    ``_sync_native_headers`` and ``_write_payload``. The host-native base
    provides ``_detach``, which gives a clone its own host-side containers.
    """

    _header_store: HeaderStore
    _body: BodyBinder
    _protocol_version: str

    # -- Protocol version --

    def get_protocol_version(self) -> str:
        return self._protocol_version

    def with_protocol_version(self, version: Any) -> Self:
        """Return a message speaking HTTP *version* (compared as a string)."""
        version = str(version)
        if version == self._protocol_version:
            return self
        clone = self._clone()
        clone._protocol_version = version
        return clone

    # -- Headers --

    def get_headers(self) -> dict[str, list[str]]:
        """Return canonical header name -> values, in insertion order."""
        return self._header_store.get_all()

    def has_header(self, name: str) -> bool:
        return name in self._header_store

    def get_header(self, name: str) -> list[str]:
        """Return all values of *name*; an empty list when it is not set."""
        return self._header_store.get_list(name)

    def get_header_line(self, name: str) -> str:
        return self._header_store.get_line(name)

    def get_header_items(self) -> list[tuple[str, str]]:
        """Return one ``(name, value)`` pair per header value, in order."""
        return self._header_store.multi_items()

    def with_header(self, name: str, value: HeaderInput) -> Self:
        """Return a message where *name* holds exactly *value*."""
        return self._with_store(self._header_store.with_header(name, value))

    def with_added_header(self, name: str, value: HeaderInput) -> Self:
        """Return a message with *value* appended to the values of *name*."""
        return self._with_store(self._header_store.with_added_header(name, value))

    def without_header(self, name: str) -> Self:
        store = self._header_store.without_header(name)
        if store is self._header_store:
            return self
        return self._with_store(store)

    # -- Body --

    def get_body(self) -> Stream:
        """Return the body stream; an empty one is created on first access."""
        return self._body.get_stream()

    def with_body(self, body: Any) -> Self:
        """Return a message whose body is *body*.

        *body* is usually a ``Stream``; anything ``stream_for`` accepts is
        wrapped first. The payload of the new message is the stream's text.
        """
        if body is self._body.stream:
            return self
        stream = stream_for(body)
        clone = self._clone()
        text = clone._body.bind(stream)
        with clone._body.locked():
            clone._write_payload(text)
        return clone

    # -- Internals --

    def _with_store(self, store: HeaderStore) -> Self:
        clone = self._clone()
        clone._header_store = store
        clone._sync_native_headers()
        return clone

    def _clone(self) -> Self:
        clone = copy.copy(self)
        clone._detach()  # type: ignore[attr-defined]
        clone._body = self._body.copy()
        return clone

    def _sync_native_headers(self) -> None:
        raise NotImplementedError

    def _write_payload(self, payload: Any) -> None:
        raise NotImplementedError
