"""Body binder: one logical body, two views.

The structured payload is what the host works with (decoded JSON, a raw
string, a scalar). The stream is what HTTP-message code reads. The binder
owns both and decides which one is derived from the other:

- Replacing the payload invalidates the stream. An empty payload clears
  it (an empty stream is rebuilt lazily); anything else is serialized into
  a fresh stream right away.
- Binding a stream re-derives the payload from the stream's contents. The
  binder is locked while that happens, so a payload write triggered by
  the derivation does not rebuild the stream it came from.
"""

from __future__ import annotations

import copy
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from restshim.http.stream import Stream, read_fully, stream_for


class BodyBinder:
    """Keeps a message's payload and body stream consistent."""

    __slots__ = ("_locked", "_payload", "_stream")

    def __init__(self, payload: Any = None) -> None:
        self._payload: Any = payload
        self._stream: Stream | None = None
        self._locked = False
        self._rebuild()

    @property
    def payload(self) -> Any:
        return self._payload

    @property
    def stream(self) -> Stream | None:
        """The current stream, without creating one."""
        return self._stream

    @property
    def is_locked(self) -> bool:
        return self._locked

    @contextmanager
    def locked(self) -> Iterator[None]:
        """Hold the reentrancy guard for the duration of the block."""
        previous = self._locked
        self._locked = True
        try:
            yield
        finally:
            self._locked = previous

    def get_stream(self) -> Stream:
        """Return the body stream, creating an empty one on first access."""
        if self._stream is None:
            self._stream = Stream()
        return self._stream

    def set_payload(self, payload: Any) -> None:
        """Replace the payload and invalidate the stream.

        Under the lock only the payload is stored.
        """
        self._payload = payload
        if not self._locked:
            self._rebuild()

    def bind(self, stream: Stream) -> str:
        """Install *stream* and return its full contents as text.

        The caller writes the returned text back as the payload (through
        whatever setter the host uses) while holding ``locked()``.
        """
        self._stream = stream
        return read_fully(stream)

    def copy(self) -> BodyBinder:
        """Return an independent binder holding the same body."""
        clone = BodyBinder.__new__(BodyBinder)
        payload = self._payload
        if isinstance(payload, (dict, list)):
            payload = copy.deepcopy(payload)
        clone._payload = payload
        clone._stream = None if self._stream is None else self._stream.copy()
        clone._locked = False
        return clone

    def _rebuild(self) -> None:
        if self._payload is None or self._payload == "":
            self._stream = None
            return
        self._stream = stream_for(self._payload)
