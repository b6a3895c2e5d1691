"""In-memory byte stream used as a message body.

Streams are fully buffered: nothing here blocks on I/O. A ``Stream`` is a
handle with a read/write position, so it is passed around by reference
(``with_body`` installs the very object it was given).
"""

from __future__ import annotations

import io
import json
from typing import Any

_ENCODING = "utf-8"


class Stream:
    """A seekable, readable, writable in-memory byte stream.

    Usage::

        stream = Stream(b"hello")
        stream.read(2)          # b"he"
        stream.get_contents()   # b"llo"
        bytes(stream)           # b"hello" (whole stream, position untouched)
    """

    __slots__ = ("_buffer",)

    def __init__(self, data: bytes = b"") -> None:
        self._buffer: io.BytesIO | None = io.BytesIO(data)

    def _require(self) -> io.BytesIO:
        if self._buffer is None:
            msg = "Stream is detached."
            raise ValueError(msg)
        return self._buffer

    # -- Capabilities --

    @property
    def readable(self) -> bool:
        return self._buffer is not None

    @property
    def writable(self) -> bool:
        return self._buffer is not None

    @property
    def seekable(self) -> bool:
        return self._buffer is not None

    @property
    def size(self) -> int | None:
        """Total size in bytes, or None once detached."""
        if self._buffer is None:
            return None
        return self._buffer.getbuffer().nbytes

    # -- Position --

    def tell(self) -> int:
        return self._require().tell()

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._require().seek(offset, whence)

    def rewind(self) -> None:
        self.seek(0)

    def eof(self) -> bool:
        buffer = self._require()
        return buffer.tell() >= buffer.getbuffer().nbytes

    # -- I/O --

    def read(self, size: int = -1) -> bytes:
        return self._require().read(size)

    def write(self, data: bytes | str) -> int:
        if isinstance(data, str):
            data = data.encode(_ENCODING)
        return self._require().write(data)

    def get_contents(self) -> bytes:
        """Read everything from the current position to the end."""
        return self._require().read()

    def close(self) -> None:
        if self._buffer is not None:
            self._buffer.close()
            self._buffer = None

    def copy(self) -> Stream:
        """Return an independent stream with the same bytes and position."""
        clone = Stream.__new__(Stream)
        if self._buffer is None:
            clone._buffer = None
            return clone
        clone._buffer = io.BytesIO(self._buffer.getvalue())
        clone._buffer.seek(self._buffer.tell())
        return clone

    def detach(self) -> io.BytesIO | None:
        """Separate the underlying buffer from the stream and return it."""
        buffer, self._buffer = self._buffer, None
        return buffer

    # -- Conversions --

    def __bytes__(self) -> bytes:
        if self._buffer is None:
            return b""
        return self._buffer.getvalue()

    def __str__(self) -> str:
        return bytes(self).decode(_ENCODING, errors="surrogateescape")

    def __repr__(self) -> str:
        if self._buffer is None:
            return "Stream(<detached>)"
        return f"Stream(size={self.size}, position={self.tell()})"


def serialize_payload(payload: Any) -> bytes:
    """Serialize a structured payload to the bytes of a body stream.

    Strings are UTF-8 encoded and dicts and lists become JSON, with values
    JSON cannot represent (dates, sets, domain objects) in their string
    form. Anything else uses its string form.
    """
    if payload is None:
        return b""
    if isinstance(payload, bytes):
        return payload
    if isinstance(payload, str):
        return payload.encode(_ENCODING, errors="surrogateescape")
    if isinstance(payload, bool):
        return b"true" if payload else b"false"
    if isinstance(payload, (int, float)):
        return str(payload).encode(_ENCODING)
    if isinstance(payload, (dict, list, tuple)):
        return json.dumps(payload, separators=(",", ":"), default=str).encode(_ENCODING)
    return str(payload).encode(_ENCODING, errors="surrogateescape")


def stream_for(resource: Any = b"") -> Stream:
    """Create a ``Stream`` for *resource*.

    A ``Stream`` is returned as is. A readable file-like object is buffered
    from its current position. Anything else goes through
    ``serialize_payload``.
    """
    if isinstance(resource, Stream):
        return resource
    if hasattr(resource, "read") and callable(resource.read):
        data = resource.read()
        if isinstance(data, str):
            data = data.encode(_ENCODING)
        return Stream(data)
    return Stream(serialize_payload(resource))


def read_fully(stream: Stream) -> str:
    """Return the whole content of *stream* as text, leaving it rewound."""
    if stream.seekable:
        stream.rewind()
    data = stream.get_contents()
    if stream.seekable:
        stream.rewind()
    return data.decode(_ENCODING, errors="surrogateescape")
