"""Tests for restshim.http.stream — in-memory body streams."""

import datetime
import io

import pytest

from restshim.http.stream import Stream, read_fully, serialize_payload, stream_for


class TestStream:
    def test_read_and_position(self) -> None:
        stream = Stream(b"hello")
        assert stream.read(2) == b"he"
        assert stream.tell() == 2
        assert stream.get_contents() == b"llo"
        assert stream.eof()

    def test_bytes_and_str_ignore_position(self) -> None:
        stream = Stream("héllo".encode())
        stream.read(3)
        assert bytes(stream) == "héllo".encode()
        assert str(stream) == "héllo"
        assert stream.tell() == 3

    def test_write_accepts_text(self) -> None:
        stream = Stream()
        stream.write("abc")
        stream.write(b"def")
        assert bytes(stream) == b"abcdef"
        assert stream.size == 6

    def test_seek_and_rewind(self) -> None:
        stream = Stream(b"abcdef")
        stream.seek(-2, io.SEEK_END)
        assert stream.read() == b"ef"
        stream.rewind()
        assert stream.tell() == 0

    def test_capabilities(self) -> None:
        stream = Stream()
        assert stream.readable
        assert stream.writable
        assert stream.seekable

    def test_detach(self) -> None:
        stream = Stream(b"data")
        buffer = stream.detach()
        assert isinstance(buffer, io.BytesIO)
        assert buffer.getvalue() == b"data"
        assert not stream.readable
        assert stream.size is None
        assert bytes(stream) == b""
        assert repr(stream) == "Stream(<detached>)"

    def test_detached_stream_refuses_io(self) -> None:
        stream = Stream(b"data")
        stream.close()
        with pytest.raises(ValueError, match="detached"):
            stream.read()
        with pytest.raises(ValueError, match="detached"):
            stream.tell()

    def test_close_twice_is_harmless(self) -> None:
        stream = Stream()
        stream.close()
        stream.close()
        assert stream.detach() is None

    def test_repr(self) -> None:
        assert repr(Stream(b"abc")) == "Stream(size=3, position=0)"


class TestSerializePayload:
    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            (None, b""),
            ("", b""),
            ("text", b"text"),
            (b"raw", b"raw"),
            (True, b"true"),
            (False, b"false"),
            (42, b"42"),
            (1.5, b"1.5"),
            ({"a": [1, 2]}, b'{"a":[1,2]}'),
            ([1, "two"], b'[1,"two"]'),
            ({"when": datetime.date(2024, 1, 1)}, b'{"when":"2024-01-01"}'),
            (datetime.date(2024, 1, 1), b"2024-01-01"),
        ],
    )
    def test_serialize(self, payload: object, expected: bytes) -> None:
        assert serialize_payload(payload) == expected


class TestStreamFor:
    def test_stream_passes_through(self) -> None:
        stream = Stream(b"x")
        assert stream_for(stream) is stream

    def test_default_is_empty(self) -> None:
        assert bytes(stream_for()) == b""

    def test_file_like_is_buffered_from_position(self) -> None:
        source = io.BytesIO(b"skip-keep")
        source.read(5)
        assert bytes(stream_for(source)) == b"keep"

    def test_text_file_like(self) -> None:
        assert bytes(stream_for(io.StringIO("text"))) == b"text"

    def test_structured_payload(self) -> None:
        assert bytes(stream_for({"id": 7})) == b'{"id":7}'


class TestReadFully:
    def test_reads_from_start_and_rewinds(self) -> None:
        stream = Stream(b"payload")
        stream.read(3)
        assert read_fully(stream) == "payload"
        assert stream.tell() == 0


class TestCopy:
    def test_same_bytes_and_position(self) -> None:
        stream = Stream(b"hello")
        stream.read(2)
        clone = stream.copy()
        assert clone is not stream
        assert bytes(clone) == b"hello"
        assert clone.tell() == 2

    def test_writes_do_not_leak(self) -> None:
        stream = Stream(b"abc")
        clone = stream.copy()
        clone.seek(0, io.SEEK_END)
        clone.write(b"ZZZ")
        assert bytes(stream) == b"abc"
        assert stream.tell() == 0

    def test_detached_copy_is_detached(self) -> None:
        stream = Stream(b"x")
        stream.detach()
        assert stream.copy().size is None
