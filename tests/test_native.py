"""Tests for restshim.host.native — the host's mutable request, response and error."""

import pytest

from restshim.host.native import (
    HostError,
    HostRequest,
    HostResponse,
    canonical_header_key,
    is_error,
)


class TestHostRequest:
    def test_defaults(self) -> None:
        req = HostRequest()
        assert req.get_method() == ""
        assert req.get_route() == ""
        assert req.get_attributes() == {}
        assert req.headers == {}
        assert req.body is None

    def test_method_is_uppercased(self) -> None:
        req = HostRequest("post", "/items")
        assert req.method == "POST"
        req.set_method("delete")
        assert req.get_method() == "DELETE"

    def test_canonical_header_key(self) -> None:
        assert canonical_header_key("Content-Type") == "content_type"

    def test_headers(self) -> None:
        req = HostRequest()
        req.set_header("Content-Type", "text/html")
        req.add_header("X-Tag", ["a", "b"])
        req.add_header("x-tag", "c")
        assert req.headers == {"content_type": ["text/html"], "x_tag": ["a", "b", "c"]}
        assert req.header_value("X-Tag") == "a, b, c"
        assert req.header_values("content-type") == ["text/html"]
        assert req.header_value("missing") is None
        assert req.header_values("missing") is None
        req.remove_header("X-TAG")
        assert "x_tag" not in req.headers

    def test_set_headers_override(self) -> None:
        req = HostRequest()
        req.set_header("A", "1")
        req.set_headers({"B": "2"}, override=False)
        assert req.headers == {"a": ["1"], "b": ["2"]}
        req.set_headers({"C": "3"})
        assert req.headers == {"c": ["3"]}

    def test_param_lookup_order(self) -> None:
        req = HostRequest()
        req.set_default_params({"id": "default", "page": 1})
        req.set_query_params({"id": "query"})
        req.set_body_params({"id": "body"})
        assert req["id"] == "body"
        req.set_url_params({"id": "url"})
        assert req["id"] == "url"
        assert req.get_param("page") == 1
        assert req.get_param("missing", "fallback") == "fallback"
        assert req.get_params() == {"id": "url", "page": 1}

    def test_item_access(self) -> None:
        req = HostRequest()
        req["name"] = "mug"
        assert "name" in req
        assert req.get_url_params() == {"name": "mug"}
        with pytest.raises(KeyError):
            req["missing"]


class TestHostResponse:
    def test_defaults(self) -> None:
        res = HostResponse()
        assert res.get_data() is None
        assert res.get_status() == 200
        assert res.headers == {}

    def test_headers_are_comma_joined(self) -> None:
        res = HostResponse(headers={"X-Tag": ["a", "b"], "Accept": "*/*"})
        assert res.headers == {"X-Tag": "a, b", "Accept": "*/*"}

    def test_header_replace_and_append(self) -> None:
        res = HostResponse()
        res.header("X-Tag", "a")
        res.header("X-Tag", "b", replace=False)
        assert res.headers["X-Tag"] == "a, b"
        res.header("X-Tag", "c")
        assert res.headers["X-Tag"] == "c"

    def test_status_is_int(self) -> None:
        res = HostResponse(status="201")  # type: ignore[arg-type]
        assert res.status == 201


class TestHostError:
    def test_empty(self) -> None:
        err = HostError()
        assert not err.has_errors()
        assert err.get_error_code() == ""
        assert err.get_error_message() == ""
        assert err.get_error_data() is None

    def test_codes_messages_and_data(self) -> None:
        err = HostError("not_found", "No such item.", {"status": 404})
        err.add("not_found", "Really not there.")
        err.add("invalid", "Bad input.", {"status": 400})
        assert err.get_error_codes() == ["not_found", "invalid"]
        assert err.get_error_code() == "not_found"
        assert err.get_error_message() == "No such item."
        assert err.get_error_messages("not_found") == ["No such item.", "Really not there."]
        assert err.get_error_messages() == ["No such item.", "Really not there.", "Bad input."]
        assert err.get_error_data("invalid") == {"status": 400}

    def test_add_data_defaults_to_first_code(self) -> None:
        err = HostError("oops", "Oops.")
        err.add_data({"status": 500})
        assert err.get_error_data() == {"status": 500}

    def test_is_error(self) -> None:
        assert is_error(HostError())
        assert not is_error(HostResponse())
        assert not is_error(None)
