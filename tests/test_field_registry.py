"""Tests for restshim.fields.registry and restshim.fields.access."""

import warnings
from typing import Any

import pytest

from restshim.config import AdapterConfig
from restshim.context import use_host
from restshim.fields.access import HostFieldAccess
from restshim.fields.collection import FieldCollection
from restshim.fields.field import Field
from restshim.fields.registry import ACTION_REGISTER, FieldRegistry
from restshim.host.host import Host


class TestFieldsDisabled:
    def test_fails_silently(self) -> None:
        host = Host(AdapterConfig(rest_fields=False))
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            FieldRegistry(host=host).register_fields(FieldCollection().add("item", Field("stock")))
        assert host.hooks.did_action(ACTION_REGISTER) == 0

    def test_warns_in_debug_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        host = Host(AdapterConfig(rest_fields=False, debug=True))
        with (
            use_host(host),
            caplog.at_level("WARNING", logger="restshim.fields"),
            pytest.warns(RuntimeWarning, match="custom REST fields"),
        ):
            FieldRegistry().register_fields(FieldCollection())
        assert host.hooks.did_action(ACTION_REGISTER) == 0
        assert any("custom REST fields" in r.message for r in caplog.records)


class TestRegisterFields:
    def test_empty_collection_fires_action(self, host: Host) -> None:
        seen: list[Any] = []
        host.hooks.add_action(ACTION_REGISTER, seen.append)
        fields = FieldCollection()
        FieldRegistry().register_fields(fields)
        assert seen == [fields]
        assert host.server.get_fields("item") == {}

    def test_registers_per_resource(self, host: Host) -> None:
        stock = Field("stock", {"schema": {"type": "integer"}})
        price = Field("price")
        fields = FieldCollection().add("item", stock).add("order", stock).add("order", price)
        FieldRegistry().register_fields(fields)
        assert list(host.server.get_fields("item")) == ["stock"]
        assert list(host.server.get_fields("order")) == ["stock", "price"]
        assert host.server.get_fields("order")["stock"]["schema"] == {"type": "integer"}
        assert host.server.get_fields("order")["price"]["get_callback"] is None


class TestHostFieldAccess:
    def test_reads_current_host(self, host: Host) -> None:
        host.server.register_field("item", "stock", {})
        assert list(HostFieldAccess().get_fields("item")) == ["stock"]

    def test_explicit_host(self, host: Host) -> None:
        other = Host()
        other.server.register_field("item", "price", {})
        assert list(HostFieldAccess(host=other).get_fields("item")) == ["price"]
        assert HostFieldAccess().get_fields("item") == {}
