"""Tests for restshim.fields.field and restshim.fields.collection."""

from typing import Any

from restshim.fields.collection import FieldCollection
from restshim.fields.field import Field


class StockReader:
    def get_value(
        self, obj: dict[str, Any], field_name: str, request: Any, object_type: str = ""
    ) -> Any:
        return 3


class StockUpdater:
    def update_value(
        self, value: Any, obj: dict[str, Any], field_name: str, request: Any, object_type: str = ""
    ) -> Any:
        return True


class StockSchema:
    def definition(self) -> dict[str, Any]:
        return {"type": "integer"}


class TestField:
    def test_name_and_default_definition(self) -> None:
        field = Field("stock")
        assert field.name == "stock"
        assert field.definition() == {}

    def test_passed_definition(self) -> None:
        assert Field("stock", {"schema": None}).definition() == {"schema": None}

    def test_setters_return_self(self) -> None:
        field = Field("stock")
        assert field.set_get_callback() is field
        assert field.set_update_callback() is field
        assert field.set_schema() is field

    def test_set_get_callback(self) -> None:
        reader = StockReader()
        assert Field("stock").set_get_callback(reader).definition() == {
            "get_callback": reader.get_value
        }

    def test_set_update_callback(self) -> None:
        updater = StockUpdater()
        assert Field("stock").set_update_callback(updater).definition() == {
            "update_callback": updater.update_value
        }

    def test_set_schema(self) -> None:
        schema = StockSchema()
        assert Field("stock").set_schema(schema).definition() == {"schema": schema.definition}

    def test_reset(self) -> None:
        field = Field(
            "stock",
            {"get_callback": "get", "update_callback": "update", "schema": "schema"},
        )
        field.set_get_callback().set_update_callback().set_schema()
        assert field.definition() == {"get_callback": None, "update_callback": None, "schema": None}

    def test_definition_is_a_copy(self) -> None:
        field = Field("stock")
        field.definition()["schema"] = "changed"
        assert field.definition() == {}


class TestFieldCollection:
    def test_empty(self) -> None:
        assert list(FieldCollection()) == []
        assert len(FieldCollection()) == 0

    def test_add_and_delete_return_self(self) -> None:
        fields = FieldCollection()
        assert fields.add("item", Field("stock")) is fields
        assert fields.delete("item", "stock") is fields
        assert fields.delete("missing", "missing") is fields

    def test_groups_by_resource(self) -> None:
        stock, price = Field("stock"), Field("price")
        fields = FieldCollection().add("item", stock).add("item", price).add("order", stock)
        assert list(fields) == [
            ("item", {"stock": stock, "price": price}),
            ("order", {"stock": stock}),
        ]
        assert len(fields) == 3

    def test_same_name_replaces(self) -> None:
        old, new = Field("stock"), Field("stock")
        fields = FieldCollection().add("item", old).add("item", new)
        assert list(fields) == [("item", {"stock": new})]

    def test_delete_drops_empty_resource(self) -> None:
        fields = FieldCollection().add("item", Field("stock")).delete("item", "stock")
        assert list(fields) == []
