"""A custom field added to the REST representation of an object type."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from restshim.contracts import FieldReader, FieldUpdater, Schema


class Field:
    """A named field definition with fluent setters.

    The definition holds whatever the host accepts for a field:
    ``get_callback``, ``update_callback`` and ``schema``. Setting one of
    them to None resets it (the key stays, with a None value).

    Usage::

        field = Field("stock").set_get_callback(StockReader()).set_schema(StockSchema())
        field.definition()
        # {"get_callback": <bound get_value>, "schema": <bound definition>}
    """

    __slots__ = ("_definition", "name")

    def __init__(self, name: str, definition: Mapping[str, Any] | None = None) -> None:
        self.name = name
        self._definition: dict[str, Any] = dict(definition or {})

    def __repr__(self) -> str:
        return f"<Field {self.name!r}>"

    def definition(self) -> dict[str, Any]:
        return dict(self._definition)

    def set_get_callback(self, reader: FieldReader | None = None) -> Field:
        self._definition["get_callback"] = reader.get_value if reader is not None else None
        return self

    def set_update_callback(self, updater: FieldUpdater | None = None) -> Field:
        self._definition["update_callback"] = (
            updater.update_value if updater is not None else None
        )
        return self

    def set_schema(self, schema: Schema | None = None) -> Field:
        self._definition["schema"] = schema.definition if schema is not None else None
        return self
