"""Fields grouped by the object type (resource) they extend."""

from __future__ import annotations

from collections.abc import Iterator

from restshim.fields.field import Field


class FieldCollection:
    """Resource -> {field name: field}, in insertion order.

    Adding a field under a name that already exists for the resource
    replaces it. ``len()`` counts fields across all resources.
    """

    __slots__ = ("_fields",)

    def __init__(self) -> None:
        self._fields: dict[str, dict[str, Field]] = {}

    def add(self, resource: str, field: Field) -> FieldCollection:
        self._fields.setdefault(resource, {})[field.name] = field
        return self

    def delete(self, resource: str, field_name: str) -> FieldCollection:
        fields = self._fields.get(resource)
        if fields is not None:
            fields.pop(field_name, None)
            if not fields:
                del self._fields[resource]
        return self

    def __iter__(self) -> Iterator[tuple[str, dict[str, Field]]]:
        return iter([(resource, dict(fields)) for resource, fields in self._fields.items()])

    def __len__(self) -> int:
        return sum(len(fields) for fields in self._fields.values())
