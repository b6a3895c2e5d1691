"""Apply registered custom fields to objects, requests and schemas.

``FieldProcessor`` runs the field callbacks for one request: readers add
values to an outgoing object, updaters consume values from the request.
``SchemaFieldProcessor`` merges the field schemas into an endpoint schema.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from restshim.contracts import FieldAccess
from restshim.host.native import HostError, HostRequest, is_error

logger = logging.getLogger("restshim.fields")


class FieldProcessor:
    """Runs the get and update callbacks of registered fields.

    Usage::

        processor = FieldProcessor(HostFieldAccess())
        item = processor.add_fields_to_object(item, request, "item")
        processor.update_fields_for_object(item, request, "item")
        if processor.last_error is not None:
            return processor.last_error
    """

    __slots__ = ("_access", "_last_error")

    def __init__(self, access: FieldAccess) -> None:
        self._access = access
        self._last_error: HostError | None = None

    @property
    def last_error(self) -> HostError | None:
        """The error that stopped the latest ``update_fields_for_object`` call."""
        return self._last_error

    def add_fields_to_object(
        self,
        obj: Mapping[str, Any],
        request: HostRequest,
        object_type: str = "",
    ) -> dict[str, Any]:
        """Return a copy of *obj* with the value of every readable field added."""
        result = dict(obj)
        for name, definition in self._access.get_fields(object_type).items():
            get_callback = definition.get("get_callback")
            if not get_callback:
                continue
            result[name] = get_callback(result, name, request, object_type)
        return result

    def update_fields_for_object(
        self,
        obj: Mapping[str, Any],
        request: HostRequest,
        object_type: str = "",
    ) -> int:
        """Pass request values to the update callbacks of the fields present.

        Returns the number of fields updated. Stops at the first callback
        that returns a ``HostError``; that error is kept in ``last_error``.
        """
        self._last_error = None
        updated = 0
        for name, definition in self._access.get_fields(object_type).items():
            update_callback = definition.get("update_callback")
            if not update_callback or name not in request:
                continue
            result = update_callback(request[name], obj, name, request, object_type)
            if is_error(result):
                logger.debug("Updating field %s of %s failed", name, object_type or "object")
                self._last_error = result
                break
            updated += 1
        return updated


class SchemaFieldProcessor:
    """Adds the schemas of registered fields to an endpoint schema."""

    __slots__ = ("_access",)

    def __init__(self, access: FieldAccess) -> None:
        self._access = access

    def add_fields_to_properties(
        self, properties: Mapping[str, Any], object_type: str
    ) -> dict[str, Any]:
        """Return *properties* with every field schema under ``properties["properties"]``.

        Fields without a schema are skipped. A callable schema is called.
        """
        result = dict(properties)
        merged = dict(result.get("properties") or {})
        for name, definition in self._access.get_fields(object_type).items():
            schema = definition.get("schema")
            if not schema:
                continue
            merged[name] = schema() if callable(schema) else schema
        if merged or "properties" in result:
            result["properties"] = merged
        return result
