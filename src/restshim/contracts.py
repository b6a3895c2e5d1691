"""Structural protocols for the pieces an API author plugs in.

No base class required: route and field builders only check the shape.
Any object with a ``to_dict()`` can provide route arguments, any object
with a ``get_value()`` can read a field, and so on.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from restshim.host.native import HostRequest


@runtime_checkable
class Arguments(Protocol):
    """Endpoint arguments, as passed to the host under ``args``."""

    def to_dict(self) -> dict[str, Any]: ...


@runtime_checkable
class Schema(Protocol):
    """Anything that can describe itself as a JSON schema."""

    def definition(self) -> dict[str, Any]: ...


@runtime_checkable
class EndpointSchema(Schema, Protocol):
    """The schema of a whole endpoint's resource."""

    def properties(self) -> dict[str, Any]: ...

    def title(self) -> str: ...


@runtime_checkable
class RequestHandler(Protocol):
    """Handles a request dispatched to an endpoint.

    Returns whatever the host accepts from a route callback: a response,
    a ``HostError``, or plain data.
    """

    def handle_request(self, request: HostRequest) -> Any: ...


@runtime_checkable
class FieldReader(Protocol):
    """Reads the value of a custom field for an object."""

    def get_value(
        self,
        obj: dict[str, Any],
        field_name: str,
        request: HostRequest,
        object_type: str = "",
    ) -> Any: ...


@runtime_checkable
class FieldUpdater(Protocol):
    """Writes the value of a custom field; returns a ``HostError`` on failure."""

    def update_value(
        self,
        value: Any,
        obj: dict[str, Any],
        field_name: str,
        request: HostRequest,
        object_type: str = "",
    ) -> Any: ...


@runtime_checkable
class FieldAccess(Protocol):
    """Looks up the registered custom fields of an object type."""

    def get_fields(self, object_type: str) -> Mapping[str, Mapping[str, Any]]: ...
