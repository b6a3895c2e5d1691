"""Registers field collections with the host's REST server."""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable

from restshim.context import get_host
from restshim.fields.field import Field
from restshim.host.host import Host

logger = logging.getLogger("restshim.fields")

ACTION_REGISTER = "restshim.register_fields"
"""Action fired with ``(fields,)`` before the fields are registered."""


class FieldRegistry:
    """Registers every field of a collection for its resource.

    On a host without custom REST field support nothing is registered and
    the action does not fire. In debug mode that is reported as a warning.
    """

    ACTION_REGISTER = ACTION_REGISTER

    __slots__ = ("_host",)

    def __init__(self, *, host: Host | None = None) -> None:
        self._host = host

    def register_fields(self, fields: Iterable[tuple[str, dict[str, Field]]]) -> None:
        host = self._host or get_host()
        if not host.server.fields_enabled:
            if host.config.debug:
                msg = "Cannot register custom REST fields: the host does not support them."
                logger.warning(msg)
                warnings.warn(msg, RuntimeWarning, stacklevel=2)
            return

        host.hooks.do_action(ACTION_REGISTER, fields)
        for resource, resource_fields in fields:
            for name, field in resource_fields.items():
                host.server.register_field(resource, name, field.definition())
                logger.debug("Registered field %s for %s", name, resource)
