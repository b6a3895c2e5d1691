"""Field access backed by the host's REST server."""

from typing import Any

from restshim.context import get_host
from restshim.host.host import Host


class HostFieldAccess:
    """Reads the field definitions registered with the host."""

    __slots__ = ("_host",)

    def __init__(self, *, host: Host | None = None) -> None:
        self._host = host

    def get_fields(self, object_type: str) -> dict[str, dict[str, Any]]:
        host = self._host or get_host()
        return host.server.get_fields(object_type)
