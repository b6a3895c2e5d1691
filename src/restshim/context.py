"""Host context via ContextVar.

Provides:
- ``host_var``: The ``Host`` messages, registries and factories talk to.
- ``use_host``: Make a host current for the duration of a block.

Anything that takes a ``host=`` argument falls back to ``get_host()``.
Outside any ``use_host`` block that is a process-wide default host built
from a default ``AdapterConfig``.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    free-threading. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from restshim.host.host import Host

_default_host = Host()

host_var: ContextVar[Host] = ContextVar("restshim_host", default=_default_host)
"""The current host."""


def get_host() -> Host:
    """Return the current host."""
    return host_var.get()


@contextmanager
def use_host(host: Host) -> Iterator[Host]:
    """Make *host* current inside the ``with`` block."""
    token = host_var.set(host)
    try:
        yield host
    finally:
        host_var.reset(token)
