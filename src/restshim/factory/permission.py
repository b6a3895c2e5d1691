"""Permission callbacks for route options."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeAlias

from restshim.context import get_host
from restshim.host.host import Host

logger = logging.getLogger("restshim.factory")

PermissionCheck: TypeAlias = Callable[..., bool]


class PermissionCallback:
    """Builds ``permission_callback`` values from capabilities.

    The returned callables accept (and ignore) whatever the host passes
    them, usually the request. Capabilities are checked when the callable
    runs, not when it is built.

    Usage::

        permissions = PermissionCallback()
        Options.with_callback(
            create_item,
            methods=RestServer.CREATABLE,
            options={"permission_callback": permissions.current_user_can("edit_items")},
        )
    """

    __slots__ = ("_host",)

    def __init__(self, *, host: Host | None = None) -> None:
        self._host = host

    def current_user_can(self, *capabilities: str) -> PermissionCheck:
        """Return a check that passes when the current user has all *capabilities*."""

        def check(*_args: Any) -> bool:
            host = self._host or get_host()
            return all(host.current_user_can(capability) for capability in capabilities)

        return check

    def current_user_can_for_site(self, site_id: int, *capabilities: str) -> PermissionCheck:
        """Like ``current_user_can``, but checked on site *site_id*.

        On a single-site host the check runs on the only site there is.
        """
        check = self.current_user_can(*capabilities)

        def check_for_site(*args: Any) -> bool:
            host = self._host or get_host()
            if not host.is_multisite:
                return check(*args)
            logger.debug("Checking %s on site %d", ", ".join(capabilities) or "-", site_id)
            host.switch_to_site(site_id)
            try:
                return check(*args)
            finally:
                host.restore_current_site()

        return check_for_site
