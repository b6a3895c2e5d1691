"""The host runtime seen from the adapter.

Bundles the configuration, the hook registry and the REST server, and
answers the questions the adapter and the permission callbacks ask the
host: which request methods are allowed, whether the current user has a
capability, and which site is current on a multisite host.

Capabilities are granted per site. Enforcing them is the host's business;
this object only answers ``current_user_can``.
"""

import logging
from typing import Any

from restshim.config import AdapterConfig
from restshim.errors import ConfigurationError
from restshim.host.hooks import Hooks
from restshim.host.server import RestServer

logger = logging.getLogger("restshim.host")

ALLOWED_METHODS_FILTER = "restshim.allowed_request_methods"
"""Filter applied to the allowed request methods, with the request as extra argument."""

MAIN_SITE_ID = 1


class Host:
    """Configuration, hooks, REST server, capabilities and sites of one host.

    Usage::

        host = Host(AdapterConfig(multisite=True))
        host.grant("edit_posts", site_id=2)
        with use_host(host):
            ...
    """

    __slots__ = ("_grants", "_site_stack", "config", "hooks", "server")

    def __init__(self, config: AdapterConfig | None = None) -> None:
        self.config = config or AdapterConfig()
        self.hooks = Hooks()
        self.server = RestServer(self.config)
        self._grants: dict[int, set[str]] = {}
        self._site_stack: list[int] = [MAIN_SITE_ID]

    def __repr__(self) -> str:
        return f"<Host {self.config.rest_base_url} site={self.current_site_id}>"

    # -- Request methods --

    def allowed_methods(self, request: Any = None) -> tuple[str, ...]:
        """Return the allowed HTTP request methods after filtering."""
        methods = self.hooks.apply_filters(
            ALLOWED_METHODS_FILTER, self.config.allowed_methods, request
        )
        return tuple(str(method).upper() for method in methods)

    # -- Capabilities --

    def grant(self, *capabilities: str, site_id: int | None = None) -> None:
        """Give the current user *capabilities* on *site_id* (default: current site)."""
        site = self.current_site_id if site_id is None else site_id
        self._grants.setdefault(site, set()).update(capabilities)

    def revoke(self, *capabilities: str, site_id: int | None = None) -> None:
        site = self.current_site_id if site_id is None else site_id
        self._grants.get(site, set()).difference_update(capabilities)

    def current_user_can(self, capability: str) -> bool:
        """Return whether the current user has *capability* on the current site."""
        return capability in self._grants.get(self.current_site_id, ())

    def capabilities(self, site_id: int | None = None) -> frozenset[str]:
        site = self.current_site_id if site_id is None else site_id
        return frozenset(self._grants.get(site, ()))

    # -- Sites --

    @property
    def is_multisite(self) -> bool:
        return self.config.multisite

    @property
    def current_site_id(self) -> int:
        return self._site_stack[-1]

    def switch_to_site(self, site_id: int) -> None:
        """Make *site_id* current until the matching ``restore_current_site``."""
        if not self.is_multisite:
            msg = "Cannot switch sites on a single-site host."
            raise ConfigurationError(msg)
        logger.debug("Switching from site %d to site %d", self.current_site_id, site_id)
        self._site_stack.append(site_id)

    def restore_current_site(self) -> bool:
        """Undo the latest ``switch_to_site``; return False if there was none."""
        if len(self._site_stack) == 1:
            return False
        self._site_stack.pop()
        return True
