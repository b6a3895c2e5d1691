"""Adapter configuration.

AdapterConfig is a frozen dataclass; pass a new one to ``Host`` to change settings.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AdapterConfig:
    """Host and adapter configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AdapterConfig(rest_base_url="https://example.com/api", multisite=True)
    """

    # REST routing
    rest_base_url: str = "http://localhost/api"
    rest_route_param: str = "rest_route"  # Query parameter carrying the route for non-pretty URLs

    # Messages
    protocol_version: str = "1.1"
    allowed_methods: tuple[str, ...] = ("DELETE", "GET", "PATCH", "POST", "PUT")
    extended_status_codes: bool = False  # Also accept 103, 308 and 421 in with_status()

    # Host features
    multisite: bool = False
    rest_fields: bool = True  # Host supports registering custom REST fields

    debug: bool = False
