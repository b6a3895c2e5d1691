"""A route: URL pattern relative to the namespace, plus its options."""

from typing import Any

from restshim.contracts import Arguments


class Route:
    """A route to register under a namespace.

    *options* is anything with a ``to_dict()``, usually an ``Options``.
    It is converted when the route is registered, so later changes to the
    options object still apply.
    """

    __slots__ = ("_options", "_url")

    def __init__(self, url: str, options: Arguments) -> None:
        self._url = url
        self._options = options

    def __repr__(self) -> str:
        return f"<Route {self._url!r}>"

    @property
    def url(self) -> str:
        return self._url

    def options(self) -> dict[str, Any]:
        return self._options.to_dict()
