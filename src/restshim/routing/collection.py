"""Ordered collection of routes."""

from __future__ import annotations

from collections.abc import Iterator

from restshim.routing.route import Route


class RouteCollection:
    """Routes in the order they were added.

    ``add`` and ``delete`` return the collection for chaining. Deleting a
    position that does not exist is a no-op.
    """

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[Route] = []

    def add(self, route: Route) -> RouteCollection:
        self._routes.append(route)
        return self

    def delete(self, index: int) -> RouteCollection:
        if 0 <= index < len(self._routes):
            del self._routes[index]
        return self

    def __iter__(self) -> Iterator[Route]:
        return iter(list(self._routes))

    def __len__(self) -> int:
        return len(self._routes)
