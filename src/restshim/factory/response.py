"""Create host response objects."""

from collections.abc import Mapping, Sequence
from typing import Any

from restshim.factory.resolver import ClassResolver
from restshim.host.native import HostResponse
from restshim.http.response import Response


class ResponseFactory:
    """Creates responses; ``Response`` unless another class is asked for.

    Any ``HostResponse`` subclass is accepted, so plain native responses
    can be created too.
    """

    __slots__ = ("_resolver",)

    def __init__(self, default_class: type[HostResponse] | None = None) -> None:
        self._resolver = ClassResolver(HostResponse, default_class or Response)

    def create(
        self,
        args: Sequence[Any] | Mapping[str, Any] = (),
        cls: type[HostResponse] | None = None,
    ) -> HostResponse:
        response_class = self._resolver.resolve_class(cls)
        if isinstance(args, Mapping):
            return response_class(**args)
        return response_class(*args)
