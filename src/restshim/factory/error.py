"""Create host error objects."""

from collections.abc import Mapping, Sequence
from typing import Any

from restshim.factory.resolver import ClassResolver
from restshim.host.native import HostError


class ErrorFactory:
    """Creates ``HostError`` instances (or instances of a subclass).

    Usage::

        errors = ErrorFactory()
        error = errors.create(("item_not_found", "No such item.", {"status": 404}))
    """

    __slots__ = ("_resolver",)

    def __init__(self, default_class: type[HostError] | None = None) -> None:
        self._resolver = ClassResolver(HostError, default_class)

    def create(
        self,
        args: Sequence[Any] | Mapping[str, Any] = (),
        cls: type[HostError] | None = None,
    ) -> HostError:
        """Instantiate *cls* (or the default class) with *args*.

        A mapping is passed as keyword arguments, a sequence positionally.
        """
        error_class = self._resolver.resolve_class(cls)
        if isinstance(args, Mapping):
            return error_class(**args)
        return error_class(*args)
