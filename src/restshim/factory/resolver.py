"""Resolve which class a factory instantiates."""

from __future__ import annotations

import inspect

from restshim.errors import InvalidArgument, InvalidClass


class ClassResolver:
    """Validates classes against a base class and picks a default.

    Without an explicit *default_class*, a concrete *base* is its own
    default. An abstract base has no default, so every ``resolve_class``
    call must name a class.
    """

    __slots__ = ("_base", "_default_class")

    def __init__(self, base: type, default_class: type | None = None) -> None:
        if not isinstance(base, type):
            msg = f"Base must be a class, got {base!r}."
            raise InvalidArgument(msg)
        if default_class is not None and not _is_subclass(default_class, base):
            msg = f"Default class {default_class!r} is not a subclass of {base.__qualname__}."
            raise InvalidClass(msg)
        if default_class is None and not inspect.isabstract(base):
            default_class = base
        self._base = base
        self._default_class = default_class

    @property
    def base(self) -> type:
        return self._base

    @property
    def default_class(self) -> type | None:
        return self._default_class

    def resolve_class(self, cls: type | None = None) -> type:
        """Return *cls*, or the default class when *cls* is None.

        Raises:
            InvalidClass: *cls* is not a subclass of the base.
            InvalidArgument: No class was given and there is no default.
        """
        if cls is None:
            if self._default_class is None:
                msg = f"No class given and no default class for {self._base.__qualname__}."
                raise InvalidArgument(msg)
            return self._default_class
        if not _is_subclass(cls, self._base):
            msg = f"{cls!r} is not a subclass of {self._base.__qualname__}."
            raise InvalidClass(msg)
        return cls


def _is_subclass(cls: object, base: type) -> bool:
    return isinstance(cls, type) and issubclass(cls, base)
