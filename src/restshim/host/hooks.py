"""Host hook registry: filters and actions.

Filters pass a value through every registered callback and return the
result. Actions call every registered callback for its side effects and
count how often they fired. Callbacks run in ascending priority, then in
registration order.
"""

from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_PRIORITY = 10


@dataclass(frozen=True, slots=True)
class _Hook:
    callback: Callable[..., Any]
    priority: int
    order: int


class Hooks:
    """Filter and action registry.

    Usage::

        hooks = Hooks()
        hooks.add_filter("restshim.allowed_request_methods", lambda m, req: (*m, "OPTIONS"))
        hooks.apply_filters("restshim.allowed_request_methods", ("GET",), request)
    """

    __slots__ = ("_actions", "_fired", "_filters", "_order")

    def __init__(self) -> None:
        self._filters: dict[str, list[_Hook]] = {}
        self._actions: dict[str, list[_Hook]] = {}
        self._fired: Counter[str] = Counter()
        self._order = 0

    def _add(
        self,
        table: dict[str, list[_Hook]],
        name: str,
        callback: Callable[..., Any],
        priority: int,
    ) -> None:
        self._order += 1
        hooks = table.setdefault(name, [])
        hooks.append(_Hook(callback, priority, self._order))
        hooks.sort(key=lambda hook: (hook.priority, hook.order))

    @staticmethod
    def _remove(table: dict[str, list[_Hook]], name: str, callback: Callable[..., Any]) -> bool:
        hooks = table.get(name, [])
        remaining = [hook for hook in hooks if hook.callback != callback]
        if len(remaining) == len(hooks):
            return False
        table[name] = remaining
        return True

    # -- Filters --

    def add_filter(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register *callback* to filter values passed through *name*."""
        self._add(self._filters, name, callback, priority)

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        """Unregister *callback*; return whether it was registered."""
        return self._remove(self._filters, name, callback)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Pass *value* (plus *args*) through every filter for *name*."""
        for hook in tuple(self._filters.get(name, ())):
            value = hook.callback(value, *args)
        return value

    # -- Actions --

    def add_action(
        self, name: str, callback: Callable[..., Any], priority: int = DEFAULT_PRIORITY
    ) -> None:
        """Register *callback* to run whenever *name* fires."""
        self._add(self._actions, name, callback, priority)

    def remove_action(self, name: str, callback: Callable[..., Any]) -> bool:
        return self._remove(self._actions, name, callback)

    def do_action(self, name: str, *args: Any) -> None:
        """Fire *name*, calling every registered callback with *args*."""
        self._fired[name] += 1
        for hook in tuple(self._actions.get(name, ())):
            hook.callback(*args)

    def did_action(self, name: str) -> int:
        """Return how many times *name* has fired."""
        return self._fired[name]
