"""The host framework's native REST objects.

These are the mutable request, response and error objects the host's
dispatcher hands to route callbacks. They are plain containers with
get/set accessors; the adapter subclasses the request and response to
add the immutable HTTP-message surface on top.

Header conventions differ between the two natives: the request keeps
value lists under canonical keys (lowercase, ``-`` -> ``_``), the response
keeps a comma-joined string under the name as given.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Parameter groups, in lookup priority order
PARAM_ORDER = ("url", "body", "query", "defaults")


def canonical_header_key(name: str) -> str:
    """Return the request-side storage key for a header name."""
    return name.lower().replace("-", "_")


def _as_list(value: Any) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return [str(value)]


class HostRequest:
    """A native REST request.

    ``req[key]`` and ``key in req`` look up parameters across the url,
    body, query and default groups, in that order.
    """

    def __init__(
        self,
        method: str = "",
        route: str = "",
        attributes: Mapping[str, Any] | None = None,
    ) -> None:
        self.method = method.upper()
        self.route = route
        self.attributes: dict[str, Any] = dict(attributes or {})
        self.headers: dict[str, list[str]] = {}
        self.params: dict[str, dict[str, Any]] = {group: {} for group in PARAM_ORDER}
        self.set_body(None)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.method or '-'} {self.route or '/'}>"

    # -- Method, route, attributes --

    def get_method(self) -> str:
        return self.method

    def set_method(self, method: str) -> None:
        self.method = method.upper()

    def get_route(self) -> str:
        return self.route

    def set_route(self, route: str) -> None:
        self.route = route

    def get_attributes(self) -> dict[str, Any]:
        return self.attributes

    def set_attributes(self, attributes: Mapping[str, Any]) -> None:
        self.attributes = dict(attributes)

    # -- Headers --

    def header_value(self, name: str) -> str | None:
        """Return the comma-joined value of *name*, or None if unset."""
        values = self.headers.get(canonical_header_key(name))
        if values is None:
            return None
        return ", ".join(values)

    def header_values(self, name: str) -> list[str] | None:
        """Return the values of *name* as a list, or None if unset."""
        values = self.headers.get(canonical_header_key(name))
        return None if values is None else list(values)

    def set_header(self, name: str, value: Any) -> None:
        self.headers[canonical_header_key(name)] = _as_list(value)

    def add_header(self, name: str, value: Any) -> None:
        self.headers.setdefault(canonical_header_key(name), []).extend(_as_list(value))

    def remove_header(self, name: str) -> None:
        self.headers.pop(canonical_header_key(name), None)

    def set_headers(self, headers: Mapping[str, Any], override: bool = True) -> None:
        if override:
            self.headers = {}
        for name, value in headers.items():
            self.set_header(name, value)

    # -- Body --

    def set_body(self, data: Any) -> None:
        self.body = data

    # -- Parameters --

    def get_param(self, key: str, default: Any = None) -> Any:
        for group in PARAM_ORDER:
            if key in self.params[group]:
                return self.params[group][key]
        return default

    def set_param(self, key: str, value: Any) -> None:
        """Set *key* in the highest-priority group, so lookups see it."""
        self.params[PARAM_ORDER[0]][key] = value

    def get_params(self) -> dict[str, Any]:
        """Return all parameters merged, higher-priority groups winning."""
        merged: dict[str, Any] = {}
        for group in reversed(PARAM_ORDER):
            merged.update(self.params[group])
        return merged

    def get_query_params(self) -> dict[str, Any]:
        return self.params["query"]

    def set_query_params(self, params: Mapping[str, Any]) -> None:
        self.params["query"] = dict(params)

    def get_body_params(self) -> dict[str, Any]:
        return self.params["body"]

    def set_body_params(self, params: Mapping[str, Any]) -> None:
        self.params["body"] = dict(params)

    def get_url_params(self) -> dict[str, Any]:
        return self.params["url"]

    def set_url_params(self, params: Mapping[str, Any]) -> None:
        self.params["url"] = dict(params)

    def get_default_params(self) -> dict[str, Any]:
        return self.params["defaults"]

    def set_default_params(self, params: Mapping[str, Any]) -> None:
        self.params["defaults"] = dict(params)

    def __getitem__(self, key: str) -> Any:
        for group in PARAM_ORDER:
            if key in self.params[group]:
                return self.params[group][key]
        raise KeyError(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_param(key, value)

    def __contains__(self, key: object) -> bool:
        return any(key in self.params[group] for group in PARAM_ORDER)

    def _detach(self) -> None:
        """Give this object its own copies of every mutable container."""
        self.attributes = dict(self.attributes)
        self.headers = {key: list(values) for key, values in self.headers.items()}
        self.params = {group: dict(values) for group, values in self.params.items()}


class HostResponse:
    """A native REST response."""

    def __init__(
        self,
        data: Any = None,
        status: int = 200,
        headers: Mapping[str, Any] | None = None,
    ) -> None:
        self.headers: dict[str, str] = {}
        self.set_data(data)
        self.set_status(status)
        self.set_headers(headers or {})

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.status}>"

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> None:
        self.data = data

    def get_status(self) -> int:
        return self.status

    def set_status(self, status: int) -> None:
        self.status = int(status)

    def set_headers(self, headers: Mapping[str, Any]) -> None:
        self.headers = {name: ", ".join(_as_list(value)) for name, value in headers.items()}

    def header(self, name: str, value: Any, replace: bool = True) -> None:
        """Set a single header; with ``replace=False`` append to it."""
        line = ", ".join(_as_list(value))
        if replace or name not in self.headers:
            self.headers[name] = line
        else:
            self.headers[name] = f"{self.headers[name]}, {line}"

    def _detach(self) -> None:
        self.headers = dict(self.headers)


class HostError:
    """A native error object: one or more codes, each with messages and data.

    Route callbacks return one instead of a response to signal failure.
    """

    def __init__(self, code: str | int = "", message: str = "", data: Any = None) -> None:
        self.errors: dict[str | int, list[str]] = {}
        self.error_data: dict[str | int, Any] = {}
        if code != "":
            self.add(code, message, data)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.get_error_codes()!r}>"

    def add(self, code: str | int, message: str, data: Any = None) -> None:
        self.errors.setdefault(code, []).append(message)
        if data is not None:
            self.error_data[code] = data

    def add_data(self, data: Any, code: str | int | None = None) -> None:
        if code is None:
            code = self.get_error_code()
        self.error_data[code] = data

    def has_errors(self) -> bool:
        return bool(self.errors)

    def get_error_codes(self) -> list[str | int]:
        return list(self.errors)

    def get_error_code(self) -> str | int:
        """Return the first error code, or ``""`` when there is none."""
        return next(iter(self.errors), "")

    def get_error_messages(self, code: str | int | None = None) -> list[str]:
        if code is None:
            return [message for messages in self.errors.values() for message in messages]
        return list(self.errors.get(code, []))

    def get_error_message(self, code: str | int | None = None) -> str:
        if code is None:
            code = self.get_error_code()
        messages = self.errors.get(code, [])
        return messages[0] if messages else ""

    def get_error_data(self, code: str | int | None = None) -> Any:
        if code is None:
            code = self.get_error_code()
        return self.error_data.get(code)


def is_error(thing: object) -> bool:
    """Return True when *thing* is a native error object."""
    return isinstance(thing, HostError)

