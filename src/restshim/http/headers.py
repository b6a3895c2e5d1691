"""Immutable, case-insensitive, multi-value HTTP header store.

Implements ``Mapping[str, list[str]]`` keyed by canonical header name.
Keeps two tables side by side: canonical name -> tuple of values (in
insertion order) and lowercase name -> canonical name. Every mutator
returns a new store that shares the untouched value tuples with the old one.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

from restshim.errors import InvalidHeaderName, InvalidHeaderValue

HeaderScalar: TypeAlias = str | int | float | bool
HeaderInput: TypeAlias = HeaderScalar | list[HeaderScalar] | tuple[HeaderScalar, ...]
HeadersInput: TypeAlias = Mapping[str, HeaderInput] | Iterable[tuple[str, HeaderInput]]

_SCALARS = (str, int, float, bool)


def normalize_value(value: HeaderScalar) -> str:
    """Coerce *value* to ``str`` and trim surrounding spaces and tabs.

    Other whitespace (newlines, form feeds) is left alone.
    """
    if isinstance(value, bool):
        value = "true" if value else "false"
    return str(value).strip(" \t")


def normalize_values(value: HeaderInput, *, split: bool = False) -> tuple[str, ...]:
    """Normalize one or more header values into a tuple of strings.

    With *split*, a plain string is treated as a comma-joined list (the
    host's native form) and split into individual values.
    """
    if isinstance(value, (list, tuple)):
        return tuple(normalize_value(item) for item in value)
    if split and isinstance(value, str):
        return tuple(normalize_value(item) for item in value.split(","))
    return (normalize_value(value),)


def validate_header(name: object, value: object) -> None:
    """Raise unless *name* is a string and *value* is a scalar or list of scalars."""
    if not isinstance(name, str):
        msg = f"Header name must be a string, got {type(name).__name__}."
        raise InvalidHeaderName(msg)
    if isinstance(value, _SCALARS):
        return
    if isinstance(value, (list, tuple)) and value and all(isinstance(v, _SCALARS) for v in value):
        return
    msg = f"Header {name!r} requires one or more scalar values, got {value!r}."
    raise InvalidHeaderValue(msg)


class HeaderStore(Mapping[str, list[str]]):
    """Immutable, case-insensitive header store with canonical names.

    The canonical name of a header is the casing it was first set with.
    Later writes under a different casing reuse the existing entry.

    ``__getitem__`` and ``get_list`` return all values for a header.
    ``get_line`` returns them joined with ``", "``.
    """

    __slots__ = ("_names", "_values")

    def __init__(
        self,
        headers: HeadersInput = (),
    ) -> None:
        names: dict[str, str] = {}
        values: dict[str, tuple[str, ...]] = {}
        items = headers.items() if isinstance(headers, Mapping) else headers
        for name, value in items:
            validate_header(name, value)
            normalized = normalize_values(value, split=True)
            key = name.lower()
            canonical = names.get(key)
            if canonical is None:
                names[key] = name
                values[name] = normalized
            else:
                values[canonical] = values[canonical] + normalized
        object.__setattr__(self, "_names", names)
        object.__setattr__(self, "_values", values)

    @classmethod
    def _from_tables(
        cls, names: dict[str, str], values: dict[str, tuple[str, ...]]
    ) -> HeaderStore:
        store = cls.__new__(cls)
        object.__setattr__(store, "_names", names)
        object.__setattr__(store, "_values", values)
        return store

    # -- Mapping protocol --

    def __getitem__(self, name: str) -> list[str]:
        canonical = self._names.get(name.lower()) if isinstance(name, str) else None
        if canonical is None:
            raise KeyError(name)
        return list(self._values[canonical])

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return name.lower() in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{name!r}: {list(values)!r}" for name, values in self._values.items())
        return f"HeaderStore({{{items}}})"

    # -- Lookups --

    def canonical_name(self, name: str) -> str | None:
        """Return the canonical casing for *name*, or None if absent."""
        if not isinstance(name, str):
            return None
        return self._names.get(name.lower())

    def get_list(self, name: str) -> list[str]:
        """Return all values for *name* (empty list if absent)."""
        canonical = self.canonical_name(name)
        if canonical is None:
            return []
        return list(self._values[canonical])

    def get_line(self, name: str) -> str:
        """Return all values for *name* joined with ``", "`` (empty if absent)."""
        return ", ".join(self.get_list(name))

    def get_all(self) -> dict[str, list[str]]:
        """Return canonical name -> values, in insertion order."""
        return {name: list(values) for name, values in self._values.items()}

    def multi_items(self) -> list[tuple[str, str]]:
        """Return one ``(name, value)`` pair per value, in order."""
        return [(name, value) for name, values in self._values.items() for value in values]

    def to_native(self) -> dict[str, str]:
        """Return the host's form: canonical name -> comma-joined string."""
        return {name: ", ".join(values) for name, values in self._values.items()}

    # -- Immutable transformations --

    def with_header(self, name: str, value: HeaderInput) -> HeaderStore:
        """Return a store where *name* holds exactly *value*.

        An existing entry (matched case-insensitively) keeps its canonical
        name and position; only its values are replaced.
        """
        validate_header(name, value)
        normalized = normalize_values(value)
        key = name.lower()
        canonical = self._names.get(key)
        values = dict(self._values)
        if canonical is None:
            names = {**self._names, key: name}
            values[name] = normalized
        else:
            names = self._names.copy()
            values[canonical] = normalized
        return self._from_tables(names, values)

    def with_added_header(self, name: str, value: HeaderInput) -> HeaderStore:
        """Return a store with *value* appended to the values of *name*."""
        validate_header(name, value)
        canonical = self._names.get(name.lower())
        if canonical is None:
            return self.with_header(name, value)
        values = dict(self._values)
        values[canonical] = values[canonical] + normalize_values(value)
        return self._from_tables(self._names.copy(), values)

    def with_leading_header(self, name: str, value: HeaderInput) -> HeaderStore:
        """Like ``with_header``, but the entry is moved to the first position."""
        validate_header(name, value)
        key = name.lower()
        canonical = self._names.get(key, name)
        values = {canonical: normalize_values(value)}
        values.update((k, v) for k, v in self._values.items() if k != canonical)
        return self._from_tables({**self._names, key: canonical}, values)

    def without_header(self, name: str) -> HeaderStore:
        """Return a store without *name*; the same store if it is absent."""
        key = name.lower()
        canonical = self._names.get(key)
        if canonical is None:
            return self
        names = {k: v for k, v in self._names.items() if k != key}
        values = {k: v for k, v in self._values.items() if k != canonical}
        return self._from_tables(names, values)
