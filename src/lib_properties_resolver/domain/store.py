"""Immutable key/value store produced from a properties file.

Purpose
-------
Hold the parsed contents of the located properties file for the lifetime of a
resolver. The store contains no I/O and never changes after construction.

Contents
--------
* :class:`PropertyStore` – ``Mapping[str, str]`` backed by ``MappingProxyType``
  that remembers the :class:`FileLocation` it came from.
* :data:`EMPTY_STORE` – shared instance used when no file was located.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator

from .location import FileLocation


@dataclass(frozen=True, slots=True, eq=False)
class PropertyStore(Mapping[str, str]):
    """Read-only mapping of raw property keys to string values.

    Equality is mapping equality (the location is not compared) and the
    store is unhashable, as ``Mapping`` itself is.

    Parameters
    ----------
    _data:
        Parsed key/value pairs. Wrapped in a ``mappingproxy`` during
        initialisation so later mutation of the caller's dict has no effect.
    location:
        Where the values were loaded from; ``None`` for the empty store.

    Examples
    --------
    >>> store = PropertyStore({"name": "server1"})
    >>> store["name"], store.get("missing"), len(store)
    ('server1', None, 1)
    >>> EMPTY_STORE.location is None and len(EMPTY_STORE) == 0
    True
    """

    _data: Mapping[str, str]
    location: FileLocation | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "_data", MappingProxyType(dict(self._data)))

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def as_dict(self) -> dict[str, str]:
        """Return a mutable copy of the stored pairs."""

        return dict(self._data)


EMPTY_STORE = PropertyStore({})
"""Canonical empty store used when the search found no properties file."""


@dataclass(frozen=True, slots=True)
class ResolvedProperty:
    """The winning value for a key together with the source that supplied it.

    Attributes
    ----------
    key:
        Bare key that was looked up.
    value:
        Resolved string value.
    layer:
        ``"override"`` or ``"file"``.
    origin:
        The namespace-qualified override key (``"geode.name"``) or the
        properties file URI.
    """

    key: str
    value: str
    layer: str
    origin: str | None
