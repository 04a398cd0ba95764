"""Composition root for ``lib_properties_resolver``.

Purpose
-------
Wire the override source, the file locator, and the properties loader into
the two public operations: finding the properties file a process should use,
and resolving single property values with a fixed first-match precedence.

Contents
--------
* :func:`find_properties_file` – candidate names from overrides, then search.
* :func:`specified_properties_file_name` – explicit file name or the default.
* :class:`PropertiesResolver` – immutable store plus override-first lookups.

System Role
-----------
This is the canonical place to adjust precedence rules or swap adapters. The
domain types stay free of I/O; adapters never call back into this module.
"""

from __future__ import annotations

import os
from functools import partial
from typing import Callable, Sequence, Union

from .adapters.file_loaders.properties import PropertiesFileLoader
from .adapters.locator.default import DefaultFileLocator
from .adapters.overrides.environ import EnvironOverrideSource
from .application.ports import FileLocator, OverrideSource, PropertiesLoader
from .application.precedence import candidate_file_names, first_present, specified_file_name
from .domain.errors import InvalidFormat, PropertiesLoadError
from .domain.location import FileLocation
from .domain.namespaces import DEFAULT_NAMESPACES, Namespace
from .domain.store import EMPTY_STORE, PropertyStore, ResolvedProperty
from .observability import bind_trace_id, log_debug, log_error, log_info, make_event

LocationLike = Union[FileLocation, str, "os.PathLike[str]"]


def find_properties_file(
    *,
    overrides: OverrideSource | None = None,
    namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES,
    locator: FileLocator | None = None,
) -> FileLocation | None:
    """Return the location of the properties file to load, or ``None``.

    Why
    ----
    Callers need exactly one file (never a merge) chosen by a fixed order:
    explicit current name, explicit legacy name, default current name, default
    legacy name; each checked in the working directory, the home directory,
    and on the resource search path.

    Parameters
    ----------
    overrides:
        Source of the explicit file-name overrides. Defaults to
        :data:`os.environ`.
    namespaces:
        Naming schemes in precedence order.
    locator:
        Search strategy. Defaults to :class:`DefaultFileLocator`.

    Returns
    -------
    FileLocation | None
        ``None`` means "use built-in defaults only"; it is not an error.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tempfile import TemporaryDirectory
    >>> from lib_properties_resolver.adapters.resources.default import NullResourceLoader
    >>> tmp = TemporaryDirectory()
    >>> root = Path(tmp.name)
    >>> _ = (root / "custom.properties").write_text("name=a", encoding="utf-8")
    >>> _ = (root / "geode.properties").write_text("name=b", encoding="utf-8")
    >>> locator = DefaultFileLocator(cwd=root, home=root, resources=NullResourceLoader())
    >>> find_properties_file(overrides={"geodePropertyFile": "custom.properties"}, locator=locator).path.name
    'custom.properties'
    >>> tmp.cleanup()
    """

    source = overrides if overrides is not None else EnvironOverrideSource()
    search = locator if locator is not None else DefaultFileLocator()
    return search.locate(*candidate_file_names(source, namespaces))


def specified_properties_file_name(
    *,
    overrides: OverrideSource | None = None,
    namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES,
) -> str:
    """Return the file name requested through overrides, or the built-in default.

    Examples
    --------
    >>> specified_properties_file_name(overrides={})
    'geode.properties'
    >>> specified_properties_file_name(overrides={"geodePropertyFile": "a.properties", "gemfirePropertyFile": "b.properties"})
    'a.properties'
    """

    source = overrides if overrides is not None else EnvironOverrideSource()
    return specified_file_name(source, namespaces)


class PropertiesResolver:
    """Resolve property values from overrides first, then the loaded file.

    Why
    ----
    A single key may be supplied by the current namespace override
    (``geode.<key>``), the legacy namespace override (``gemfire.<key>``), or
    the properties file (``<key>``). The first non-null source wins and values
    are never merged.

    What
    ----
    Loads the properties file once during construction into an immutable
    :class:`PropertyStore`. Lookups read the injected override source on every
    call, so the resolver itself holds no mutable state and is safe to share
    between threads.

    Examples
    --------
    >>> resolver = PropertiesResolver(None, overrides={"gemfire.name": "legacy"})
    >>> resolver.get_property("name")
    'legacy'
    >>> resolver.has_property("locators")
    False
    """

    def __init__(
        self,
        location: LocationLike | None = None,
        *,
        overrides: OverrideSource | None = None,
        namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES,
        loader: PropertiesLoader | None = None,
    ) -> None:
        """Load *location* (if any) and remember the override source.

        Parameters
        ----------
        location:
            Located properties file, path, or URI. ``None`` yields an empty
            store.
        overrides:
            Override source consulted before the file. Defaults to
            :data:`os.environ`.
        namespaces:
            Naming schemes in precedence order.
        loader:
            Properties parser. Defaults to :class:`PropertiesFileLoader`.

        Raises
        ------
        PropertiesLoadError
            When *location* is invalid or cannot be read or parsed. There is no
            fallback to an empty store.
        """

        self._overrides: OverrideSource = overrides if overrides is not None else EnvironOverrideSource()
        self._namespaces: tuple[Namespace, ...] = tuple(namespaces)
        self._store = _load_store(location, loader if loader is not None else PropertiesFileLoader())

    @classmethod
    def from_search(
        cls,
        *,
        overrides: OverrideSource | None = None,
        namespaces: Sequence[Namespace] = DEFAULT_NAMESPACES,
        locator: FileLocator | None = None,
        loader: PropertiesLoader | None = None,
    ) -> PropertiesResolver:
        """Locate the properties file with :func:`find_properties_file` and load it.

        Side Effects
        ------------
        Clears the active trace identifier via :func:`bind_trace_id`.
        """

        bind_trace_id(None)
        source = overrides if overrides is not None else EnvironOverrideSource()
        location = find_properties_file(overrides=source, namespaces=namespaces, locator=locator)
        return cls(location, overrides=source, namespaces=namespaces, loader=loader)

    @property
    def store(self) -> PropertyStore:
        """Immutable contents of the loaded properties file."""

        return self._store

    @property
    def location(self) -> FileLocation | None:
        """Location the store was loaded from, ``None`` when no file was used."""

        return self._store.location

    @property
    def namespaces(self) -> tuple[Namespace, ...]:
        return self._namespaces

    def resolve(self, key: str) -> ResolvedProperty | None:
        """Return the winning value for *key* together with its source.

        Examples
        --------
        >>> resolver = PropertiesResolver(None, overrides={"geode.name": "a", "gemfire.name": "b"})
        >>> resolver.resolve("name")
        ResolvedProperty(key='name', value='a', layer='override', origin='geode.name')
        >>> resolver.resolve("missing") is None
        True
        """

        resolved = first_present(self._sources(key))
        if resolved is not None:
            log_debug("property_resolved", layer=resolved.layer, path=None, key=key, origin=resolved.origin)
        return resolved

    def get_property(self, key: str, *, default: str | None = None) -> str | None:
        """Return the value for *key*, or *default* when no source supplies one.

        Order: current namespace override, legacy namespace override, the
        properties file's raw ``key``.
        """

        resolved = self.resolve(key)
        return resolved.value if resolved is not None else default

    def has_property(self, key: str) -> bool:
        """Return ``True`` when any source supplies a value for *key*."""

        return self.get_property(key) is not None

    def has_non_blank_value(self, key: str) -> bool:
        """Return ``True`` when *key* resolves to a value with non-whitespace content.

        Examples
        --------
        >>> resolver = PropertiesResolver(None, overrides={"geode.name": "   "})
        >>> resolver.has_property("name"), resolver.has_non_blank_value("name")
        (True, False)
        """

        value = self.get_property(key)
        return value is not None and bool(value.strip())

    def specified_properties_file_name(self) -> str:
        """Return the file name requested through this resolver's override source."""

        return specified_file_name(self._overrides, self._namespaces)

    def _sources(self, key: str) -> list[Callable[[], ResolvedProperty | None]]:
        """Return lazy lookups in precedence order for *key*."""

        lookups: list[Callable[[], ResolvedProperty | None]] = [
            partial(self._from_override, key, namespace) for namespace in self._namespaces
        ]
        lookups.append(partial(self._from_store, key))
        return lookups

    def _from_override(self, key: str, namespace: Namespace) -> ResolvedProperty | None:
        override_key = namespace.key(key)
        value = self._overrides.get(override_key)
        if value is None:
            return None
        return ResolvedProperty(key=key, value=value, layer="override", origin=override_key)

    def _from_store(self, key: str) -> ResolvedProperty | None:
        value = self._store.get(key)
        if value is None:
            return None
        location = self._store.location
        return ResolvedProperty(key=key, value=value, layer="file", origin=location.uri if location else None)


def _load_store(location: LocationLike | None, loader: PropertiesLoader) -> PropertyStore:
    """Materialise the immutable store for *location*.

    ``None`` yields :data:`EMPTY_STORE`. Every other failure is raised as
    :class:`PropertiesLoadError`.
    """

    if location is None:
        log_info("properties_empty", layer="file", path=None)
        return EMPTY_STORE
    try:
        resolved = FileLocation.parse(location)
    except InvalidFormat as exc:
        log_error("properties_location_invalid", layer="file", path=str(location), error=str(exc))
        raise PropertiesLoadError(f"Invalid properties location {location}: {exc}", location=str(location)) from exc
    try:
        data = loader.load(resolved)
    except PropertiesLoadError:
        raise
    except (OSError, InvalidFormat) as exc:
        log_error("properties_file_unreadable", layer="file", path=resolved.uri, error=str(exc))
        raise PropertiesLoadError(f"Failed reading {resolved.uri}: {exc}", location=resolved.uri) from exc
    store = PropertyStore(data, location=resolved)
    log_info("properties_loaded", **make_event("file", resolved.uri, {"keys": len(store)}))
    return store


__all__ = [
    "PropertiesResolver",
    "find_properties_file",
    "specified_properties_file_name",
]
